"""YAML scenario files describing a warehouse, its locations and roads.

A scenario is parsed with PyYAML, shape-checked against the packaged JSON
schema ``droute/schemas/scenario.json`` and then validated with the same rules
as interactive input. Example::

    name: downtown
    warehouse: 0
    locations: 3
    roads:
      - [0, 1, 10]
      - {source: 1, target: 2, distance: 5}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from droute.config import ROUTE_CONFIG
from droute.engine import ShortestRouteEngine
from droute.exceptions import InputValidationError
from droute.graph.digraph import WeightedDigraph
from droute.io import Road, build_city_graph, check_road_count, validate_location
from droute.logging import get_logger
from droute.types.base import NodeID
from droute.types.dto import RouteResult

logger = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("droute.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _require_int(value: Any, what: str) -> int:
    # JSON Schema accepts 2.0 as an "integer"; the graph only takes real ints
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputValidationError(f"{what} must be an integer, got {value!r}")
    return value


def _road_from_entry(entry: Any) -> Road:
    if isinstance(entry, dict):
        values = (entry["source"], entry["target"], entry["distance"])
    else:
        values = tuple(entry)
    names = ("source", "target", "distance")
    return Road(*(_require_int(v, name) for v, name in zip(values, names)))


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a scenario YAML string.

    Returns:
        A canonical dictionary with ``name``, ``warehouse``, ``locations`` and
        ``roads`` (a list of `Road`).

    Raises:
        ValueError: If the YAML does not map to a dictionary.
        jsonschema.ValidationError: If the document does not match the schema.
        InputValidationError: If a road or the warehouse fails semantic checks.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())

    warehouses = _require_int(
        data.get("warehouses", ROUTE_CONFIG.required_warehouses), "warehouses"
    )
    if not ROUTE_CONFIG.validate_warehouse_count(warehouses):
        raise InputValidationError(
            f"Number of warehouses must be {ROUTE_CONFIG.required_warehouses}"
        )

    locations = _require_int(data["locations"], "locations")
    warehouse = _require_int(
        data.get("warehouse", ROUTE_CONFIG.default_warehouse), "warehouse"
    )
    validate_location(warehouse, locations)

    roads: List[Road] = []
    for idx, entry in enumerate(data["roads"]):
        try:
            road = _road_from_entry(entry)
            validate_location(road.source, locations)
            validate_location(road.destination, locations)
            if road.distance <= 0:
                raise InputValidationError("Distance cannot be negative or zero")
        except InputValidationError as exc:
            raise InputValidationError(f"Road {idx}: {exc}") from exc
        roads.append(road)
    check_road_count(locations, len(roads))

    return {
        "name": data.get("name"),
        "warehouse": warehouse,
        "locations": locations,
        "roads": roads,
    }


@dataclass
class Scenario:
    """A validated delivery scenario.

    Attributes:
        locations: Highest delivery location id; locations are ``0..locations``.
        roads: Roads in file order.
        warehouse: Source location of every route.
        name: Optional scenario name.
    """

    locations: int
    roads: List[Road] = field(default_factory=list)
    warehouse: NodeID = ROUTE_CONFIG.default_warehouse
    name: Optional[str] = None

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Build a Scenario from YAML text."""
        return cls(**load_scenario_yaml(yaml_str))

    def build_graph(self) -> WeightedDigraph:
        return build_city_graph(self.roads, self.locations)

    def run(
        self, engine: Optional[ShortestRouteEngine] = None
    ) -> Dict[NodeID, RouteResult]:
        """Compute routes from the warehouse to every other location."""
        engine = engine or ShortestRouteEngine()
        graph = self.build_graph()
        logger.info(
            f"Computing routes for scenario '{self.name or 'unnamed'}': "
            f"{graph.number_of_nodes()} locations, {graph.number_of_edges()} roads"
        )
        return engine.compute(graph, self.warehouse)
