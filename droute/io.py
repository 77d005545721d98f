"""Input collection: parse and validate user-typed counts and road lines.

These helpers turn raw text into validated integers and `Road` triples before
any graph is built. Every rejection raises `InputValidationError` carrying a
short, user-facing message.
"""

from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple

from droute.config import ROUTE_CONFIG
from droute.exceptions import InputValidationError
from droute.graph.digraph import WeightedDigraph
from droute.types.base import Distance, NodeID

_INT_RE = re.compile(r"[+-]?\d+")


class Road(NamedTuple):
    """A validated road as typed by the user."""

    source: NodeID
    destination: NodeID
    distance: Distance


def _to_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(text)
    return int(text)


def _parse_number(text: str, what: str) -> int:
    cleaned = re.sub(r"\s+", "", text)
    if not cleaned:
        raise InputValidationError("Cannot have an empty input")
    try:
        return _to_int(cleaned)
    except ValueError:
        raise InputValidationError(f"Number of {what} must be a number") from None


def parse_count(text: str, what: str) -> int:
    """Parse a count such as the number of delivery locations.

    All whitespace is removed before parsing, so ``" 1 2 "`` reads as 12.

    Args:
        text: Raw user input.
        what: Plural noun used in messages, e.g. ``"delivery locations"``.

    Raises:
        InputValidationError: On empty, non-numeric or negative input.
    """
    value = _parse_number(text, what)
    if value < 0:
        raise InputValidationError(f"Number of {what} cannot be negative")
    return value


def parse_warehouse_count(text: str) -> int:
    """Parse the number of warehouses; only a single warehouse is supported."""
    count = _parse_number(text, "warehouses")
    if not ROUTE_CONFIG.validate_warehouse_count(count):
        raise InputValidationError(
            f"Number of warehouses must be {ROUTE_CONFIG.required_warehouses}"
        )
    return count


def check_road_count(locations: int, roads: int) -> None:
    """Reject more than one road when there are fewer than two delivery locations."""
    if locations < 2 and roads > 1:
        raise InputValidationError(
            "Less than 2 delivery locations, but greater than 1 road"
        )


def parse_road(line: str, locations: int) -> Road:
    """Parse one ``"source destination distance"`` line.

    Values are checked left to right, so the first offending value decides
    the message.

    Args:
        line: Raw user input.
        locations: Highest valid location id.

    Raises:
        InputValidationError: If the line is not three integers, a location is
            negative or above ``locations``, or the distance is not positive.
    """
    parts = line.split()
    if len(parts) != 3:
        raise InputValidationError("Must provide 3 numbers")

    values: List[int] = []
    for idx, part in enumerate(parts):
        try:
            value = _to_int(part)
        except ValueError:
            raise InputValidationError("Non-integer value(s) provided") from None
        if idx < 2:
            validate_location(value, locations)
        elif value <= 0:
            raise InputValidationError("Distance cannot be negative or zero")
        values.append(value)
    return Road(*values)


def validate_location(location: int, locations: int) -> None:
    """Check that ``location`` lies within ``0..locations``."""
    if location < 0:
        raise InputValidationError("Locations cannot be negative")
    if location > locations:
        raise InputValidationError(
            "Starting or destination location does not exist"
        )


def read_roads(lines: Iterable[str], locations: int) -> List[Road]:
    """Parse road lines, skipping blank lines and ``#`` comments.

    Raises:
        InputValidationError: For the first invalid line; the message is
            prefixed with its 1-based line number.
    """
    roads: List[Road] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            roads.append(parse_road(line, locations))
        except InputValidationError as exc:
            raise InputValidationError(f"Line {lineno}: {exc}") from exc
    check_road_count(locations, len(roads))
    return roads


def build_city_graph(roads: Iterable[Road], locations: int) -> WeightedDigraph:
    """Build the road graph and make sure every location ``0..locations`` exists.

    Locations without any road are still added so that they are reported as
    unreachable instead of being silently dropped.
    """
    return WeightedDigraph.from_roads(roads, locations=range(locations + 1))
