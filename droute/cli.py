"""Command-line interface for droute."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Callable, Dict, List, Optional

from droute.engine import ShortestRouteEngine
from droute.exceptions import InputValidationError
from droute.io import (
    build_city_graph,
    check_road_count,
    parse_count,
    parse_road,
    parse_warehouse_count,
    read_roads,
)
from droute.logging import get_logger, set_global_log_level
from droute.report import render, results_to_dict
from droute.scenario import Scenario
from droute.types.base import NodeID, OutputFormat
from droute.types.dto import RouteResult

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _fail(message: str) -> None:
    logger.error(message)
    print(f"❌ ERROR: {message}")
    sys.exit(1)


def _emit(
    results: Dict[NodeID, RouteResult],
    warehouse: NodeID,
    output_format: OutputFormat,
    results_path: Optional[Path],
) -> None:
    """Print the report and optionally write JSON results to ``results_path``.

    In JSON mode stdout carries only the JSON document; the confirmation line
    goes to stderr.
    """
    print(render(results, warehouse, output_format))
    if results_path is not None:
        results_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing results to: {results_path}")
        results_path.write_text(
            json.dumps(results_to_dict(results, warehouse), indent=2)
        )
        status = sys.stderr if output_format == OutputFormat.JSON else sys.stdout
        print(f"✅ Results written to: {results_path}", file=status)


def _run_scenario(
    path: Path,
    engine: ShortestRouteEngine,
    output_format: OutputFormat,
    results_path: Optional[Path],
) -> None:
    """Run a scenario YAML file and print the route report."""
    logger.info(f"Loading scenario from: {path}")
    started = perf_counter()
    try:
        scenario = Scenario.from_yaml(path.read_text())
        results = scenario.run(engine)
    except FileNotFoundError:
        _fail(f"Scenario file not found: {path}")
        return
    except Exception as e:
        _fail(f"Failed to run scenario: {type(e).__name__}: {e}")
        return

    _emit(results, scenario.warehouse, output_format, results_path)
    logger.info(
        f"Scenario run completed successfully in {_format_duration(perf_counter() - started)}"
    )


def _run_roads(
    path: Path,
    locations: int,
    warehouse: NodeID,
    engine: ShortestRouteEngine,
    output_format: OutputFormat,
    results_path: Optional[Path],
) -> None:
    """Read a plain road list (one ``source destination distance`` per line)."""
    logger.info(f"Loading roads from: {path}")
    try:
        if locations < 0:
            raise InputValidationError("Number of delivery locations cannot be negative")
        roads = read_roads(path.read_text().splitlines(), locations)
        graph = build_city_graph(roads, locations)
        results = engine.compute(graph, warehouse)
    except FileNotFoundError:
        _fail(f"Road file not found: {path}")
        return
    except Exception as e:
        _fail(f"Failed to compute routes: {type(e).__name__}: {e}")
        return

    _emit(results, warehouse, output_format, results_path)


def _run_prompt(
    engine: ShortestRouteEngine,
    output_format: OutputFormat,
    read: Optional[Callable[[str], str]] = None,
) -> None:
    """Ask for warehouses, locations and roads interactively, then print routes.

    The warehouse is always location 0.
    """
    read = read or input
    try:
        parse_warehouse_count(read("Number of Warehouses (Always 1): "))
        locations = parse_count(read("Number of Delivery Locations: "), "delivery locations")
        num_roads = parse_count(
            read("Number of Roads Connecting Locations: "),
            "roads connecting locations",
        )
        check_road_count(locations, num_roads)
        print(
            "Enter the Starting Location, Destination Location, and Distance. "
            "Include a space between each input. Press ENTER to start the next "
            f"entry. Will repeat {num_roads} times:"
        )
        roads = [parse_road(read(""), locations) for _ in range(num_roads)]
    except InputValidationError as e:
        _fail(str(e))
        return
    except EOFError:
        _fail("Input ended before all values were provided")
        return

    graph = build_city_graph(roads, locations)
    print()
    _emit(engine.compute(graph, 0), 0, output_format, None)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``droute`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="droute",
        description="Compute every shortest delivery route from a warehouse.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,roads,prompt}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a scenario YAML file")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    roads_parser = subparsers.add_parser(
        "roads", help="Compute routes for a plain road list"
    )
    roads_parser.add_argument(
        "roads", type=Path, help="File with one 'source destination distance' per line"
    )
    roads_parser.add_argument(
        "--locations",
        "-n",
        type=int,
        required=True,
        help="Number of delivery locations (ids 0..N)",
    )
    roads_parser.add_argument(
        "--warehouse", "-w", type=int, default=0, help="Warehouse location id"
    )

    prompt_parser = subparsers.add_parser(
        "prompt", help="Enter locations and roads interactively"
    )

    for p in (run_parser, roads_parser, prompt_parser):
        p.add_argument(
            "--format",
            "-f",
            choices=["text", "json"],
            default="text",
            help="Report format (default: text)",
        )
        p.add_argument(
            "--single",
            action="store_true",
            help="Report one shortest route per location instead of all tied routes",
        )
        p.add_argument(
            "--deadline",
            type=float,
            default=None,
            help="Abort route enumeration after this many seconds",
        )
    for p in (run_parser, roads_parser):
        p.add_argument(
            "--results",
            "-r",
            type=Path,
            default=None,
            help="Also write JSON results to this file",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        engine = ShortestRouteEngine(multipath=not args.single, deadline=args.deadline)
    except ValueError as e:
        _fail(str(e))
        return
    output_format = OutputFormat.from_string(args.format)

    if args.command == "run":
        _run_scenario(args.scenario, engine, output_format, args.results)
    elif args.command == "roads":
        _run_roads(
            args.roads,
            args.locations,
            args.warehouse,
            engine,
            output_format,
            args.results,
        )
    elif args.command == "prompt":
        _run_prompt(engine, output_format)


if __name__ == "__main__":
    main()
