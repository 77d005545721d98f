import json

from droute.config import RouteConfig
from droute.engine import compute_routes
from droute.report import (
    format_result,
    format_route,
    render,
    render_text,
    results_to_dict,
)
from droute.types.base import OutputFormat
from droute.types.dto import RouteResult


def test_format_route():
    assert format_route((0, 1, 2)) == "0 -> 1 -> 2"
    assert format_route((0,)) == "0"


def test_format_route_custom_separator():
    assert format_route((0, 1), RouteConfig(route_separator="/")) == "0/1"


def test_format_single_route():
    result = RouteResult(1, 10, ((0, 1),))
    assert (
        format_result(result)
        == "Delivery Location 1 - Shortest Route: 0 -> 1, Distance: 10"
    )


def test_format_tied_routes():
    result = RouteResult(2, 15, ((0, 2), (0, 1, 2)))
    assert format_result(result) == (
        "Delivery Location 2 - Shortest Route: 0 -> 2 or 0 -> 1 -> 2, Distance: 15"
    )


def test_format_unreachable():
    assert format_result(RouteResult.unreachable(4)) == (
        "Delivery Location 4 - Shortest Route: No route exists, Distance: Infinity "
        "(Location 4 is unreachable from the central warehouse)"
    )


def test_render_text_sorted_by_location(city_a_isolated):
    city_a_isolated.add_edge(9, 0, 1)
    text = render_text(compute_routes(city_a_isolated, 0))
    lines = text.splitlines()
    assert [line.split(" - ")[0] for line in lines] == [
        "Delivery Location 1",
        "Delivery Location 2",
        "Delivery Location 3",
        "Delivery Location 4",
        "Delivery Location 9",
    ]
    assert lines[2].endswith("0 -> 2 -> 3 or 0 -> 1 -> 2 -> 3, Distance: 27")


def test_results_to_dict(city_a_isolated):
    data = results_to_dict(compute_routes(city_a_isolated, 0), 0)
    assert data["warehouse"] == 0
    assert data["summary"] == {
        "locations": 4,
        "reachable": 3,
        "unreachable": 1,
        "routes": 5,
    }
    assert data["locations"][1] == {
        "destination": 2,
        "reachable": True,
        "distance": 15,
        "routes": [[0, 2], [0, 1, 2]],
    }
    assert data["locations"][3] == {
        "destination": 4,
        "reachable": False,
        "distance": None,
        "routes": [],
    }


def test_render_json_round_trips(city_a):
    results = compute_routes(city_a, 0)
    payload = json.loads(render(results, 0, OutputFormat.JSON))
    assert payload == results_to_dict(results, 0)


def test_render_text_default(city_a):
    results = compute_routes(city_a, 0)
    assert render(results, 0) == render_text(results)
