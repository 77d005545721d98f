"""Configuration defaults for route computation and rendering."""

from dataclasses import dataclass


@dataclass
class RouteConfig:
    """Defaults shared by the input collector, the renderer and the CLI."""

    # Node id of the central warehouse when a scenario does not name one
    default_warehouse: int = 0

    # Only single-source computations are supported
    required_warehouses: int = 1

    # Separator between consecutive locations of one route
    route_separator: str = " -> "

    # Separator between alternative routes of equal distance
    alternative_separator: str = " or "

    def validate_warehouse_count(self, count: int) -> bool:
        """Return True when ``count`` matches the supported number of warehouses."""
        return count == self.required_warehouses


# Global configuration instance
ROUTE_CONFIG = RouteConfig()
