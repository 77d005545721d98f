"""Base type aliases and enums shared across droute."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

#: Location identifier; an opaque non-negative integer.
NodeID = int

#: Unique key of a single road (edge) inside a graph.
EdgeID = int

#: Integer road distance or accumulated route distance.
Distance = int

#: A route as an ordered node sequence from warehouse to destination.
NodePath = Tuple[NodeID, ...]

#: A route with the parallel edges used at each hop:
#: ``((node, (edge_keys...)), ..., (dst, ()))``.
PathTuple = Tuple[Tuple[NodeID, Tuple[EdgeID, ...]], ...]


class OutputFormat(IntEnum):
    """Output formats supported by the renderer."""

    TEXT = 1
    JSON = 2

    @classmethod
    def from_string(cls, value: str) -> "OutputFormat":
        """Parse a string into an OutputFormat enum value.

        Args:
            value: Case-insensitive string name (e.g., "text", "JSON").

        Returns:
            The corresponding OutputFormat enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid output format '{value}'. Valid values are: {valid}"
            ) from None
