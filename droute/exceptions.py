"""Exception and warning types raised by droute."""

from __future__ import annotations


class RouteError(Exception):
    """Base class for droute errors."""


class InvalidWeightError(RouteError, ValueError):
    """An edge was supplied with a non-positive or non-integer weight."""


class InputValidationError(RouteError, ValueError):
    """User-supplied input was rejected before any graph was built."""


class RouteInvariantError(RouteError):
    """A predecessor does not lie strictly closer to the source than its successor."""


class ComputationAborted(RouteError):
    """Route enumeration exceeded a caller-imposed time budget."""


class UnknownSourceWarning(UserWarning):
    """The requested source node is not part of the graph."""
