from __future__ import annotations


class RouteError(Exception):
    """Base exception for route computation failures."""


class ValidationError(RouteError, ValueError):
    """Raised when a query is rejected before any algorithm runs."""


class UnknownCityError(ValidationError):
    """Raised when a city is not a vertex of the graph."""

    def __init__(self, city: str) -> None:
        super().__init__(f"Unknown city: {city!r}")
        self.city = city


class InvalidChoiceError(ValidationError):
    """Raised for an algorithm and weight dimension that cannot be paired."""


class NegativeWeightError(RouteError, ValueError):
    """Raised when a Dijkstra variant is run over a negative weight dimension."""
