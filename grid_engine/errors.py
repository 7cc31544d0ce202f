"""Domain exceptions raised by the grid engine."""

from __future__ import annotations


class GridError(Exception):
    """Base class for every error the grid engine raises."""


class InvalidGridParameters(GridError):
    """Opening dimensions or grid divisions cannot produce a grid."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Grid validation failed: " + ", ".join(self.errors))


class InvalidMullionEdit(GridError):
    """A patch touches a field that does not apply to the mullion's type."""


class NotFound(GridError):
    """A requested record does not exist."""

    resource_type = "resource"

    def __init__(self, resource_id: str) -> None:
        self.resource_id = resource_id
        super().__init__(
            f"{self.resource_type.capitalize()} with ID '{resource_id}' not found"
        )


class OpeningNotFound(NotFound):
    resource_type = "opening"


class MullionNotFound(NotFound):
    resource_type = "mullion"


class GlassPanelNotFound(NotFound):
    resource_type = "glass panel"


class ConfigurationNotFound(NotFound):
    resource_type = "configuration"


class ConcurrentModification(GridError):
    """The record changed since the caller last read it."""

    def __init__(self, resource: str, expected: int, actual: int) -> None:
        self.resource = resource
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{resource} was modified concurrently "
            f"(expected version {expected}, found {actual})"
        )
