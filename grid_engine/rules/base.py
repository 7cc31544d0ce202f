"""Contract shared by the mullion and panel rules.

A rule owns one family of grid members (verticals, the perimeter frame,
horizontal rows, glazing, the transom). It reads the boundaries the
analyzer laid out in the ``GridContext`` and returns new members; it never
edits members produced by another rule.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Union

from grid_engine.models.context import GridContext
from grid_engine.models.grid import GlassPanel, Mullion

GridMember = Union[Mullion, GlassPanel]


class GridRule(ABC):
    """
    One family of grid members.

    ``priority`` orders independent rules (lower runs earlier);
    ``dependencies`` lists rule ids whose members must already be in the
    context, e.g. the transom row reuses the glazing columns.
    """

    priority: int = 100
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Dotted id, ``<family>.<member>``, used in generation configs."""

    @abstractmethod
    def get_name(self) -> str:
        ...

    def applies(self, context: GridContext) -> bool:
        """Whether the opening has anything for this rule to produce."""
        return True

    @abstractmethod
    def generate(self, context: GridContext) -> list[GridMember]:
        ...

    def describe(self) -> dict[str, object]:
        return {
            "id": self.get_id(),
            "name": self.get_name(),
            "priority": self.priority,
            "dependencies": list(self.dependencies),
        }
