"""Grid context: accumulates state during grid generation."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .grid import GlassPanel, Mullion
from .opening import Opening
from .parameters import GenerationConfig


class GridContext(BaseModel):
    """
    Holds all state during a single generation pass.

    The analyzer fills in the column/row boundaries.
    Rules add generated mullions and panels.
    The generator orchestrates the flow.
    """
    # Input
    opening: Opening
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    column_boundaries: list[float] = []
    row_boundaries: list[float] = []

    # Output (populated by rules)
    mullions: list[Mullion] = []
    glass_panels: list[GlassPanel] = []

    @property
    def column_segments(self) -> list[tuple[float, float]]:
        """Consecutive (start, end) pairs between jambs and verticals."""
        xs = self.column_boundaries
        return list(zip(xs[:-1], xs[1:]))

    def add_mullions(self, mullions: list[Mullion]) -> None:
        self.mullions.extend(mullions)

    def add_glass_panels(self, panels: list[GlassPanel]) -> None:
        self.glass_panels.extend(panels)
