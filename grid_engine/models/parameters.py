"""Grid parameters, their bounds, and generation configuration."""

from __future__ import annotations
import logging
import math

from pydantic import BaseModel

from grid_engine.errors import InvalidGridParameters
from .geometry import clamp

logger = logging.getLogger(__name__)


MIN_GRID_DIVISIONS = 1
MAX_GRID_DIVISIONS = 20
MIN_MULLION_WIDTH = 0.5     # Inches
MAX_MULLION_WIDTH = 6.0     # Inches
DEFAULT_MULLION_WIDTH = 2.5
MIN_PANEL_SIZE = 0.5        # Feet (6 inches)


class GridParams(BaseModel):
    """Column/row count and mullion width driving default generation."""
    columns: int = 1
    rows: int = 1
    mullion_width: float = DEFAULT_MULLION_WIDTH  # Inches

    @classmethod
    def clamped(cls, columns: int, rows: int, mullion_width: float) -> GridParams:
        """Silently pull out-of-range values back into the supported bounds."""
        if not math.isfinite(mullion_width):
            raise InvalidGridParameters([f"Mullion width must be a finite number, got {mullion_width}"])
        params = cls(
            columns=int(clamp(columns, MIN_GRID_DIVISIONS, MAX_GRID_DIVISIONS)),
            rows=int(clamp(rows, MIN_GRID_DIVISIONS, MAX_GRID_DIVISIONS)),
            mullion_width=clamp(mullion_width, MIN_MULLION_WIDTH, MAX_MULLION_WIDTH),
        )
        if (params.columns, params.rows, params.mullion_width) != (columns, rows, mullion_width):
            logger.info(
                "Clamped grid parameters %s x %s @ %s in to %s x %s @ %s in",
                columns, rows, mullion_width,
                params.columns, params.rows, params.mullion_width,
            )
        return params


class ComponentNames(BaseModel):
    """Labels stamped on generated mullions, per family."""
    sill: str = "Sill"
    head: str = "Head"
    jambs: str = "Jamb"
    verticals: str = "Vertical"
    horizontals: str = "Horizontal"


class GenerationConfig(BaseModel):
    """Controls which rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
