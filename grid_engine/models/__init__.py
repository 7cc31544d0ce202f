from .geometry import Point2D, Segment, Rect, clamp, span_length, divide_extent
from .parameters import (
    GridParams, ComponentNames, GenerationConfig,
    MIN_GRID_DIVISIONS, MAX_GRID_DIVISIONS,
    MIN_MULLION_WIDTH, MAX_MULLION_WIDTH, DEFAULT_MULLION_WIDTH, MIN_PANEL_SIZE,
)
from .opening import Opening
from .grid import (
    GridType, Mullion, GlassPanel, GridState,
    STANDARD_GLASS, TRANSOM_GLASS, new_id,
)
from .statistics import GridStats, TypeCount
from .configuration import GridConfiguration
from .context import GridContext

__all__ = [
    "Point2D", "Segment", "Rect", "clamp", "span_length", "divide_extent",
    "GridParams", "ComponentNames", "GenerationConfig",
    "MIN_GRID_DIVISIONS", "MAX_GRID_DIVISIONS",
    "MIN_MULLION_WIDTH", "MAX_MULLION_WIDTH", "DEFAULT_MULLION_WIDTH", "MIN_PANEL_SIZE",
    "Opening",
    "GridType", "Mullion", "GlassPanel", "GridState",
    "STANDARD_GLASS", "TRANSOM_GLASS", "new_id",
    "GridStats", "TypeCount",
    "GridConfiguration",
    "GridContext",
]
