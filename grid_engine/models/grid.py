"""Grid output models: mullions, glass panels, and the grid aggregate."""

from __future__ import annotations
import uuid
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Point2D, Rect, Segment
from .opening import Opening
from .parameters import GenerationConfig


STANDARD_GLASS = "Standard Glass"
TRANSOM_GLASS = "Transom Glass"


def new_id() -> str:
    return uuid.uuid4().hex


class GridType(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    SILL = "sill"
    HEAD = "head"
    JAMB_LEFT = "jamb_left"
    JAMB_RIGHT = "jamb_right"

    @property
    def runs_vertically(self) -> bool:
        return self in (GridType.VERTICAL, GridType.JAMB_LEFT, GridType.JAMB_RIGHT)

    @property
    def is_segmentable(self) -> bool:
        """Horizontal-type members split into per-column segments."""
        return self in (GridType.HORIZONTAL, GridType.SILL, GridType.HEAD)

    @property
    def is_positionable(self) -> bool:
        """Members whose perpendicular position the user may override."""
        return self in (GridType.VERTICAL, GridType.HORIZONTAL)


class Mullion(BaseModel):
    """A structural division line within an opening."""
    id: str = Field(default_factory=new_id)
    opening_id: str = ""
    grid_type: GridType
    grid_column: int | None = None
    grid_row: int | None = None
    grid_segment: int | None = None
    component_name: str = ""
    length: float = 0.0                   # Feet, always derived from endpoints
    custom_position: float | None = None  # Feet along the perpendicular axis
    start_x: float | None = None
    end_x: float | None = None
    is_active: bool = True
    notes: str | None = None
    revision: int = 0

    def default_position(self, opening: Opening) -> float:
        """Grid-derived position, ignoring any override."""
        if self.grid_type == GridType.VERTICAL:
            return (self.grid_column or 0) * opening.width / opening.grid_columns
        if self.grid_type == GridType.HORIZONTAL:
            return (self.grid_row or 0) * opening.effective_height / opening.grid_rows
        if self.grid_type == GridType.HEAD:
            return opening.height
        if self.grid_type == GridType.JAMB_RIGHT:
            return opening.width
        return 0.0

    def effective_position(self, opening: Opening) -> float:
        """X for vertical-running members, Y for horizontal-running ones."""
        if self.custom_position is not None and self.grid_type.is_positionable:
            return self.custom_position
        return self.default_position(opening)

    def span(self, opening: Opening) -> Segment:
        """Extent along the member's running axis."""
        if self.grid_type.runs_vertically:
            return Segment(start=0.0, end=opening.height)
        start = self.start_x if self.start_x is not None else 0.0
        end = self.end_x if self.end_x is not None else opening.width
        return Segment(start=start, end=end)

    def endpoints(self, opening: Opening) -> tuple[Point2D, Point2D]:
        position = self.effective_position(opening)
        span = self.span(opening)
        if self.grid_type.runs_vertically:
            return Point2D(x=position, y=span.start), Point2D(x=position, y=span.end)
        return Point2D(x=span.start, y=position), Point2D(x=span.end, y=position)

    def computed_length(self, opening: Opening) -> float:
        return self.span(opening).length


class GlassPanel(BaseModel):
    """A glazing infill rectangle; x/y is the lower-left corner in feet."""
    id: str = Field(default_factory=new_id)
    opening_id: str = ""
    grid_column: int
    grid_row: int
    x: float
    y: float
    width: float
    height: float
    is_transom: bool = False
    is_active: bool = True
    glass_type: str = STANDARD_GLASS

    @property
    def rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)

    @property
    def area(self) -> float:
        return self.width * self.height


class GridState(BaseModel):
    """
    The complete grid of one opening.

    Command handlers never mutate a state in place; they return a new
    one (see ``grid_engine.core.mutation``).
    """
    opening: Opening
    mullions: list[Mullion] = []
    glass_panels: list[GlassPanel] = []
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    version: int = 0

    def get_mullion(self, mullion_id: str) -> Mullion | None:
        for m in self.mullions:
            if m.id == mullion_id:
                return m
        return None

    def get_glass_panel(self, panel_id: str) -> GlassPanel | None:
        for p in self.glass_panels:
            if p.id == panel_id:
                return p
        return None

    def mullions_of_type(self, grid_type: GridType, active_only: bool = False) -> list[Mullion]:
        return [
            m for m in self.mullions
            if m.grid_type == grid_type and (m.is_active or not active_only)
        ]

    def with_mullions(self, replacements: list[Mullion]) -> GridState:
        by_id = {m.id: m for m in replacements}
        return self.model_copy(update={
            "mullions": [by_id.get(m.id, m) for m in self.mullions],
        })

    def with_glass_panel(self, panel: GlassPanel) -> GridState:
        return self.model_copy(update={
            "glass_panels": [panel if p.id == panel.id else p for p in self.glass_panels],
        })
