"""Projection of feet-based grid geometry onto a pixel canvas.

Feet Y grows upward from the sill; pixel Y grows downward from the top of
the canvas, so every Y coordinate is flipped on the way through.
"""

from __future__ import annotations
import math

from pydantic import BaseModel, Field

from grid_engine.models import GlassPanel, GridState, Mullion, Opening
from grid_engine.utils.config import Config

DEFAULT_PADDING = 50.0      # Pixels around the opening
MIN_STROKE_WIDTH = 2.0
SELECTED_STROKE_WIDTH = 4.0
HOVERED_STROKE_WIDTH = 3.0
MIN_HIT_WIDTH = 16.0
HIT_PADDING = 10.0
INACTIVE_OPACITY = 0.4


class ProjectedMullion(BaseModel):
    """A mullion as a pixel line plus its enlarged, invisible hit region."""
    mullion_id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float
    hit_width: float
    dashed: bool = False
    opacity: float = 1.0

    def distance_to(self, px: float, py: float) -> float:
        """Shortest distance from a pixel to the line segment."""
        dx = self.x2 - self.x1
        dy = self.y2 - self.y1
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return math.hypot(px - self.x1, py - self.y1)
        t = ((px - self.x1) * dx + (py - self.y1) * dy) / length_sq
        t = max(0.0, min(1.0, t))
        return math.hypot(px - (self.x1 + t * dx), py - (self.y1 + t * dy))

    def hit(self, px: float, py: float) -> bool:
        return self.distance_to(px, py) <= self.hit_width / 2


class ProjectedPanel(BaseModel):
    """A glass panel as a pixel rectangle anchored at its top-left corner."""
    panel_id: str
    x: float
    y: float
    width: float
    height: float
    opacity: float = 1.0


class CanvasProjection(BaseModel):
    """Maps an opening's feet coordinates to pixels at a fixed scale."""
    opening_width: float
    opening_height: float
    mullion_width: float = 2.5      # Inches
    scale: float = Field(default_factory=lambda: Config.DEFAULT_CANVAS_SCALE)   # Pixels per foot
    padding: float = DEFAULT_PADDING

    @classmethod
    def for_opening(cls, opening: Opening, scale: float | None = None) -> CanvasProjection:
        return cls(
            opening_width=opening.width,
            opening_height=opening.height,
            mullion_width=opening.mullion_width,
            scale=scale if scale is not None else Config.DEFAULT_CANVAS_SCALE,
        )

    @property
    def offset_x(self) -> float:
        return self.padding

    @property
    def offset_y(self) -> float:
        return self.padding

    @property
    def scaled_width(self) -> float:
        return self.opening_width * self.scale

    @property
    def scaled_height(self) -> float:
        return self.opening_height * self.scale

    @property
    def canvas_size(self) -> tuple[float, float]:
        return self.scaled_width + 2 * self.padding, self.scaled_height + 2 * self.padding

    @property
    def base_stroke_width(self) -> float:
        return max(MIN_STROKE_WIDTH, self.mullion_width * self.scale / 12)

    def to_pixel(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.offset_x + x * self.scale,
            self.offset_y + self.scaled_height - y * self.scale,
        )

    def to_feet(self, px: float, py: float) -> tuple[float, float]:
        return (
            (px - self.offset_x) / self.scale,
            (self.offset_y + self.scaled_height - py) / self.scale,
        )

    def project_mullion(
        self,
        mullion: Mullion,
        opening: Opening,
        selected: bool = False,
        hovered: bool = False,
    ) -> ProjectedMullion:
        start, end = mullion.endpoints(opening)
        x1, y1 = self.to_pixel(start.x, start.y)
        x2, y2 = self.to_pixel(end.x, end.y)

        if selected:
            stroke = SELECTED_STROKE_WIDTH
        elif hovered:
            stroke = HOVERED_STROKE_WIDTH
        else:
            stroke = self.base_stroke_width

        return ProjectedMullion(
            mullion_id=mullion.id,
            x1=x1, y1=y1, x2=x2, y2=y2,
            stroke_width=stroke,
            # Hit width is independent of hover/selection so the region
            # under a stationary pointer never changes size.
            hit_width=max(MIN_HIT_WIDTH, self.base_stroke_width + HIT_PADDING),
            dashed=not mullion.is_active,
            opacity=1.0 if mullion.is_active else INACTIVE_OPACITY,
        )

    def project_panel(self, panel: GlassPanel) -> ProjectedPanel:
        # Top-left pixel corner is the panel's top edge in feet
        px, py = self.to_pixel(panel.x, panel.y + panel.height)
        return ProjectedPanel(
            panel_id=panel.id,
            x=px,
            y=py,
            width=panel.width * self.scale,
            height=panel.height * self.scale,
            opacity=1.0 if panel.is_active else INACTIVE_OPACITY,
        )

    def project_grid(self, state: GridState) -> tuple[list[ProjectedMullion], list[ProjectedPanel]]:
        return (
            [self.project_mullion(m, state.opening) for m in state.mullions],
            [self.project_panel(p) for p in state.glass_panels],
        )


def hit_test(lines: list[ProjectedMullion], px: float, py: float) -> str | None:
    """
    Resolve a pointer position to at most one mullion.

    The nearest line whose hit region contains the point wins; equal
    distances go to the earliest line, so the answer is stable.
    """
    best_id: str | None = None
    best_distance = math.inf
    for line in lines:
        if not line.hit(px, py):
            continue
        d = line.distance_to(px, py)
        if d < best_distance:
            best_id = line.mullion_id
            best_distance = d
    return best_id
