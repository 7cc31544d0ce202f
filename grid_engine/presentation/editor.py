"""Interactive editor session: hover, selection and drag-to-reposition.

Session state lives only in the presentation layer and is never persisted.
A drag moves the mullion locally on every pointer move and yields a single
``MoveCommit`` on release, which the caller sends to the mutation engine.
"""

from __future__ import annotations
import logging

from pydantic import BaseModel

from grid_engine.core.mutation import axis_extent
from grid_engine.models import GridState, Mullion, clamp
from grid_engine.presentation.projection import (
    CanvasProjection, ProjectedMullion, hit_test,
)

logger = logging.getLogger(__name__)


class MoveCommit(BaseModel):
    """The final position of a drag gesture, ready to persist."""
    mullion_id: str
    new_position: float


class _Drag(BaseModel):
    mullion_id: str
    start_px: float
    start_py: float
    start_position: float


class GridEditorSession:
    """Pointer-driven editing of one grid, projected onto a canvas."""

    def __init__(self, state: GridState, projection: CanvasProjection | None = None) -> None:
        self.state = state
        self.projection = projection or CanvasProjection.for_opening(state.opening)
        self.hovered_id: str | None = None
        self.selected_id: str | None = None
        self._drag: _Drag | None = None

    def lines(self) -> list[ProjectedMullion]:
        opening = self.state.opening
        return [
            self.projection.project_mullion(
                m, opening,
                selected=m.id == self.selected_id,
                hovered=m.id == self.hovered_id,
            )
            for m in self.state.mullions
        ]

    @property
    def selected(self) -> Mullion | None:
        if self.selected_id is None:
            return None
        return self.state.get_mullion(self.selected_id)

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    def pointer_move(self, px: float, py: float) -> str | None:
        """Update hover from the pointer; continues an active drag."""
        if self._drag is not None:
            self.drag_to(px, py)
            return self.hovered_id
        self.hovered_id = hit_test(self.lines(), px, py)
        return self.hovered_id

    def click(self, px: float, py: float) -> Mullion | None:
        """Select the mullion under the pointer, or clear the selection."""
        self.selected_id = hit_test(self.lines(), px, py)
        return self.selected

    def begin_drag(self, px: float, py: float) -> bool:
        """Start moving the positionable mullion under the pointer."""
        mullion_id = hit_test(self.lines(), px, py)
        if mullion_id is None:
            return False
        mullion = self.state.get_mullion(mullion_id)
        if mullion is None or not mullion.grid_type.is_positionable:
            return False
        self._drag = _Drag(
            mullion_id=mullion_id,
            start_px=px,
            start_py=py,
            start_position=mullion.effective_position(self.state.opening),
        )
        self.selected_id = mullion_id
        return True

    def drag_to(self, px: float, py: float) -> float | None:
        """Move the dragged mullion locally; returns its new position in feet."""
        if self._drag is None:
            return None
        mullion = self.state.get_mullion(self._drag.mullion_id)
        if mullion is None:
            self._drag = None
            return None

        scale = self.projection.scale
        if mullion.grid_type.runs_vertically:
            position = self._drag.start_position + (px - self._drag.start_px) / scale
        else:
            # Pixel Y grows downward, feet Y grows upward
            position = self._drag.start_position - (py - self._drag.start_py) / scale
        position = clamp(position, 0.0, axis_extent(mullion.grid_type, self.state.opening))

        local = mullion.model_copy(update={"custom_position": position})
        self.state = self.state.with_mullions([local])
        return position

    def end_drag(self) -> MoveCommit | None:
        """Finish the gesture; returns the one commit to persist, if any."""
        if self._drag is None:
            return None
        drag = self._drag
        self._drag = None
        mullion = self.state.get_mullion(drag.mullion_id)
        if mullion is None:
            return None
        position = mullion.effective_position(self.state.opening)
        if position == drag.start_position:
            return None
        logger.debug("Drag of mullion %s ended at %.3f ft", drag.mullion_id, position)
        return MoveCommit(mullion_id=drag.mullion_id, new_position=position)

    def cancel_drag(self, state: GridState) -> None:
        """Abandon the gesture and fall back to the last committed state."""
        self._drag = None
        self.state = state
