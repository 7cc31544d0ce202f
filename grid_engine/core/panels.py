"""Panel redraw: rebuild glass rectangles from the current mullion layout.

Mullion edits never move panels on their own. Redrawing is an explicit
step the user takes once they are done repositioning mullions.
"""

from __future__ import annotations
import logging

from grid_engine.models import (
    GlassPanel, GridState, GridType,
    STANDARD_GLASS, TRANSOM_GLASS,
)
from grid_engine.models.geometry import EPSILON

logger = logging.getLogger(__name__)


def _boundaries(values: list[float], lower: float, upper: float) -> list[float]:
    """Sorted, de-duplicated cut lines strictly inside (lower, upper), plus both ends."""
    cuts = [lower]
    for v in sorted(v for v in values if lower + EPSILON < v < upper - EPSILON):
        if v - cuts[-1] > EPSILON:
            cuts.append(v)
    cuts.append(upper)
    return cuts


def redraw_panels(state: GridState) -> GridState:
    """
    Re-derive panel rectangles from the active verticals and horizontals.

    Columns are bounded by the jambs and active verticals. Within each
    column, rows are bounded by the sill, the head, and every active
    horizontal segment that spans the column's midpoint. Panels keep the
    active flag and glass type of the previous panel in the same cell.
    """
    opening = state.opening
    transom_line = opening.effective_height if opening.has_active_transom else None

    xs = _boundaries(
        [m.effective_position(opening) for m in state.mullions_of_type(GridType.VERTICAL, active_only=True)],
        0.0, opening.width,
    )
    horizontals = state.mullions_of_type(GridType.HORIZONTAL, active_only=True)
    previous = {(p.grid_column, p.grid_row): p for p in state.glass_panels}

    panels: list[GlassPanel] = []
    for i, (x0, x1) in enumerate(zip(xs[:-1], xs[1:])):
        mid = (x0 + x1) / 2
        ys = _boundaries(
            [h.effective_position(opening) for h in horizontals if h.span(opening).covers(mid)],
            0.0, opening.height,
        )
        for j, (y0, y1) in enumerate(zip(ys[:-1], ys[1:])):
            is_transom = transom_line is not None and y0 >= transom_line - EPSILON
            prior = previous.get((i, j))
            if prior is not None and prior.is_transom == is_transom:
                glass_type = prior.glass_type
            else:
                glass_type = TRANSOM_GLASS if is_transom else STANDARD_GLASS
            panels.append(GlassPanel(
                opening_id=opening.id,
                grid_column=i,
                grid_row=j,
                x=x0,
                y=y0,
                width=x1 - x0,
                height=y1 - y0,
                is_transom=is_transom,
                is_active=prior.is_active if prior is not None else True,
                glass_type=glass_type,
            ))

    logger.info(
        "Redrew %d panels for opening %s (was %d)",
        len(panels), opening.id, len(state.glass_panels),
    )
    return state.model_copy(update={"glass_panels": panels})
