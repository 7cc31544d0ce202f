"""Segmented horizontal-type members: one piece per column."""

from __future__ import annotations

from grid_engine.models import GridContext, GridType, Mullion


def segmented_run(
    context: GridContext,
    grid_type: GridType,
    component_name: str,
    grid_row: int | None = None,
) -> list[Mullion]:
    """Split a full-width run into segments between adjacent verticals."""
    opening = context.opening
    return [
        Mullion(
            opening_id=opening.id,
            grid_type=grid_type,
            grid_row=grid_row,
            grid_segment=k,
            component_name=component_name,
            start_x=start_x,
            end_x=end_x,
            length=end_x - start_x,
        )
        for k, (start_x, end_x) in enumerate(context.column_segments)
    ]
