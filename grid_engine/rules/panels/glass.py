"""Primary vision glass: one panel per grid cell."""

from __future__ import annotations

from grid_engine.rules.base import GridRule, GridMember
from grid_engine.models import GridContext, GlassPanel


class GlassPanelRule(GridRule):
    """Fills every (column, row) cell below the transom line."""

    priority = 50

    def get_id(self) -> str:
        return "panel.glass"

    def get_name(self) -> str:
        return "Glass Panels"

    def generate(self, context: GridContext) -> list[GridMember]:
        opening = context.opening
        xs = context.column_boundaries
        ys = context.row_boundaries
        return [
            GlassPanel(
                opening_id=opening.id,
                grid_column=i,
                grid_row=j,
                x=xs[i],
                y=ys[j],
                width=xs[i + 1] - xs[i],
                height=ys[j + 1] - ys[j],
            )
            for j in range(opening.grid_rows)
            for i in range(opening.grid_columns)
        ]
