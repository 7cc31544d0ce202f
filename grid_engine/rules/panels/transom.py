"""Transom: a segmented bar at the transom line and a row of panels above it."""

from __future__ import annotations

from grid_engine.rules.base import GridRule, GridMember
from grid_engine.rules.mullions.segments import segmented_run
from grid_engine.models import (
    GridContext, GridType, GlassPanel, TRANSOM_GLASS,
)


class TransomRule(GridRule):
    """Adds the transom row on top of the primary grid."""

    priority = 60
    dependencies = ["panel.glass"]

    def get_id(self) -> str:
        return "panel.transom"

    def get_name(self) -> str:
        return "Transom"

    def applies(self, context: GridContext) -> bool:
        return context.opening.has_active_transom

    def generate(self, context: GridContext) -> list[GridMember]:
        opening = context.opening
        transom_row = opening.grid_rows
        transom_line = opening.effective_height

        # Bar at the transom line, keyed as the row above the primary grid
        members: list[GridMember] = list(segmented_run(
            context, GridType.HORIZONTAL,
            opening.component_names.horizontals,
            grid_row=transom_row,
        ))

        for i, (start_x, end_x) in enumerate(context.column_segments):
            members.append(GlassPanel(
                opening_id=opening.id,
                grid_column=i,
                grid_row=transom_row,
                x=start_x,
                y=transom_line,
                width=end_x - start_x,
                height=opening.height - transom_line,
                is_transom=True,
                glass_type=TRANSOM_GLASS,
            ))
        return members
