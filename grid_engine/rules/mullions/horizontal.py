"""Horizontal mullions, segmented between neighbouring verticals."""

from __future__ import annotations

from grid_engine.rules.base import GridRule, GridMember
from grid_engine.rules.mullions.segments import segmented_run
from grid_engine.models import GridContext, GridType


class HorizontalMullionRule(GridRule):
    """One segment per column at every interior row boundary."""

    priority = 30
    dependencies = ["mullion.vertical"]

    def get_id(self) -> str:
        return "mullion.horizontal"

    def get_name(self) -> str:
        return "Horizontal Mullions"

    def applies(self, context: GridContext) -> bool:
        return context.opening.grid_rows > 1

    def generate(self, context: GridContext) -> list[GridMember]:
        opening = context.opening
        members: list[GridMember] = []
        for j in range(1, opening.grid_rows):
            members.extend(segmented_run(
                context, GridType.HORIZONTAL,
                opening.component_names.horizontals,
                grid_row=j,
            ))
        return members
