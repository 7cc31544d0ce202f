"""Vertical mullions: one continuous member per interior column line."""

from __future__ import annotations

from grid_engine.rules.base import GridRule, GridMember
from grid_engine.models import GridContext, GridType, Mullion


class VerticalMullionRule(GridRule):
    """Full-height verticals at every interior column boundary."""

    priority = 10

    def get_id(self) -> str:
        return "mullion.vertical"

    def get_name(self) -> str:
        return "Vertical Mullions"

    def applies(self, context: GridContext) -> bool:
        return context.opening.grid_columns > 1

    def generate(self, context: GridContext) -> list[GridMember]:
        opening = context.opening
        return [
            Mullion(
                opening_id=opening.id,
                grid_type=GridType.VERTICAL,
                grid_column=i,
                component_name=opening.component_names.verticals,
                length=opening.height,
            )
            for i in range(1, opening.grid_columns)
        ]
