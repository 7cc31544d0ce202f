"""Perimeter framing: continuous jambs, segmented sill and head."""

from __future__ import annotations

from grid_engine.rules.base import GridRule, GridMember
from grid_engine.rules.mullions.segments import segmented_run
from grid_engine.models import GridContext, GridType, Mullion


class PerimeterMullionRule(GridRule):
    """Jambs at x=0 and x=width, sill at y=0 and head at y=height."""

    priority = 20

    def get_id(self) -> str:
        return "mullion.perimeter"

    def get_name(self) -> str:
        return "Perimeter Frame"

    def generate(self, context: GridContext) -> list[GridMember]:
        opening = context.opening
        names = opening.component_names

        members: list[GridMember] = [
            Mullion(
                opening_id=opening.id,
                grid_type=jamb,
                component_name=names.jambs,
                length=opening.height,
            )
            for jamb in (GridType.JAMB_LEFT, GridType.JAMB_RIGHT)
        ]
        members.extend(segmented_run(context, GridType.SILL, names.sill))
        members.extend(segmented_run(context, GridType.HEAD, names.head))
        return members
