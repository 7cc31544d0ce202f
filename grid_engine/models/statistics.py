"""Summary statistics over a grid, for reporting and material takeoff."""

from __future__ import annotations
from pydantic import BaseModel

from .grid import GlassPanel, GridType, Mullion
from .opening import Opening


class TypeCount(BaseModel):
    active: int = 0
    inactive: int = 0


class GridStats(BaseModel):
    """Counts, lengths (feet) and areas (square feet) for one opening."""
    total_mullions: int = 0
    active_mullions: int = 0
    inactive_mullions: int = 0
    by_type: dict[GridType, TypeCount] = {}
    total_mullion_length: float = 0.0
    total_glass_panels: int = 0
    active_glass_panels: int = 0
    transom_panels: int = 0
    standard_panels: int = 0
    total_glass_area: float = 0.0
    opening_area: float = 0.0

    @classmethod
    def compute(
        cls,
        mullions: list[Mullion],
        glass_panels: list[GlassPanel],
        opening: Opening | None = None,
    ) -> GridStats:
        by_type = {t: TypeCount() for t in GridType}
        for m in mullions:
            if m.is_active:
                by_type[m.grid_type].active += 1
            else:
                by_type[m.grid_type].inactive += 1

        active_mullions = [m for m in mullions if m.is_active]
        active_panels = [p for p in glass_panels if p.is_active]
        transoms = sum(1 for p in active_panels if p.is_transom)

        return cls(
            total_mullions=len(mullions),
            active_mullions=len(active_mullions),
            inactive_mullions=len(mullions) - len(active_mullions),
            by_type=by_type,
            total_mullion_length=sum(m.length for m in active_mullions),
            total_glass_panels=len(glass_panels),
            active_glass_panels=len(active_panels),
            transom_panels=transoms,
            standard_panels=len(active_panels) - transoms,
            total_glass_area=sum(p.area for p in active_panels),
            opening_area=opening.area if opening is not None else 0.0,
        )
