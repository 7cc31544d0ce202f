"""API request/response schemas."""

from __future__ import annotations
from typing import Literal, Optional

from pydantic import BaseModel

from grid_engine.core.mutation import MullionPatch
from grid_engine.models import (
    ComponentNames, GenerationConfig, GlassPanel, GridConfiguration, GridState, GridStats,
    Mullion, Opening,
)
from grid_engine.models.parameters import DEFAULT_MULLION_WIDTH


class OpeningCreate(BaseModel):
    """Opening as sent from the frontend."""
    name: str = ""
    width: float
    height: float
    grid_columns: int = 1
    grid_rows: int = 1
    mullion_width: float = DEFAULT_MULLION_WIDTH
    has_transom: bool = False
    transom_height: Optional[float] = None
    component_names: ComponentNames = ComponentNames()
    rules: Optional[GenerationConfig] = None

    def to_opening(self, opening_id: str) -> Opening:
        return Opening(id=opening_id, **self.model_dump(exclude={"rules"}))


class GridResponse(BaseModel):
    """Full grid of one opening."""
    opening: Opening
    mullions: list[Mullion]
    glass_panels: list[GlassPanel]
    generation: GenerationConfig
    version: int
    stats: Optional[GridStats] = None

    @classmethod
    def from_state(cls, state: GridState, include_stats: bool = False) -> GridResponse:
        stats = None
        if include_stats:
            stats = GridStats.compute(state.mullions, state.glass_panels, state.opening)
        return cls(
            opening=state.opening,
            mullions=state.mullions,
            glass_panels=state.glass_panels,
            generation=state.generation,
            version=state.version,
            stats=stats,
        )


class RegenerateRequest(BaseModel):
    expected_version: Optional[int] = None
    rules: Optional[GenerationConfig] = None    # Replaces the stored rule selection


class GridParametersUpdate(BaseModel):
    """New grid parameters; out-of-range values are clamped, not rejected."""
    columns: int
    rows: int
    mullion_width: float
    expected_version: Optional[int] = None


class MullionAction(BaseModel):
    """Body of a single-mullion edit: toggle, move, or a partial update."""
    action: Optional[Literal["toggle", "move", "update"]] = None
    new_position: Optional[float] = None
    is_active: Optional[bool] = None
    component_name: Optional[str] = None
    custom_position: Optional[float] = None
    start_x: Optional[float] = None
    end_x: Optional[float] = None
    notes: Optional[str] = None
    expected_revision: Optional[int] = None

    def to_patch(self) -> MullionPatch:
        """Carry over exactly the fields the client sent."""
        sent = self.model_fields_set & set(MullionPatch.model_fields)
        return MullionPatch(**{name: getattr(self, name) for name in sent})


class MullionResponse(BaseModel):
    message: str
    mullion: Mullion


class BulkMullionItem(BaseModel):
    id: str
    patch: MullionPatch


class BulkMullionUpdate(BaseModel):
    updates: list[BulkMullionItem]


class GlassPanelResponse(BaseModel):
    message: str
    glass_panel: GlassPanel


class ConfigurationCreate(BaseModel):
    name: str
    description: Optional[str] = None
    created_by: Optional[str] = None


class ConfigurationResponse(BaseModel):
    configuration: GridConfiguration
