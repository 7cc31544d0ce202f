"""FastAPI route definitions."""

from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, status

from grid_engine.core.mutation import GlassPanelPatch
from grid_engine.models import GridStats, Mullion, Opening, new_id
from grid_engine.services.grid_service import GridService
from grid_engine.api.schemas import (
    BulkMullionUpdate, ConfigurationCreate, ConfigurationResponse, GlassPanelResponse,
    GridParametersUpdate, GridResponse, MullionAction, MullionResponse,
    OpeningCreate, RegenerateRequest,
)
from grid_engine.api.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared service instance
_service = GridService()


def get_service() -> GridService:
    return _service


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/rules")
async def list_rules(service: GridService = Depends(get_service)) -> list[dict[str, object]]:
    """Registered grid rules with their order and prerequisites."""
    return service.list_rules()


# Openings

@router.post("/openings", response_model=GridResponse, status_code=status.HTTP_201_CREATED)
async def create_opening(
    request: OpeningCreate, service: GridService = Depends(get_service),
) -> GridResponse:
    """Create an opening and generate its default grid."""
    state = service.create_opening(request.to_opening(new_id()), request.rules)
    return GridResponse.from_state(state, include_stats=True)


@router.get("/openings/{opening_id}", response_model=Opening)
async def get_opening(opening_id: str, service: GridService = Depends(get_service)) -> Opening:
    return service.get_opening(opening_id)


@router.delete("/openings/{opening_id}")
async def delete_opening(opening_id: str, service: GridService = Depends(get_service)) -> dict[str, str]:
    service.delete_opening(opening_id)
    return {"message": "Opening deleted successfully!"}


# Grid

@router.get("/openings/{opening_id}/grid", response_model=GridResponse)
async def get_grid(
    opening_id: str,
    include_stats: bool = False,
    service: GridService = Depends(get_service),
) -> GridResponse:
    """Opening dimensions plus the full mullion and panel lists."""
    return GridResponse.from_state(service.get_grid(opening_id), include_stats=include_stats)


@router.post("/openings/{opening_id}/grid", response_model=GridResponse)
async def regenerate_grid(
    opening_id: str,
    request: RegenerateRequest | None = None,
    service: GridService = Depends(get_service),
) -> GridResponse:
    """Regenerate the grid. Destroys every custom position and toggle."""
    request = request or RegenerateRequest()
    state = service.regenerate(
        opening_id, expected_version=request.expected_version, config=request.rules,
    )
    return GridResponse.from_state(state, include_stats=True)


@router.put("/openings/{opening_id}/grid", response_model=GridResponse)
async def update_grid_parameters(
    opening_id: str,
    request: GridParametersUpdate,
    service: GridService = Depends(get_service),
) -> GridResponse:
    """Store new (clamped) grid parameters and regenerate."""
    state = service.update_grid_parameters(
        opening_id, request.columns, request.rows, request.mullion_width,
        expected_version=request.expected_version,
    )
    return GridResponse.from_state(state, include_stats=True)


@router.post("/openings/{opening_id}/grid/redraw", response_model=GridResponse)
async def redraw_grid_panels(
    opening_id: str, service: GridService = Depends(get_service),
) -> GridResponse:
    """Rebuild glass panels from the current mullion positions."""
    return GridResponse.from_state(service.redraw_panels(opening_id), include_stats=True)


@router.get("/openings/{opening_id}/grid/statistics", response_model=GridStats)
async def grid_statistics(opening_id: str, service: GridService = Depends(get_service)) -> GridStats:
    return service.statistics(opening_id)


# Mullions

@router.get("/openings/{opening_id}/grid/mullions", response_model=list[Mullion])
async def list_mullions(opening_id: str, service: GridService = Depends(get_service)) -> list[Mullion]:
    return service.get_grid(opening_id).mullions


@router.put("/openings/{opening_id}/grid/mullions", response_model=list[Mullion])
async def bulk_update_mullions(
    opening_id: str,
    request: BulkMullionUpdate,
    service: GridService = Depends(get_service),
) -> list[Mullion]:
    """Apply several mullion patches at once; all succeed or none do."""
    return service.bulk_update_mullions(
        opening_id, [(item.id, item.patch) for item in request.updates],
    )


@router.put("/openings/{opening_id}/grid/mullions/{mullion_id}", response_model=MullionResponse)
async def update_mullion(
    opening_id: str,
    mullion_id: str,
    request: MullionAction,
    service: GridService = Depends(get_service),
) -> MullionResponse:
    """Toggle, move, or partially update a single mullion."""
    if request.action == "toggle":
        if request.is_active is None:
            raise ValidationError("is_active is required for toggle action").to_http_exception()
        mullion = service.toggle_mullion(opening_id, mullion_id, request.is_active)
        verb = "activated" if request.is_active else "deactivated"
        return MullionResponse(message=f"Mullion {verb} successfully!", mullion=mullion)

    if request.action == "move":
        if request.new_position is None:
            raise ValidationError("new_position is required for move action").to_http_exception()
        mullion = service.move_mullion(opening_id, mullion_id, request.new_position)
        return MullionResponse(message="Mullion moved successfully!", mullion=mullion)

    mullion = service.update_mullion(opening_id, mullion_id, request.to_patch())
    return MullionResponse(message="Mullion updated successfully!", mullion=mullion)


# Glass panels

@router.put("/openings/{opening_id}/grid/panels/{panel_id}", response_model=GlassPanelResponse)
async def update_glass_panel(
    opening_id: str,
    panel_id: str,
    request: GlassPanelPatch,
    service: GridService = Depends(get_service),
) -> GlassPanelResponse:
    panel = service.update_glass_panel(opening_id, panel_id, request)
    return GlassPanelResponse(message="Glass panel updated successfully!", glass_panel=panel)


# Configurations

@router.get("/openings/{opening_id}/grid/configurations", response_model=list[ConfigurationResponse])
async def list_configurations(
    opening_id: str, service: GridService = Depends(get_service),
) -> list[ConfigurationResponse]:
    return [
        ConfigurationResponse(configuration=c)
        for c in service.list_configurations(opening_id)
    ]


@router.post(
    "/openings/{opening_id}/grid/configurations",
    response_model=ConfigurationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_configuration(
    opening_id: str,
    request: ConfigurationCreate,
    service: GridService = Depends(get_service),
) -> ConfigurationResponse:
    config = service.save_configuration(
        opening_id, request.name, request.description, request.created_by,
    )
    return ConfigurationResponse(configuration=config)


@router.post("/openings/{opening_id}/grid/configurations/{config_id}/load", response_model=GridResponse)
async def load_configuration(
    opening_id: str, config_id: str, service: GridService = Depends(get_service),
) -> GridResponse:
    """Apply a saved configuration. Regenerates the grid."""
    return GridResponse.from_state(
        service.load_configuration(opening_id, config_id), include_stats=True,
    )


@router.delete("/openings/{opening_id}/grid/configurations/{config_id}")
async def delete_configuration(
    opening_id: str, config_id: str, service: GridService = Depends(get_service),
) -> dict[str, str]:
    service.delete_configuration(opening_id, config_id)
    return {"message": "Configuration deleted successfully!"}
