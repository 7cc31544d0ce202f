"""Mullion mutation engine: applies user edits to an existing grid.

Every handler takes a GridState and returns a new one; the input state is
never modified, so a failed edit leaves nothing half-applied. Glass panels
are not re-derived here; see ``grid_engine.core.panels.redraw_panels``.
"""

from __future__ import annotations
import logging
import math

from pydantic import BaseModel

from grid_engine.errors import (
    ConcurrentModification, GlassPanelNotFound, InvalidMullionEdit, MullionNotFound,
)
from grid_engine.models import GlassPanel, GridState, GridType, Mullion, Opening, clamp

logger = logging.getLogger(__name__)


class MullionPatch(BaseModel):
    """
    Partial update for a single mullion.

    Only fields explicitly present in the patch are applied. An explicit
    ``None`` on ``custom_position``, ``start_x`` or ``end_x`` reverts that
    field to the grid-derived default.
    """
    is_active: bool | None = None
    component_name: str | None = None
    custom_position: float | None = None
    start_x: float | None = None
    end_x: float | None = None
    notes: str | None = None
    expected_revision: int | None = None


class GlassPanelPatch(BaseModel):
    is_active: bool | None = None
    glass_type: str | None = None


def axis_extent(grid_type: GridType, opening: Opening) -> float:
    """Upper bound of a positionable mullion's custom position."""
    if grid_type == GridType.VERTICAL:
        return opening.width
    return opening.height


def apply_mullion_patch(mullion: Mullion, patch: MullionPatch, opening: Opening) -> Mullion:
    """Return a patched copy of ``mullion`` with its length re-derived."""
    fields = patch.model_fields_set

    if patch.expected_revision is not None and patch.expected_revision != mullion.revision:
        raise ConcurrentModification(
            f"Mullion {mullion.id}", patch.expected_revision, mullion.revision,
        )

    for name in ("custom_position", "start_x", "end_x"):
        value = getattr(patch, name)
        if name in fields and value is not None and not math.isfinite(value):
            raise InvalidMullionEdit(f"{name} must be a finite number, got {value}")

    update: dict[str, object] = {}

    if "is_active" in fields and patch.is_active is not None:
        update["is_active"] = patch.is_active
    if "component_name" in fields and patch.component_name is not None:
        update["component_name"] = patch.component_name
    if "notes" in fields:
        update["notes"] = patch.notes

    if "custom_position" in fields:
        if not mullion.grid_type.is_positionable:
            raise InvalidMullionEdit(
                f"{mullion.grid_type.value} mullions have a fixed position"
            )
        if patch.custom_position is None:
            update["custom_position"] = None
        else:
            update["custom_position"] = clamp(
                patch.custom_position, 0.0, axis_extent(mullion.grid_type, opening),
            )

    for name in ("start_x", "end_x"):
        if name not in fields:
            continue
        if not mullion.grid_type.is_segmentable:
            raise InvalidMullionEdit(
                f"{mullion.grid_type.value} mullions cannot be segmented"
            )
        value = getattr(patch, name)
        update[name] = None if value is None else clamp(value, 0.0, opening.width)

    patched = mullion.model_copy(update=update)
    return patched.model_copy(update={
        "length": patched.computed_length(opening),
        "revision": mullion.revision + 1,
    })


def update_mullion(
    state: GridState, mullion_id: str, patch: MullionPatch,
) -> tuple[GridState, Mullion]:
    mullion = state.get_mullion(mullion_id)
    if mullion is None:
        raise MullionNotFound(mullion_id)

    updated = apply_mullion_patch(mullion, patch, state.opening)
    logger.debug(
        "Patched mullion %s (%s): %s",
        mullion_id, mullion.grid_type.value,
        sorted(patch.model_fields_set - {"expected_revision"}),
    )
    return state.with_mullions([updated]), updated


def toggle_mullion(state: GridState, mullion_id: str, is_active: bool) -> tuple[GridState, Mullion]:
    return update_mullion(state, mullion_id, MullionPatch(is_active=is_active))


def move_mullion(state: GridState, mullion_id: str, new_position: float) -> tuple[GridState, Mullion]:
    return update_mullion(state, mullion_id, MullionPatch(custom_position=new_position))


def bulk_update_mullions(
    state: GridState, updates: list[tuple[str, MullionPatch]],
) -> tuple[GridState, list[Mullion]]:
    """Apply several patches; any failure discards all of them."""
    updated: list[Mullion] = []
    for mullion_id, patch in updates:
        state, mullion = update_mullion(state, mullion_id, patch)
        updated.append(mullion)
    return state, updated


def update_glass_panel(
    state: GridState, panel_id: str, patch: GlassPanelPatch,
) -> tuple[GridState, GlassPanel]:
    panel = state.get_glass_panel(panel_id)
    if panel is None:
        raise GlassPanelNotFound(panel_id)

    update: dict[str, object] = {}
    if patch.is_active is not None:
        update["is_active"] = patch.is_active
    if patch.glass_type is not None:
        update["glass_type"] = patch.glass_type

    updated = panel.model_copy(update=update)
    return state.with_glass_panel(updated), updated
