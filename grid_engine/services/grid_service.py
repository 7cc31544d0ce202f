"""High-level grid service: facade for the API layer."""

from __future__ import annotations
import logging

from grid_engine.core import mutation
from grid_engine.core.generator import GridGenerator
from grid_engine.core.mutation import GlassPanelPatch, MullionPatch
from grid_engine.core.panels import redraw_panels
from grid_engine.core.registry import RuleRegistry, create_default_registry
from grid_engine.models import (
    GenerationConfig, GlassPanel, GridConfiguration, GridParams, GridState, GridStats,
    Mullion, Opening,
)
from grid_engine.store.repository import GridRepository

logger = logging.getLogger(__name__)


class GridService:
    """Runs grid commands against the repository, one opening at a time."""

    def __init__(
        self,
        repository: GridRepository | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self.repository = repository or GridRepository()
        self.registry = registry or create_default_registry()
        self.generator = GridGenerator(self.registry)

    # Openings

    def create_opening(
        self, opening: Opening, config: GenerationConfig | None = None,
    ) -> GridState:
        """Store a new opening together with its freshly generated grid."""
        state = self.repository.add(self.generator.generate(opening, config))
        logger.info(
            "Created opening %s (%.2f x %.2f ft, %dx%d grid)",
            opening.id, opening.width, opening.height,
            opening.grid_columns, opening.grid_rows,
        )
        return state

    def get_opening(self, opening_id: str) -> Opening:
        return self.repository.get(opening_id).opening

    def delete_opening(self, opening_id: str) -> None:
        self.repository.delete(opening_id)
        logger.info("Deleted opening %s", opening_id)

    # Grid

    def get_grid(self, opening_id: str) -> GridState:
        return self.repository.get(opening_id)

    def statistics(self, opening_id: str) -> GridStats:
        state = self.repository.get(opening_id)
        return GridStats.compute(state.mullions, state.glass_panels, state.opening)

    def regenerate(
        self,
        opening_id: str,
        expected_version: int | None = None,
        config: GenerationConfig | None = None,
    ) -> GridState:
        """
        Discard every mullion and panel of the opening and generate anew.

        ``config`` replaces the stored rule selection; without it the
        grid is rebuilt with the rules it was last generated with.
        """
        state, _ = self.repository.modify(
            opening_id,
            lambda s: (self.generator.generate(s.opening, config or s.generation), None),
            expected_version=expected_version,
        )
        logger.info("Regenerated grid for opening %s (version %d)", opening_id, state.version)
        return state

    def update_grid_parameters(
        self,
        opening_id: str,
        columns: int,
        rows: int,
        mullion_width: float,
        expected_version: int | None = None,
    ) -> GridState:
        """Clamp the new parameters, store them, and regenerate destructively."""
        params = GridParams.clamped(columns, rows, mullion_width)
        state, _ = self.repository.modify(
            opening_id,
            lambda s: (
                self.generator.generate(s.opening.with_grid_params(params), s.generation),
                None,
            ),
            expected_version=expected_version,
        )
        logger.info(
            "Updated grid parameters for opening %s to %dx%d @ %.2f in",
            opening_id, params.columns, params.rows, params.mullion_width,
        )
        return state

    def redraw_panels(self, opening_id: str) -> GridState:
        state, _ = self.repository.modify(opening_id, lambda s: (redraw_panels(s), None))
        return state

    # Mullions and panels

    def update_mullion(self, opening_id: str, mullion_id: str, patch: MullionPatch) -> Mullion:
        _, mullion = self.repository.modify(
            opening_id, lambda s: mutation.update_mullion(s, mullion_id, patch),
        )
        return mullion

    def toggle_mullion(self, opening_id: str, mullion_id: str, is_active: bool) -> Mullion:
        _, mullion = self.repository.modify(
            opening_id, lambda s: mutation.toggle_mullion(s, mullion_id, is_active),
        )
        logger.info(
            "Mullion %s %s", mullion_id, "activated" if is_active else "deactivated",
        )
        return mullion

    def move_mullion(self, opening_id: str, mullion_id: str, new_position: float) -> Mullion:
        _, mullion = self.repository.modify(
            opening_id, lambda s: mutation.move_mullion(s, mullion_id, new_position),
        )
        return mullion

    def bulk_update_mullions(
        self, opening_id: str, updates: list[tuple[str, MullionPatch]],
    ) -> list[Mullion]:
        _, mullions = self.repository.modify(
            opening_id, lambda s: mutation.bulk_update_mullions(s, updates),
        )
        return mullions

    def update_glass_panel(self, opening_id: str, panel_id: str, patch: GlassPanelPatch) -> GlassPanel:
        _, panel = self.repository.modify(
            opening_id, lambda s: mutation.update_glass_panel(s, panel_id, patch),
        )
        return panel

    # Configurations

    def save_configuration(
        self,
        opening_id: str,
        name: str,
        description: str | None = None,
        created_by: str | None = None,
    ) -> GridConfiguration:
        """Snapshot the opening's current grid parameters and totals."""
        state = self.repository.get(opening_id)
        stats = GridStats.compute(state.mullions, state.glass_panels, state.opening)
        opening = state.opening
        return self.repository.add_configuration(GridConfiguration(
            opening_id=opening_id,
            name=name,
            description=description,
            columns=opening.grid_columns,
            rows=opening.grid_rows,
            mullion_width=opening.mullion_width,
            total_mullion_length=stats.total_mullion_length,
            total_glass_area=stats.total_glass_area,
            created_by=created_by,
        ))

    def list_configurations(self, opening_id: str) -> list[GridConfiguration]:
        return self.repository.list_configurations(opening_id)

    def load_configuration(self, opening_id: str, config_id: str) -> GridState:
        """Apply a saved configuration's parameters and regenerate."""
        config = self.repository.get_configuration(opening_id, config_id)
        state = self.update_grid_parameters(
            opening_id, config.columns, config.rows, config.mullion_width,
        )
        self.repository.activate_configuration(opening_id, config_id)
        logger.info("Loaded configuration '%s' for opening %s", config.name, opening_id)
        return state

    def delete_configuration(self, opening_id: str, config_id: str) -> None:
        self.repository.delete_configuration(opening_id, config_id)

    def list_rules(self) -> list[dict[str, object]]:
        return [r.describe() for r in self.registry.list_rules()]
