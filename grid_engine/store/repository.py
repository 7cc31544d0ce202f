"""In-memory persistence for grids and saved configurations.

Each opening's GridState is stored whole and carries a version counter
that is bumped on every committed write. ``modify`` runs a command as a
single read-modify-write under the repository lock, so a command that
raises leaves the stored state untouched.
"""

from __future__ import annotations
import logging
import threading
from typing import Callable, TypeVar

from grid_engine.errors import (
    ConcurrentModification, ConfigurationNotFound, OpeningNotFound,
)
from grid_engine.models import GridConfiguration, GridState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GridRepository:
    """Thread-safe store of GridState per opening id."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._states: dict[str, GridState] = {}
        self._configurations: dict[str, GridConfiguration] = {}

    def add(self, state: GridState) -> GridState:
        with self._lock:
            committed = state.model_copy(update={"version": 1})
            self._states[state.opening.id] = committed
            logger.debug("Stored new grid for opening %s", state.opening.id)
            return committed

    def get(self, opening_id: str) -> GridState:
        with self._lock:
            state = self._states.get(opening_id)
        if state is None:
            raise OpeningNotFound(opening_id)
        return state

    def modify(
        self,
        opening_id: str,
        command: Callable[[GridState], tuple[GridState, T]],
        expected_version: int | None = None,
    ) -> tuple[GridState, T]:
        """Apply ``command`` to the stored state and commit its result."""
        with self._lock:
            current = self.get(opening_id)
            if expected_version is not None and expected_version != current.version:
                raise ConcurrentModification(
                    f"Grid for opening {opening_id}", expected_version, current.version,
                )
            new_state, result = command(current)
            committed = new_state.model_copy(update={"version": current.version + 1})
            self._states[opening_id] = committed
            return committed, result

    def delete(self, opening_id: str) -> None:
        with self._lock:
            if self._states.pop(opening_id, None) is None:
                raise OpeningNotFound(opening_id)
            for config_id in [c.id for c in self._configurations.values() if c.opening_id == opening_id]:
                del self._configurations[config_id]
        logger.debug("Deleted opening %s and its configurations", opening_id)

    # Configurations

    def add_configuration(self, configuration: GridConfiguration) -> GridConfiguration:
        with self._lock:
            self.get(configuration.opening_id)
            self._configurations[configuration.id] = configuration
            return configuration

    def get_configuration(self, opening_id: str, config_id: str) -> GridConfiguration:
        with self._lock:
            config = self._configurations.get(config_id)
        if config is None or config.opening_id != opening_id:
            raise ConfigurationNotFound(config_id)
        return config

    def list_configurations(self, opening_id: str) -> list[GridConfiguration]:
        with self._lock:
            self.get(opening_id)
            return [c for c in self._configurations.values() if c.opening_id == opening_id]

    def activate_configuration(self, opening_id: str, config_id: str) -> GridConfiguration:
        """Mark one configuration active and every sibling inactive."""
        with self._lock:
            target = self.get_configuration(opening_id, config_id)
            for c in self.list_configurations(opening_id):
                self._configurations[c.id] = c.model_copy(update={"is_active": c.id == target.id})
            return self._configurations[target.id]

    def delete_configuration(self, opening_id: str, config_id: str) -> None:
        with self._lock:
            self.get_configuration(opening_id, config_id)
            del self._configurations[config_id]
