# File: tests/test_statistics.py
"""Tests for grid statistics."""

import pytest

from grid_engine.core.mutation import GlassPanelPatch, toggle_mullion, update_glass_panel
from grid_engine.models import GridStats, GridType, Mullion, TypeCount


def test_counts_by_type():
    mullions = [Mullion(grid_type=GridType.VERTICAL, length=8.0) for _ in range(3)]
    mullions += [Mullion(grid_type=GridType.VERTICAL, length=8.0, is_active=False) for _ in range(2)]
    stats = GridStats.compute(mullions, [])
    assert stats.by_type[GridType.VERTICAL] == TypeCount(active=3, inactive=2)
    assert stats.by_type[GridType.SILL] == TypeCount()
    assert (stats.total_mullions, stats.active_mullions, stats.inactive_mullions) == (5, 3, 2)
    assert stats.total_mullion_length == 24.0


def test_zero_panels_gives_zeros(opening):
    stats = GridStats.compute([], [], opening)
    assert stats.total_glass_area == 0.0
    assert stats.total_glass_panels == 0
    assert stats.total_mullions == 0
    assert stats.opening_area == 80.0


def test_generated_grid(state):
    stats = GridStats.compute(state.mullions, state.glass_panels, state.opening)
    assert stats.total_glass_area == 80.0
    assert stats.opening_area == 80.0
    assert stats.active_glass_panels == stats.standard_panels == 4
    assert stats.transom_panels == 0
    assert stats.by_type[GridType.HORIZONTAL].active == 2
    # 8 (vertical) + 2*5 (horizontal) + 2*5 (sill) + 2*5 (head) + 2*8 (jambs)
    assert stats.total_mullion_length == pytest.approx(54.0)


def test_inactive_members_excluded(state):
    vertical = next(m for m in state.mullions if m.grid_type == GridType.VERTICAL)
    state, _ = toggle_mullion(state, vertical.id, False)
    state, _ = update_glass_panel(state, state.glass_panels[0].id, GlassPanelPatch(is_active=False))

    stats = GridStats.compute(state.mullions, state.glass_panels, state.opening)
    assert stats.by_type[GridType.VERTICAL] == TypeCount(active=0, inactive=1)
    assert stats.total_mullion_length == pytest.approx(46.0)
    assert stats.total_glass_area == 60.0
    assert stats.total_glass_panels == 4
    assert stats.active_glass_panels == 3


def test_transom_split(generator, transom_opening):
    state = generator.generate(transom_opening)
    stats = GridStats.compute(state.mullions, state.glass_panels, state.opening)
    assert stats.transom_panels == 3
    assert stats.standard_panels == 6
    assert stats.total_glass_area == pytest.approx(120.0)
