# File: tests/test_panels.py
"""Tests for redrawing glass panels from the mullion layout."""

import itertools

import pytest

from grid_engine.core.mutation import MullionPatch, update_glass_panel, update_mullion, GlassPanelPatch
from grid_engine.core.panels import redraw_panels
from grid_engine.models import GridType, TRANSOM_GLASS


def _cells(state):
    return sorted(
        (p.grid_column, p.grid_row, p.x, p.y, p.width, p.height)
        for p in state.glass_panels
    )


def _assert_tiles(state):
    rects = [p.rect for p in state.glass_panels]
    for a, b in itertools.combinations(rects, 2):
        assert not a.overlaps(b)
    assert sum(r.area for r in rects) == pytest.approx(state.opening.area)


def test_redraw_of_untouched_grid_matches_generation(state):
    assert _cells(redraw_panels(state)) == _cells(state)


def test_moved_vertical_reshapes_columns(state):
    vertical = next(m for m in state.mullions if m.grid_type == GridType.VERTICAL)
    state, _ = update_mullion(state, vertical.id, MullionPatch(custom_position=3.0))
    # Mullion edits alone do not touch the panels
    assert {p.width for p in state.glass_panels} == {5.0}

    redrawn = redraw_panels(state)
    widths = sorted({p.width for p in redrawn.glass_panels})
    assert widths == [3.0, 7.0]
    _assert_tiles(redrawn)


def test_inactive_vertical_merges_columns(state):
    vertical = next(m for m in state.mullions if m.grid_type == GridType.VERTICAL)
    state, _ = update_mullion(state, vertical.id, MullionPatch(is_active=False))
    redrawn = redraw_panels(state)
    assert len(redrawn.glass_panels) == 2
    assert all(p.width == 10.0 for p in redrawn.glass_panels)
    _assert_tiles(redrawn)


def test_single_horizontal_segment_moves_its_column_only(state):
    left = next(
        m for m in state.mullions
        if m.grid_type == GridType.HORIZONTAL and m.grid_segment == 0
    )
    state, _ = update_mullion(state, left.id, MullionPatch(custom_position=6.0))
    redrawn = redraw_panels(state)

    left_heights = sorted(p.height for p in redrawn.glass_panels if p.grid_column == 0)
    right_heights = sorted(p.height for p in redrawn.glass_panels if p.grid_column == 1)
    assert left_heights == [2.0, 6.0]
    assert right_heights == [4.0, 4.0]
    _assert_tiles(redrawn)


def test_panel_flags_carried_over(state):
    panel = next(p for p in state.glass_panels if (p.grid_column, p.grid_row) == (1, 1))
    state, _ = update_glass_panel(state, panel.id, GlassPanelPatch(is_active=False, glass_type="Tinted"))
    redrawn = redraw_panels(state)
    same_cell = next(p for p in redrawn.glass_panels if (p.grid_column, p.grid_row) == (1, 1))
    assert same_cell.is_active is False
    assert same_cell.glass_type == "Tinted"


def test_transom_row_detected(generator, transom_opening):
    state = generator.generate(transom_opening)
    redrawn = redraw_panels(state)
    transoms = [p for p in redrawn.glass_panels if p.is_transom]
    assert len(transoms) == 3
    assert all(p.y == 8.0 and p.glass_type == TRANSOM_GLASS for p in transoms)
    _assert_tiles(redrawn)
