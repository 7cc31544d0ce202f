# File: tests/test_generator.py
"""Tests for grid generation."""

import itertools

import pytest

from grid_engine.core.generator import GridGenerator, generate
from grid_engine.core.registry import create_default_registry
from grid_engine.errors import InvalidGridParameters
from grid_engine.models import GenerationConfig, GridType, TRANSOM_GLASS


def _of_type(mullions, grid_type):
    return [m for m in mullions if m.grid_type == grid_type]


class TestExampleScenario:
    """10ft x 8ft, 2 columns, 2 rows, 2.5in mullions."""

    def test_panels(self, state):
        assert len(state.glass_panels) == 4
        for p in state.glass_panels:
            assert (p.width, p.height) == (5.0, 4.0)
            assert p.area == 20.0
            assert p.is_active and not p.is_transom
        assert sum(p.area for p in state.glass_panels) == 80.0

    def test_vertical(self, state):
        verticals = _of_type(state.mullions, GridType.VERTICAL)
        assert len(verticals) == 1
        start, end = verticals[0].endpoints(state.opening)
        assert (start.x, start.y, end.x, end.y) == (5.0, 0.0, 5.0, 8.0)
        assert verticals[0].length == 8.0

    def test_horizontal_segments(self, state):
        horizontals = sorted(
            _of_type(state.mullions, GridType.HORIZONTAL), key=lambda m: m.grid_segment,
        )
        assert len(horizontals) == 2
        assert [m.effective_position(state.opening) for m in horizontals] == [4.0, 4.0]
        assert [(m.start_x, m.end_x) for m in horizontals] == [(0.0, 5.0), (5.0, 10.0)]
        assert [m.grid_segment for m in horizontals] == [0, 1]
        assert all(m.length == 5.0 for m in horizontals)

    def test_perimeter(self, state):
        opening = state.opening
        (left,) = _of_type(state.mullions, GridType.JAMB_LEFT)
        (right,) = _of_type(state.mullions, GridType.JAMB_RIGHT)
        assert left.effective_position(opening) == 0.0
        assert right.effective_position(opening) == 10.0
        assert left.length == right.length == 8.0

        sills = _of_type(state.mullions, GridType.SILL)
        heads = _of_type(state.mullions, GridType.HEAD)
        assert len(sills) == len(heads) == 2
        assert all(m.effective_position(opening) == 0.0 for m in sills)
        assert all(m.effective_position(opening) == 8.0 for m in heads)

    def test_defaults(self, state):
        for m in state.mullions:
            assert m.is_active
            assert m.custom_position is None
            assert m.opening_id == "opening-1"
        for m in _of_type(state.mullions, GridType.VERTICAL):
            assert m.start_x is None and m.end_x is None

    def test_component_names(self, state):
        names = {m.grid_type: m.component_name for m in state.mullions}
        assert names[GridType.VERTICAL] == "Vertical"
        assert names[GridType.HORIZONTAL] == "Horizontal"
        assert names[GridType.SILL] == "Sill"
        assert names[GridType.HEAD] == "Head"
        assert names[GridType.JAMB_LEFT] == names[GridType.JAMB_RIGHT] == "Jamb"


@pytest.mark.parametrize("columns,rows", [(1, 1), (3, 2), (4, 5), (7, 3), (20, 20)])
class TestGridProperties:
    def _state(self, opening, columns, rows):
        return GridGenerator().generate(
            opening.model_copy(update={"width": 13.7, "height": 9.3,
                                       "grid_columns": columns, "grid_rows": rows}),
        )

    def test_partition(self, opening, columns, rows):
        state = self._state(opening, columns, rows)
        cells = [(p.grid_column, p.grid_row) for p in state.glass_panels]
        assert len(cells) == columns * rows
        assert sorted(cells) == sorted(itertools.product(range(columns), range(rows)))

    def test_area_conservation(self, opening, columns, rows):
        state = self._state(opening, columns, rows)
        total = sum(p.area for p in state.glass_panels)
        assert total == pytest.approx(13.7 * 9.3)

    def test_panels_do_not_overlap_and_fit(self, opening, columns, rows):
        state = self._state(opening, columns, rows)
        rects = [p.rect for p in state.glass_panels]
        for a, b in itertools.combinations(rects, 2):
            assert not a.overlaps(b)
        for r in rects:
            assert r.right <= 13.7 + 1e-9
            assert r.top <= 9.3 + 1e-9

    def test_segment_count_per_row(self, opening, columns, rows):
        state = self._state(opening, columns, rows)
        horizontals = _of_type(state.mullions, GridType.HORIZONTAL)
        assert len(horizontals) == columns * (rows - 1)
        for row in range(1, rows):
            assert len([m for m in horizontals if m.grid_row == row]) == columns
        assert len(_of_type(state.mullions, GridType.SILL)) == columns
        assert len(_of_type(state.mullions, GridType.HEAD)) == columns
        assert len(_of_type(state.mullions, GridType.VERTICAL)) == columns - 1

    def test_lengths_match_endpoints(self, opening, columns, rows):
        state = self._state(opening, columns, rows)
        for m in state.mullions:
            start, end = m.endpoints(state.opening)
            assert m.length == pytest.approx(start.distance_to(end))


def test_regenerate_is_idempotent(generator, opening):
    def geometry(state):
        mullions = sorted(
            (m.grid_type.value, m.grid_column or 0, m.grid_row or 0, m.grid_segment or 0,
             m.effective_position(state.opening), m.length, m.span(state.opening).start,
             m.span(state.opening).end)
            for m in state.mullions
        )
        panels = sorted(
            (p.grid_column, p.grid_row, p.x, p.y, p.width, p.height)
            for p in state.glass_panels
        )
        return mullions, panels

    first = generator.generate(opening)
    second = generator.generate(opening)
    assert geometry(first) == geometry(second)
    assert {m.id for m in first.mullions}.isdisjoint(m.id for m in second.mullions)


def test_module_level_generate(opening):
    mullions, panels = generate(opening)
    assert len(panels) == 4
    # 1 vertical + 2 horizontal + 2 sill + 2 head + 2 jambs
    assert len(mullions) == 9


class TestTransom:
    def test_transom_panels_and_bar(self, generator, transom_opening):
        state = generator.generate(transom_opening)
        transoms = [p for p in state.glass_panels if p.is_transom]
        assert len(state.glass_panels) == 3 * 2 + 3
        assert len(transoms) == 3
        for p in transoms:
            assert p.grid_row == 2
            assert (p.y, p.height, p.width) == (8.0, 2.0, 4.0)
            assert p.glass_type == TRANSOM_GLASS

        bars = [m for m in _of_type(state.mullions, GridType.HORIZONTAL) if m.grid_row == 2]
        assert len(bars) == 3
        assert all(m.effective_position(state.opening) == 8.0 for m in bars)

    def test_primary_rows_use_effective_height(self, generator, transom_opening):
        state = generator.generate(transom_opening)
        row_one = [m for m in _of_type(state.mullions, GridType.HORIZONTAL) if m.grid_row == 1]
        assert all(m.effective_position(state.opening) == 4.0 for m in row_one)
        assert sum(p.area for p in state.glass_panels) == pytest.approx(120.0)

    def test_transom_height_must_fit(self, generator, transom_opening):
        bad = transom_opening.model_copy(update={"transom_height": 10.0})
        with pytest.raises(InvalidGridParameters) as exc:
            generator.generate(bad)
        assert any("Transom" in e for e in exc.value.errors)


class TestValidation:
    @pytest.mark.parametrize("update", [
        {"grid_columns": 0},
        {"grid_rows": 0},
        {"grid_columns": 21},
        {"width": 0.0},
        {"height": -3.0},
        {"mullion_width": 0.0},
        {"mullion_width": 7.0},
        {"has_transom": True, "transom_height": None},
    ])
    def test_rejected(self, generator, opening, update):
        with pytest.raises(InvalidGridParameters):
            generator.generate(opening.model_copy(update=update))

    def test_all_errors_reported(self, generator, opening):
        with pytest.raises(InvalidGridParameters) as exc:
            generator.generate(opening.model_copy(update={"width": 0.0, "grid_rows": 0}))
        assert len(exc.value.errors) == 2

    def test_tiny_panels_only_warn(self, generator, opening, caplog):
        narrow = opening.model_copy(update={"width": 4.0, "grid_columns": 20})
        with caplog.at_level("WARNING"):
            state = generator.generate(narrow)
        assert len(state.glass_panels) == 40
        assert "wide" in caplog.text


class TestRegistry:
    def test_default_rule_order(self):
        registry = create_default_registry()
        ids = [r.get_id() for r in registry.list_rules()]
        assert ids == [
            "mullion.vertical", "mullion.perimeter", "mullion.horizontal",
            "panel.glass", "panel.transom",
        ]

    def test_disabled_rule_is_skipped(self, generator, opening):
        config = GenerationConfig(disabled_rules=["mullion.horizontal"])
        state = generator.generate(opening, config)
        assert not _of_type(state.mullions, GridType.HORIZONTAL)
        assert len(state.glass_panels) == 4

    def test_enabled_rules_restrict(self, generator, opening):
        config = GenerationConfig(enabled_rules=["panel.glass"])
        state = generator.generate(opening, config)
        assert state.mullions == []
        assert len(state.glass_panels) == 4

    def test_single_cell_has_only_perimeter(self, generator, opening):
        state = generator.generate(opening.model_copy(update={"grid_columns": 1, "grid_rows": 1}))
        assert sorted(m.grid_type.value for m in state.mullions) == [
            "head", "jamb_left", "jamb_right", "sill",
        ]


class TestNonFiniteDimensions:
    @pytest.mark.parametrize("field", ["width", "height", "mullion_width"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejected(self, generator, opening, field, value):
        with pytest.raises(InvalidGridParameters) as exc:
            generator.generate(opening.model_copy(update={field: value}))
        assert any("finite" in e for e in exc.value.errors)

    def test_transom_height(self, generator, transom_opening):
        bad = transom_opening.model_copy(update={"transom_height": float("nan")})
        with pytest.raises(InvalidGridParameters):
            generator.generate(bad)


class TestRuleSelection:
    def test_unknown_rule(self, generator, opening):
        with pytest.raises(InvalidGridParameters) as exc:
            generator.generate(opening, GenerationConfig(disabled_rules=["mullion.diagonal"]))
        assert exc.value.errors == ["Unknown rule 'mullion.diagonal'"]

    def test_disabled_prerequisite(self, generator, transom_opening):
        config = GenerationConfig(disabled_rules=["panel.glass"])
        with pytest.raises(InvalidGridParameters) as exc:
            generator.generate(transom_opening, config)
        assert exc.value.errors == ["Rule 'panel.transom' requires 'panel.glass'"]

    def test_prerequisite_with_nothing_to_build(self, generator, opening):
        # No interior columns, so the vertical rule does not apply
        single = opening.model_copy(update={"grid_columns": 1})
        state = generator.generate(single)
        assert len(_of_type(state.mullions, GridType.HORIZONTAL)) == 1

    def test_config_stored_on_state(self, generator, opening):
        config = GenerationConfig(disabled_rules=["mullion.horizontal"])
        assert generator.generate(opening, config).generation == config

    def test_duplicate_registration(self):
        from grid_engine.rules.panels.glass import GlassPanelRule

        registry = create_default_registry()
        with pytest.raises(ValueError):
            registry.register(GlassPanelRule())

    def test_describe(self):
        transom = create_default_registry().list_rules()[-1]
        assert transom.describe() == {
            "id": "panel.transom",
            "name": "Transom",
            "priority": 60,
            "dependencies": ["panel.glass"],
        }
