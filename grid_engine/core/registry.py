"""Rule registry: which rules build a grid, and in what order."""

from __future__ import annotations
import logging

from grid_engine.errors import InvalidGridParameters
from grid_engine.models import GenerationConfig, GridContext
from grid_engine.rules.base import GridRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    The mullion and panel rules known to the generator.

    A ``GenerationConfig`` narrows the set for one opening. The selection
    is checked against the registry before any rule runs: an unknown id,
    or a selected rule whose prerequisite was switched off, rejects the
    whole config.
    """

    def __init__(self) -> None:
        self._rules: dict[str, GridRule] = {}

    def register(self, rule: GridRule) -> None:
        rule_id = rule.get_id()
        if rule_id in self._rules:
            raise ValueError(f"Rule '{rule_id}' is already registered")
        self._rules[rule_id] = rule

    def list_rules(self) -> list[GridRule]:
        return list(self._rules.values())

    def select(self, config: GenerationConfig) -> list[GridRule]:
        """Rules switched on by ``config``, in registration order."""
        unknown = [
            rule_id for rule_id in [*config.enabled_rules, *config.disabled_rules]
            if rule_id not in self._rules
        ]
        if unknown:
            raise InvalidGridParameters([f"Unknown rule '{rule_id}'" for rule_id in unknown])

        selected = [
            rule for rule_id, rule in self._rules.items()
            if (not config.enabled_rules or rule_id in config.enabled_rules)
            and rule_id not in config.disabled_rules
        ]
        selected_ids = {r.get_id() for r in selected}
        missing = [
            f"Rule '{rule.get_id()}' requires '{dep}'"
            for rule in selected
            for dep in rule.dependencies
            if dep not in selected_ids
        ]
        if missing:
            raise InvalidGridParameters(missing)
        return selected

    def get_applicable_rules(self, context: GridContext) -> list[GridRule]:
        """Selected rules that apply to the opening, prerequisites first."""
        applicable = sorted(
            (r for r in self.select(context.config) if r.applies(context)),
            key=lambda r: r.priority,
        )
        by_id = {r.get_id(): r for r in applicable}
        ordered: list[GridRule] = []
        placed: set[str] = set()

        def place(rule: GridRule) -> None:
            if rule.get_id() in placed:
                return
            placed.add(rule.get_id())
            for dep in rule.dependencies:
                # A prerequisite that has nothing to build for this opening
                # (no interior columns, say) is simply absent
                if dep in by_id:
                    place(by_id[dep])
            ordered.append(rule)

        for rule in applicable:
            place(rule)

        logger.debug("Rule order: %s", ", ".join(r.get_id() for r in ordered))
        return ordered


def create_default_registry() -> RuleRegistry:
    """Registry holding the standard storefront rules."""
    from grid_engine.rules.mullions.vertical import VerticalMullionRule
    from grid_engine.rules.mullions.perimeter import PerimeterMullionRule
    from grid_engine.rules.mullions.horizontal import HorizontalMullionRule
    from grid_engine.rules.panels.glass import GlassPanelRule
    from grid_engine.rules.panels.transom import TransomRule

    registry = RuleRegistry()
    for rule in (
        VerticalMullionRule(),
        PerimeterMullionRule(),
        HorizontalMullionRule(),
        GlassPanelRule(),
        TransomRule(),
    ):
        registry.register(rule)
    return registry
