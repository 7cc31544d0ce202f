"""Main grid generator: orchestrates analysis and rule execution."""

from __future__ import annotations
import logging

from grid_engine.models import (
    GenerationConfig, GlassPanel, GridContext, GridState, Mullion, Opening,
)
from grid_engine.core.registry import RuleRegistry, create_default_registry
from grid_engine.core.analyzer import GridAnalyzer

logger = logging.getLogger(__name__)


class GridGenerator:
    """
    Stateless grid generator.

    Takes an opening, validates it, executes applicable rules, and
    returns a brand new GridState. Nothing of a previous grid survives.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = GridAnalyzer()

    def generate(
        self,
        opening: Opening,
        config: GenerationConfig | None = None,
        version: int = 0,
    ) -> GridState:
        if config is None:
            config = GenerationConfig()

        context = GridContext(opening=opening, config=config)

        # Analysis phase: validation and boundaries
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        for rule in self.registry.get_applicable_rules(context):
            members = rule.generate(context)
            context.add_mullions([m for m in members if isinstance(m, Mullion)])
            context.add_glass_panels([p for p in members if isinstance(p, GlassPanel)])

        logger.debug(
            "Generated %d mullions and %d panels for opening %s (%dx%d)",
            len(context.mullions), len(context.glass_panels),
            opening.id, opening.grid_columns, opening.grid_rows,
        )
        return GridState(
            opening=opening,
            mullions=context.mullions,
            glass_panels=context.glass_panels,
            generation=config,
            version=version,
        )


_default_generator = GridGenerator()


def generate(opening: Opening) -> tuple[list[Mullion], list[GlassPanel]]:
    """Generate the default mullion and panel sets for an opening."""
    state = _default_generator.generate(opening)
    return state.mullions, state.glass_panels
