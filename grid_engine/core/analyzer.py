"""Opening analysis: parameter validation and grid boundary layout."""

from __future__ import annotations
import logging
import math

from grid_engine.errors import InvalidGridParameters
from grid_engine.models import (
    GridContext, Opening, divide_extent,
    MIN_GRID_DIVISIONS, MAX_GRID_DIVISIONS, MAX_MULLION_WIDTH, MIN_PANEL_SIZE,
)

logger = logging.getLogger(__name__)


def validate_opening(opening: Opening) -> list[str]:
    """Return every reason the opening cannot be gridded (empty if valid)."""
    errors: list[str] = []

    # NaN compares false against every bound, so non-finite values are
    # rejected before any range check can let them through
    for label, value in (
        ("Opening width", opening.width),
        ("Opening height", opening.height),
        ("Mullion width", opening.mullion_width),
        ("Transom height", opening.transom_height),
    ):
        if value is not None and not math.isfinite(value):
            errors.append(f"{label} must be a finite number")
    if errors:
        return errors

    if not MIN_GRID_DIVISIONS <= opening.grid_columns <= MAX_GRID_DIVISIONS:
        errors.append(f"Columns must be between {MIN_GRID_DIVISIONS} and {MAX_GRID_DIVISIONS}")
    if not MIN_GRID_DIVISIONS <= opening.grid_rows <= MAX_GRID_DIVISIONS:
        errors.append(f"Rows must be between {MIN_GRID_DIVISIONS} and {MAX_GRID_DIVISIONS}")
    if opening.width <= 0:
        errors.append("Opening width must be greater than 0")
    if opening.height <= 0:
        errors.append("Opening height must be greater than 0")
    if opening.mullion_width <= 0 or opening.mullion_width > MAX_MULLION_WIDTH:
        errors.append(f"Mullion width must be between 0 and {MAX_MULLION_WIDTH:g} inches")

    if opening.has_transom:
        if not opening.transom_height or opening.transom_height <= 0:
            errors.append("Transom height is required when transom is enabled")
        elif opening.transom_height >= opening.height:
            errors.append("Transom height cannot be greater than or equal to opening height")

    return errors


class GridAnalyzer:
    """Validates an opening and lays out its column and row boundaries."""

    def analyze(self, context: GridContext) -> None:
        """Validate the opening and populate the context boundaries."""
        opening = context.opening
        errors = validate_opening(opening)
        if errors:
            logger.warning("Rejected grid for opening %s: %s", opening.id, "; ".join(errors))
            raise InvalidGridParameters(errors)

        context.column_boundaries = divide_extent(opening.width, opening.grid_columns)
        context.row_boundaries = divide_extent(opening.effective_height, opening.grid_rows)
        self._warn_small_panels(opening)

    def _warn_small_panels(self, opening: Opening) -> None:
        column_width = opening.width / opening.grid_columns
        row_height = opening.effective_height / opening.grid_rows
        if column_width < MIN_PANEL_SIZE:
            logger.warning(
                'Opening %s: each panel would be only %.1f" wide',
                opening.id, column_width * 12,
            )
        if row_height < MIN_PANEL_SIZE:
            logger.warning(
                'Opening %s: each panel would be only %.1f" tall',
                opening.id, row_height * 12,
            )
