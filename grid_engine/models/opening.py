"""Opening model: the wall aperture being fitted with glazing."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .parameters import ComponentNames, GridParams, DEFAULT_MULLION_WIDTH


class Opening(BaseModel):
    """A rectangular opening. Dimensions in feet, mullion width in inches."""
    id: str
    name: str = ""
    width: float
    height: float
    grid_columns: int = 1
    grid_rows: int = 1
    mullion_width: float = DEFAULT_MULLION_WIDTH
    has_transom: bool = False
    transom_height: float | None = None
    component_names: ComponentNames = Field(default_factory=ComponentNames)

    @property
    def has_active_transom(self) -> bool:
        return self.has_transom and bool(self.transom_height) and self.transom_height > 0

    @property
    def effective_height(self) -> float:
        """Height of the primary grid, below the transom line if any."""
        if self.has_active_transom:
            return self.height - self.transom_height
        return self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def grid_params(self) -> GridParams:
        return GridParams(
            columns=self.grid_columns,
            rows=self.grid_rows,
            mullion_width=self.mullion_width,
        )

    def with_grid_params(self, params: GridParams) -> Opening:
        return self.model_copy(update={
            "grid_columns": params.columns,
            "grid_rows": params.rows,
            "mullion_width": params.mullion_width,
        })
