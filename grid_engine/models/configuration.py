"""Saved grid configurations: named snapshots of grid parameters."""

from __future__ import annotations
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from .grid import new_id


class GridConfiguration(BaseModel):
    id: str = Field(default_factory=new_id)
    opening_id: str
    name: str
    description: str | None = None
    is_active: bool = False
    columns: int
    rows: int
    mullion_width: float
    total_mullion_length: float = 0.0
    total_glass_area: float = 0.0
    created_by: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
