from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .chart import InvalidDimensionError, InvalidSettingError, SeatCoordinate


DEFAULT_ROWS = 3
DEFAULT_COLUMNS = 11
DEFAULT_BEST_SEAT = "R1C6"

# keeps a grid at one million seats or fewer
MAX_DIMENSION = 1000


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise InvalidSettingError(name, raw) from e


class TheaterConfig(BaseModel):
    """Venue dimensions and the best seat, 1-based ``R{row}C{col}``."""

    rows: int = Field(default=DEFAULT_ROWS)
    columns: int = Field(default=DEFAULT_COLUMNS)
    best_seat: str = DEFAULT_BEST_SEAT

    # best seat range and format are checked by driver.build_chart
    @field_validator("best_seat")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    # raises InvalidDimensionError itself, not a pydantic ValidationError
    @model_validator(mode="after")
    def _dimensions(self) -> "TheaterConfig":
        if not (1 <= self.rows <= MAX_DIMENSION and 1 <= self.columns <= MAX_DIMENSION):
            raise InvalidDimensionError(self.rows, self.columns)
        return self

    @property
    def best_coordinate(self) -> SeatCoordinate:
        return SeatCoordinate.parse(self.best_seat)

    @classmethod
    def from_env(
        cls,
        *,
        rows: Optional[int] = None,
        columns: Optional[int] = None,
        best_seat: Optional[str] = None,
    ) -> "TheaterConfig":
        """Environment defaults; any argument that is not None wins over them."""
        return cls(
            rows=_env_int("RESERVE_SEATS_ROWS", DEFAULT_ROWS) if rows is None else rows,
            columns=_env_int("RESERVE_SEATS_COLUMNS", DEFAULT_COLUMNS) if columns is None else columns,
            best_seat=os.environ.get("RESERVE_SEATS_BEST_SEAT", DEFAULT_BEST_SEAT) if best_seat is None else best_seat,
        )
