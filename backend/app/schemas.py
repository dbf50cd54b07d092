from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from reserve_seats.config import MAX_DIMENSION


class ReservationRunRequest(BaseModel):
    # Line 1: exact seats (R1C4 R1C6 ...). Following lines: one block size each.
    input: str = Field(min_length=1)
    rows: Optional[int] = Field(default=None, ge=1, le=MAX_DIMENSION)
    columns: Optional[int] = Field(default=None, ge=1, le=MAX_DIMENSION)
    best_seat: Optional[str] = None
    charts: bool = False

    @field_validator("input")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("input must contain at least one non-blank line")
        return v


class ReservationRunResponse(BaseModel):
    results: list[str]
    seats_available: int
    charts: Optional[str] = None


class TheaterConfigOut(BaseModel):
    rows: int
    columns: int
    best_seat: str
