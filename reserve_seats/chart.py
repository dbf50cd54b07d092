from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


logger = logging.getLogger(__name__)

_SEAT_TOKEN = re.compile(r"^R([0-9]+)C([0-9]+)$")


class SeatingChartError(Exception):
    pass


class InvalidDimensionError(SeatingChartError):
    def __init__(self, rows: int, columns: int):
        super().__init__(
            f"Program instantiating with invalid parameters for rows {rows} and / or columns {columns}. "
            "Aborting program."
        )
        self.rows = rows
        self.columns = columns


class InvalidSettingError(SeatingChartError):
    def __init__(self, name: str, value: str):
        super().__init__(f"Setting {name}={value!r} is not a whole number. Aborting program.")
        self.name = name
        self.value = value


class BestSeatOutOfBoundsError(SeatingChartError):
    def __init__(self, token: str):
        super().__init__(f"Best seat at coordinates {token} is out of bounds. Aborting program.")
        self.token = token


class OutOfBoundsError(SeatingChartError):
    def __init__(self, index: int):
        super().__init__(f"Initial reservation at position {index} is out of bounds. Aborting program.")
        self.index = index


class DuplicateReservationError(SeatingChartError):
    def __init__(self, index: int):
        super().__init__(f"Initial reservations contained duplicates at position {index}. Aborting program.")
        self.index = index


class InvalidSeatTokenError(SeatingChartError):
    def __init__(self, token: str, index: int | None = None):
        where = f" at position {index}" if index is not None else ""
        super().__init__(f"Seat {token!r}{where} is not of the form R<row>C<col>. Aborting program.")
        self.token = token
        self.index = index


class EmptyInputError(SeatingChartError):
    def __init__(self) -> None:
        super().__init__("Blank input passed to the reservation driver. Aborting program.")


class SeatState(str, Enum):
    free = "free"
    initial = "initial"  # exact reservation from the first input line
    best_available = "best_available"

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_MARKERS = {SeatState.free: "", SeatState.initial: "x", SeatState.best_available: "o"}


@dataclass(frozen=True)
class SeatCoordinate:
    """0-based seat position. Use :meth:`parse` for 1-based ``R{row}C{col}`` tokens."""

    row: int
    col: int

    @classmethod
    def parse(cls, token: str, *, index: int | None = None) -> "SeatCoordinate":
        m = _SEAT_TOKEN.match(token.strip())
        if m is None:
            raise InvalidSeatTokenError(token, index)
        return cls(int(m.group(1)) - 1, int(m.group(2)) - 1)

    def label(self) -> str:
        return f"R{self.row + 1}C{self.col + 1}"


class SeatingChart:
    """
    Fixed rows x columns grid of seats with a Manhattan distance per seat
    measured from the best seat.

    Seats live in flat lists indexed by ``row * columns + col``. The best seat
    may lie outside the grid here; run-level validation rejects that case.
    """

    def __init__(self, rows: int, columns: int, best_seat: Union[SeatCoordinate, str]):
        if rows < 1 or columns < 1:
            raise InvalidDimensionError(rows, columns)
        if isinstance(best_seat, str):
            best_seat = SeatCoordinate.parse(best_seat)
        self.rows = rows
        self.columns = columns
        self.best_row = best_seat.row
        self.best_col = best_seat.col

        self._states: list[SeatState] = [SeatState.free] * (rows * columns)
        self._distances: list[int] = [
            abs(r - self.best_row) + abs(c - self.best_col) for r in range(rows) for c in range(columns)
        ]
        self._available = rows * columns
        logger.debug("created %dx%d chart, best seat %s", rows, columns, best_seat.label())

    @property
    def best_seat(self) -> SeatCoordinate:
        return SeatCoordinate(self.best_row, self.best_col)

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"seat out of bounds: row={row}, col={col}")
        return row * self.columns + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def state_at(self, row: int, col: int) -> SeatState:
        return self._states[self._index(row, col)]

    def is_reserved(self, row: int, col: int) -> bool:
        return self._states[self._index(row, col)] is not SeatState.free

    def reserve(self, row: int, col: int, kind: SeatState = SeatState.best_available) -> bool:
        if kind is SeatState.free:
            raise ValueError("reserve() needs a reserved state, not SeatState.free")
        i = self._index(row, col)
        if self._states[i] is not SeatState.free:
            return False
        self._states[i] = kind
        self._available -= 1
        return True

    def distance_at(self, row: int, col: int) -> int:
        return self._distances[self._index(row, col)]

    def available_count(self) -> int:
        return self._available

    def reserved_count(self) -> int:
        return self.rows * self.columns - self._available
