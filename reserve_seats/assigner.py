"""
Exact and best-available seat assignment on a :class:`SeatingChart`.

Best available means the block of consecutive free seats in one row with the
lowest sum of Manhattan distances from the best seat.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .chart import (
    DuplicateReservationError,
    OutOfBoundsError,
    SeatCoordinate,
    SeatingChart,
    SeatState,
)


logger = logging.getLogger(__name__)

MAX_BLOCK_SIZE = 10


class BlockFailure(str, Enum):
    too_many_seats = "Too many seats requested. 10 is the limit"
    exceeds_row_capacity = "Too many seats requested. Limit exceeds number of seats available in any given row"
    not_available = "Not Available"


@dataclass(frozen=True)
class Block:
    row: int
    start_col: int
    count: int

    @property
    def end_col(self) -> int:
        return self.start_col + self.count - 1


BlockResult = Union[Block, BlockFailure]


@dataclass(frozen=True)
class _Candidate:
    score: int
    block: Block


def score_threshold(count: int, best_seat_free: bool) -> int:
    """
    Lowest score a block of ``count`` seats could reach.

    With the best seat free it contributes 0 and its neighbours 1, 2, ...;
    otherwise every seat is at least 1 away. This is a shortcut for stopping
    the search early, not a proof of optimality.
    """
    limit = count - 1 if best_seat_free else count
    return limit * (limit + 1) // 2


class SeatAssigner:
    def __init__(self, chart: SeatingChart):
        self.chart = chart

    def apply_initial_reservations(self, coords: Iterable[SeatCoordinate]) -> None:
        """
        Reserve exact seats in order.

        Raises on the first out-of-bounds or already reserved seat. Seats before
        that position stay reserved.
        """
        chart = self.chart
        for index, seat in enumerate(coords):
            if not chart.in_bounds(seat.row, seat.col):
                raise OutOfBoundsError(index)
            if not chart.reserve(seat.row, seat.col, SeatState.initial):
                raise DuplicateReservationError(index)
            logger.debug("initial reservation %s", seat.label())

    def _best_seat_free(self) -> bool:
        chart = self.chart
        if not chart.in_bounds(chart.best_row, chart.best_col):
            return False
        return not chart.is_reserved(chart.best_row, chart.best_col)

    def _run_score(self, row: int, start: int, count: int) -> Optional[int]:
        chart = self.chart
        score = 0
        for col in range(start, start + count):
            if chart.is_reserved(row, col):
                return None
            score += chart.distance_at(row, col)
        return score

    def search(self, count: int) -> BlockResult:
        """Find the block for ``count`` seats without reserving it."""
        if count < 1:
            raise ValueError(f"seat count must be positive, got {count}")
        if count > MAX_BLOCK_SIZE:
            return BlockFailure.too_many_seats
        if count > self.chart.columns:
            return BlockFailure.exceeds_row_capacity

        threshold = score_threshold(count, self._best_seat_free())
        best: Optional[_Candidate] = None
        for row in range(self.chart.rows):
            for start in range(self.chart.columns - count + 1):
                score = self._run_score(row, start, count)
                if score is None:
                    continue
                block = Block(row, start, count)
                if score <= threshold:
                    logger.debug("early match %s score=%d threshold=%d", block, score, threshold)
                    return block
                # equal scores: the later candidate in scan order replaces the earlier one
                if best is None or score <= best.score:
                    best = _Candidate(score, block)

        if best is None:
            return BlockFailure.not_available
        logger.debug("lowest score match %s score=%d threshold=%d", best.block, best.score, threshold)
        return best.block

    def find_best_block(self, count: int) -> BlockResult:
        result = self.search(count)
        if isinstance(result, Block):
            for col in range(result.start_col, result.end_col + 1):
                self.chart.reserve(result.row, col, SeatState.best_available)
        else:
            logger.debug("request for %d seats failed: %s", count, result.value)
        return result

    def handle_best_available(self, counts: Iterable[int]) -> list[BlockResult]:
        return [self.find_best_block(count) for count in counts]
