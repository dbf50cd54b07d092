"""
One reservation run: parse the request text, build a fresh chart, apply the
exact reservations, then the best-available requests in order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .assigner import Block, BlockResult, SeatAssigner
from .chart import BestSeatOutOfBoundsError, SeatingChart
from .config import TheaterConfig
from .parsing import parse_input
from .render import format_block_result, render_charts


logger = logging.getLogger(__name__)


@dataclass
class ReservationReport:
    chart: SeatingChart
    results: list[BlockResult]
    charts: Optional[str] = None

    @property
    def seats_available(self) -> int:
        return self.chart.available_count()

    def lines(self) -> list[str]:
        return [format_block_result(r) for r in self.results]

    def text(self) -> str:
        out = "\n".join(self.lines() + [str(self.seats_available)])
        if self.charts is not None:
            out += "\n" + self.charts
        return out


def build_chart(config: TheaterConfig) -> SeatingChart:
    best = config.best_coordinate
    if not (0 <= best.row < config.rows and 0 <= best.col < config.columns):
        raise BestSeatOutOfBoundsError(config.best_seat)
    return SeatingChart(config.rows, config.columns, best)


def run_reservations(text: str, config: Optional[TheaterConfig] = None, *, charts: bool = False) -> ReservationReport:
    if config is None:
        config = TheaterConfig()
    chart = build_chart(config)
    parsed = parse_input(text)

    assigner = SeatAssigner(chart)
    assigner.apply_initial_reservations(parsed.initial)
    results = assigner.handle_best_available(parsed.requests)

    logger.info(
        "processed %d exact and %d best-available reservations (%d placed), %d seats left",
        len(parsed.initial),
        len(results),
        sum(isinstance(r, Block) for r in results),
        chart.available_count(),
    )
    return ReservationReport(chart=chart, results=results, charts=render_charts(chart) if charts else None)
