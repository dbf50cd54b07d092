from __future__ import annotations

from typing import Callable

from .assigner import BlockFailure, BlockResult
from .chart import SeatingChart


LEGEND = "x - Initial reservation; o - Reserved by best available selection"


def format_block_result(result: BlockResult) -> str:
    if isinstance(result, BlockFailure):
        return result.value
    start = f"R{result.row + 1}C{result.start_col + 1}"
    if result.count == 1:
        return start
    return f"{start} - R{result.row + 1}C{result.end_col + 1}"


def _table(chart: SeatingChart, title: str, cell: Callable[[int, int], str]) -> list[str]:
    widths = [len(str(c + 1)) for c in range(chart.columns)]
    lines = [f"|{title}|", "|~|" + "|".join(str(c + 1) for c in range(chart.columns)) + "|"]
    for r in range(chart.rows):
        # empty cells keep one blank so the pipes still line up
        cells = [(cell(r, c) or " ").ljust(widths[c]) for c in range(chart.columns)]
        lines.append(f"|{r + 1}|" + "|".join(cells) + "|")
    return lines


def render_seating_chart(chart: SeatingChart) -> str:
    lines = _table(chart, "Seating Chart", lambda r, c: chart.state_at(r, c).marker)
    lines.append(LEGEND)
    return "\n".join(lines)


def render_distances(chart: SeatingChart) -> str:
    # the best seat itself (distance 0) is left blank
    lines = _table(chart, "Manhattan Distances", lambda r, c: str(chart.distance_at(r, c) or ""))
    return "\n".join(lines)


def render_charts(chart: SeatingChart) -> str:
    return render_seating_chart(chart) + "\n" + render_distances(chart)
