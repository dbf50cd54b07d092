from __future__ import annotations

import re
from dataclasses import dataclass, field

from .chart import EmptyInputError, SeatCoordinate

_BLOCK_COUNT = re.compile(r"[0-9]+")


@dataclass
class ReservationInput:
    """Parsed request text: exact seats from line 1, block sizes from the rest."""

    initial: list[SeatCoordinate] = field(default_factory=list)
    requests: list[int] = field(default_factory=list)


def parse_block_count(line: str) -> int | None:
    """Return the positive integer on ``line`` or None for lines that are skipped."""
    text = line.strip()
    if not _BLOCK_COUNT.fullmatch(text):
        return None
    n = int(text)
    return n if n > 0 else None


def parse_input(text: str) -> ReservationInput:
    if not text or not text.strip():
        raise EmptyInputError()

    first, *rest = text.splitlines()
    initial = [SeatCoordinate.parse(tok, index=i) for i, tok in enumerate(first.split())]
    requests = [n for n in (parse_block_count(line) for line in rest) if n is not None]
    return ReservationInput(initial=initial, requests=requests)
