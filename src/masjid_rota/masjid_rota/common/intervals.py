"""Interval arithmetic shared by shifts, prayer windows and breaks.

Intervals are half-open ``[start, end)``: two intervals that only touch at an
endpoint do not overlap. Point membership for "is this shift running at T"
is inclusive on both ends (see ``covers``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")
P = TypeVar("P")


@dataclass(frozen=True)
class Interval(Generic[P]):
    start: P
    end: P


def overlaps(a: Interval, b: Interval) -> bool:
    return a.start < b.end and a.end > b.start


def covers(interval: Interval, instant) -> bool:
    """Inclusive point test: a shift ending exactly at ``instant`` still counts."""
    return interval.start <= instant <= interval.end


def contains(window: Interval, instant, *, closed_end: bool = False) -> bool:
    """Window membership; ``closed_end`` for the open-ended last window of a set."""
    if closed_end:
        return window.start <= instant <= window.end
    return window.start <= instant < window.end


def overlap_map(items: Sequence[T], span: Callable[[T], Interval]) -> List[Tuple[T, List[T]]]:
    """Pair every item with the other items whose spans overlap it."""
    spans = [span(item) for item in items]
    out: List[Tuple[T, List[T]]] = []
    for i, item in enumerate(items):
        others = [items[j] for j in range(len(items)) if j != i and overlaps(spans[i], spans[j])]
        out.append((item, others))
    return out
