# horarios/overlap.py
from typing import List, Tuple

from .model import TimeInterval, Timetable


def _sorted_days(timetable: Timetable):
    for day, ivs in timetable.intervals_by_day().items():
        yield day, sorted(ivs, key=lambda iv: (iv.start, iv.end))


def find_conflicts(timetable: Timetable) -> List[Tuple[TimeInterval, TimeInterval]]:
    """Pares de intervalos contiguos (ordenados por inicio) que chocan."""
    conflicts: List[Tuple[TimeInterval, TimeInterval]] = []
    for _, ivs in _sorted_days(timetable):
        for a, b in zip(ivs, ivs[1:]):
            if a.overlaps(b):
                conflicts.append((a, b))
    return conflicts


def is_conflict_free(timetable: Timetable) -> bool:
    # Si algún par choca, al ordenar por inicio también choca un par contiguo
    for _, ivs in _sorted_days(timetable):
        for a, b in zip(ivs, ivs[1:]):
            if a.overlaps(b):
                return False
    return True
