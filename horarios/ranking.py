# horarios/ranking.py
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

import numpy as np

from .model import MINUTES_PER_DAY, Minutes, Timetable

ScoreFn = Callable[[Timetable], Minutes]


def per_day_elapsed(tt: Timetable) -> Minutes:
    """Suma, por cada día con clases, de (último fin - primer inicio)."""
    total = 0
    for ivs in tt.intervals_by_day().values():
        total += max(iv.end for iv in ivs) - min(iv.start for iv in ivs)
    return total


def week_span_elapsed(tt: Timetable) -> Minutes:
    """Tramo único desde la primera clase de la semana hasta la última."""
    points = [
        (iv.day.value * MINUTES_PER_DAY + iv.start, iv.day.value * MINUTES_PER_DAY + iv.end)
        for iv in tt.intervals()
    ]
    if not points:
        return 0
    return max(end for _, end in points) - min(start for start, _ in points)


SCORERS: Dict[str, ScoreFn] = {
    "per_day": per_day_elapsed,
    "week_span": week_span_elapsed,
}


def get_scorer(strategy: str) -> ScoreFn:
    try:
        return SCORERS[strategy]
    except KeyError:
        raise ValueError(f"Estrategia de puntaje desconocida: {strategy!r}") from None


@dataclass(frozen=True)
class RankedGroup:
    day_count: int
    min_elapsed: Minutes
    timetables: Tuple[Timetable, ...]


def co_minimal(timetables: List[Timetable], score: ScoreFn) -> Tuple[Minutes, List[Timetable]]:
    # Dos pasadas: puntajes y luego todos los que empatan con el mínimo
    scores = np.array([score(tt) for tt in timetables], dtype=np.int64)
    best = int(scores.min())
    winners = [timetables[i] for i in np.flatnonzero(scores == best)]
    return best, winners


def rank_groups(
    groups: Dict[int, List[Timetable]],
    strategy: str = "per_day",
) -> Dict[int, RankedGroup]:
    score = get_scorer(strategy)
    ranked: Dict[int, RankedGroup] = {}
    for day_count in sorted(groups):
        members = groups[day_count]
        if not members:
            continue
        best, winners = co_minimal(members, score)
        ranked[day_count] = RankedGroup(day_count, best, tuple(winners))
    return ranked
