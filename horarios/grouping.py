# horarios/grouping.py
from typing import Dict, Iterable, List, Optional, Tuple

from .model import Timetable


def in_day_range(day_count: int, day_range: Optional[Tuple[int, int]]) -> bool:
    if day_range is None:
        return True
    low, high = day_range
    return low <= day_count <= high


def group_by_day_count(
    timetables: Iterable[Timetable],
    day_range: Optional[Tuple[int, int]] = None,
) -> Dict[int, List[Timetable]]:
    """
    Agrupa los horarios válidos por cantidad de días con clases.

    Una clave solo se crea al aparecer su primer horario: si falta,
    ningún horario usa esa cantidad de días.
    """
    groups: Dict[int, List[Timetable]] = {}
    for tt in timetables:
        n_days = tt.day_count
        if not in_day_range(n_days, day_range):
            continue
        if n_days not in groups:
            groups[n_days] = []
        groups[n_days].append(tt)
    return groups
