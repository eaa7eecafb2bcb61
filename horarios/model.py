# horarios/model.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import MalformedIntervalError

Minutes = int
MINUTES_PER_DAY = 24 * 60


class Weekday(Enum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, text: str) -> "Weekday":
        key = text.strip().lower()
        for day in cls:
            name = day.name.lower()
            if key == name or key == name[:3]:
                return day
        raise ValueError(f"Día inválido: {text!r}")

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __lt__(self, other: "Weekday") -> bool:
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.value < other.value


def format_minutes(value: Minutes) -> str:
    return f"{value // 60:02d}:{value % 60:02d}"


@dataclass(frozen=True)
class TimeInterval:
    # Rango semiabierto [start, end) en minutos desde medianoche
    day: Weekday
    start: Minutes
    end: Minutes

    def __post_init__(self):
        if not (0 <= self.start < self.end <= MINUTES_PER_DAY):
            raise MalformedIntervalError(self.start, self.end)

    @property
    def duration(self) -> Minutes:
        return self.end - self.start

    def overlaps(self, other: "TimeInterval") -> bool:
        # a.end == b.start no es choque
        return (
            self.day == other.day
            and self.start < other.end
            and other.start < self.end
        )

    def __str__(self) -> str:
        return f"{self.day.label} {format_minutes(self.start)}->{format_minutes(self.end)}"


IntervalSpec = Tuple[Weekday, Minutes, Minutes]


@dataclass(frozen=True)
class Shift:
    subject: str
    label: str
    intervals: Tuple[TimeInterval, ...]

    @classmethod
    def build(cls, subject: str, label: str, specs: Iterable[IntervalSpec]) -> "Shift":
        """Construye el turno y reporta qué curso/turno trae un intervalo inválido."""
        intervals = []
        for day, start, end in specs:
            try:
                intervals.append(TimeInterval(day, start, end))
            except MalformedIntervalError as exc:
                raise MalformedIntervalError(exc.start, exc.end, subject, label) from exc
        return cls(subject=subject, label=label, intervals=tuple(intervals))

    @property
    def days(self) -> Tuple[Weekday, ...]:
        return tuple(sorted({iv.day for iv in self.intervals}))


@dataclass(frozen=True)
class Subject:
    # Un "curso" que requiere exactamente un turno
    name: str
    shifts: Tuple[Shift, ...]

    def __post_init__(self):
        for sh in self.shifts:
            if sh.subject != self.name:
                raise ValueError(f"El turno {sh.label} pertenece a {sh.subject}, no a {self.name}")


@dataclass(frozen=True)
class Timetable:
    # Una asignación curso -> turno, en el orden de entrada de los cursos
    assignments: Tuple[Tuple[Subject, Shift], ...]

    def __iter__(self) -> Iterator[Tuple[Subject, Shift]]:
        return iter(self.assignments)

    def __len__(self) -> int:
        return len(self.assignments)

    def shift_for(self, subject_name: str) -> Optional[Shift]:
        for subject, shift in self.assignments:
            if subject.name == subject_name:
                return shift
        return None

    def intervals(self) -> Iterator[TimeInterval]:
        for _, shift in self.assignments:
            yield from shift.intervals

    def intervals_by_day(self) -> Dict[Weekday, List[TimeInterval]]:
        by_day: Dict[Weekday, List[TimeInterval]] = {}
        for iv in self.intervals():
            by_day.setdefault(iv.day, []).append(iv)
        return by_day

    def day_footprint(self) -> frozenset:
        return frozenset(iv.day for iv in self.intervals())

    @property
    def day_count(self) -> int:
        return len(self.day_footprint())

    def day_span(self, day: Weekday) -> Optional[Tuple[Minutes, Minutes]]:
        """(primer inicio, último fin) del día, o None si no hay clases."""
        ivs = [iv for iv in self.intervals() if iv.day == day]
        if not ivs:
            return None
        return min(iv.start for iv in ivs), max(iv.end for iv in ivs)

    def as_rows(self) -> List[Tuple[str, str, Tuple[TimeInterval, ...]]]:
        return [(subject.name, shift.label, shift.intervals) for subject, shift in self.assignments]

    def labels(self) -> str:
        return ", ".join(f"{subject.name} {shift.label}" for subject, shift in self.assignments)
