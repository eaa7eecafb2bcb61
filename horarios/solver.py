from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .config import SolverConfig
from .generator import count_candidates, generate_candidates
from .grouping import group_by_day_count
from .model import Minutes, Subject, TimeInterval
from .overlap import is_conflict_free
from .ranking import RankedGroup, rank_groups

TimetableRows = List[Tuple[str, str, Tuple[TimeInterval, ...]]]


class SolveStatus(Enum):
    OK = "ok"
    NO_VALID_TIMETABLE = "no_valid_timetable"
    TRUNCATED_NO_RESULT = "truncated_no_result"


@dataclass
class SolveResult:
    status: SolveStatus
    groups: Dict[int, RankedGroup]
    candidates_seen: int
    valid_count: int
    truncated: bool = False
    history: List[Dict] = field(default_factory=list)

    @property
    def day_counts(self) -> List[int]:
        return sorted(self.groups)

    def as_output(self) -> Dict[int, Tuple[Minutes, List[TimetableRows]]]:
        return {
            n: (g.min_elapsed, [tt.as_rows() for tt in g.timetables])
            for n, g in sorted(self.groups.items())
        }


class TimetableSolver:
    def __init__(self, subjects: Sequence[Subject], cfg: Optional[SolverConfig] = None):
        self.subjects = list(subjects)
        self.cfg = cfg or SolverConfig()
        self.history: List[Dict] = []

    def _valid_timetables(self, candidates):
        for tt in candidates:
            self._seen += 1
            if is_conflict_free(tt):
                self._valid += 1
                yield tt

    def solve(self) -> SolveResult:
        # UnsatisfiableInputError sale de aquí, antes de generar nada
        candidates = generate_candidates(self.subjects)
        total = count_candidates(self.subjects)
        logger.info(
            "Solving timetable",
            subjects=len(self.subjects),
            candidates=total,
            scoring=self.cfg.scoring,
        )

        truncated = False
        if self.cfg.max_candidates is not None and total > self.cfg.max_candidates:
            truncated = True
            candidates = islice(candidates, self.cfg.max_candidates)
            logger.warning(
                "Candidate cap reached, results cover only a prefix of the product",
                max_candidates=self.cfg.max_candidates,
                total=total,
            )

        self.history = []
        self._seen = 0
        self._valid = 0
        groups = group_by_day_count(self._valid_timetables(candidates), self.cfg.day_range)
        self.history.append({"stage": "generate", "count": self._seen})
        self.history.append({"stage": "filter", "count": self._valid, "rejected": self._seen - self._valid})
        self.history.append({"stage": "group", "count": sum(len(v) for v in groups.values()), "buckets": len(groups)})

        ranked = rank_groups(groups, self.cfg.scoring)
        self.history.append({"stage": "rank", "count": sum(len(g.timetables) for g in ranked.values())})

        if self._valid:
            status = SolveStatus.OK
        elif truncated:
            # Parte del producto quedó sin revisar
            status = SolveStatus.TRUNCATED_NO_RESULT
        else:
            status = SolveStatus.NO_VALID_TIMETABLE

        if status is SolveStatus.NO_VALID_TIMETABLE:
            logger.warning("No conflict-free timetable exists", candidates=self._seen)
        elif status is SolveStatus.TRUNCATED_NO_RESULT:
            logger.warning("No conflict-free timetable within the candidate cap", candidates=self._seen)
        else:
            logger.info(
                "Timetables ranked",
                valid=self._valid,
                rejected=self._seen - self._valid,
                day_counts=sorted(ranked),
            )

        return SolveResult(
            status=status,
            groups=ranked,
            candidates_seen=self._seen,
            valid_count=self._valid,
            truncated=truncated,
            history=list(self.history),
        )


def solve(subjects: Sequence[Subject], cfg: Optional[SolverConfig] = None) -> SolveResult:
    return TimetableSolver(subjects, cfg).solve()
