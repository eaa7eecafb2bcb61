"""
Generador de candidatos: producto cartesiano perezoso sobre los turnos.

Se recorre con un vector de índices (uno por curso) que avanza con
acarreo como un odómetro. El orden es lexicográfico: primero por orden
de cursos y luego por orden de turnos.
"""
from math import prod
from typing import Iterator, List, Sequence

from .errors import UnsatisfiableInputError
from .model import Subject, Timetable


def check_subjects(subjects: Sequence[Subject]) -> None:
    for subject in subjects:
        if not subject.shifts:
            raise UnsatisfiableInputError(subject.name)


def count_candidates(subjects: Sequence[Subject]) -> int:
    return prod(len(s.shifts) for s in subjects)


def _advance(cursor: List[int], sizes: List[int]) -> bool:
    # El último curso es la rueda más rápida
    for pos in range(len(cursor) - 1, -1, -1):
        cursor[pos] += 1
        if cursor[pos] < sizes[pos]:
            return True
        cursor[pos] = 0
    return False


def _iter_product(subjects: Sequence[Subject]) -> Iterator[Timetable]:
    sizes = [len(s.shifts) for s in subjects]
    cursor = [0] * len(subjects)
    while True:
        yield Timetable(
            tuple((s, s.shifts[i]) for s, i in zip(subjects, cursor))
        )
        if not _advance(cursor, sizes):
            return


def generate_candidates(subjects: Sequence[Subject]) -> Iterator[Timetable]:
    """
    Retorna un iterador con un Timetable por cada combinación.

    Sin cursos se produce un único horario vacío. Un curso sin turnos
    lanza UnsatisfiableInputError aquí mismo, antes de iterar, para que
    el llamador lo distinga de "ninguna combinación sin choques".
    """
    subjects = list(subjects)
    check_subjects(subjects)
    return _iter_product(subjects)
