# horarios/data_loader.py
"""
Lectura del archivo de horarios (TOML, YAML o JSON).

Formato: nombre del curso -> tabla (o lista de tablas) que mapea la
etiqueta del turno a uno o varios textos "<Día> <inicio>-><fin>".
Cada tabla de la lista produce un curso distinto que recibe su propio turno.

    [[Matematicas]]
    T1 = "Monday 9:00->11:00"
    T2 = ["Tuesday 9->10", "Thursday 9->10"]
"""
import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import ScheduleParseError
from .model import IntervalSpec, Minutes, Shift, Subject, Weekday


def parse_hour(text: str) -> Minutes:
    hour, _, minute = text.strip().partition(":")
    try:
        h = int(hour)
        m = int(minute) if minute else 0
    except ValueError:
        raise ScheduleParseError(f"Hora inválida: {text!r}") from None
    if not (0 <= m < 60) or h < 0:
        raise ScheduleParseError(f"Hora inválida: {text!r}")
    return h * 60 + m


def parse_interval(text: str) -> IntervalSpec:
    parts = text.split()
    if len(parts) != 2:
        raise ScheduleParseError(
            f"Formato de turno inválido: {text!r}. Se espera: <día> <inicio>-><fin>"
        )
    day_txt, duration = parts
    try:
        day = Weekday.parse(day_txt)
    except ValueError as exc:
        raise ScheduleParseError(str(exc)) from None
    start, sep, end = duration.partition("->")
    if not sep:
        raise ScheduleParseError(f"Duración inválida: {duration!r}")
    return day, parse_hour(start), parse_hour(end)


def _shift_tables(subject_name: str, raw: Any) -> List[Dict[str, Any]]:
    if isinstance(raw, dict):
        return [raw]
    if isinstance(raw, list) and all(isinstance(t, dict) for t in raw):
        return raw
    raise ScheduleParseError(f"El curso {subject_name!r} debe ser una tabla de turnos")


def parse_schedule(data: Dict[str, Any]) -> List[Subject]:
    if not isinstance(data, dict):
        raise ScheduleParseError("El archivo de horarios debe contener un objeto mapeo")

    subjects: List[Subject] = []
    for subject_name, raw in data.items():
        for table in _shift_tables(subject_name, raw):
            shifts: List[Shift] = []
            for label, value in table.items():
                texts = [value] if isinstance(value, str) else value
                if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
                    raise ScheduleParseError(
                        f"Turno {subject_name}/{label}: se espera texto o lista de textos"
                    )
                specs = [parse_interval(t) for t in texts]
                shifts.append(Shift.build(str(subject_name), str(label), specs))
            subjects.append(Subject(name=str(subject_name), shifts=tuple(shifts)))
    return subjects


FORMATS_BY_SUFFIX = {".toml": "toml", ".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def loads_schedule(text: str, fmt: str = "toml") -> List[Subject]:
    try:
        if fmt == "toml":
            data = tomllib.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text) or {}
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise ScheduleParseError(f"Formato no soportado: {fmt}")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ScheduleParseError(f"Archivo de horarios inválido: {exc}") from exc
    return parse_schedule(data)


def load_schedule(path: str = "schedule.toml") -> List[Subject]:
    sched_path = Path(path)
    if not sched_path.exists():
        raise ScheduleParseError(f"No se encontró el archivo {sched_path}")
    fmt = FORMATS_BY_SUFFIX.get(sched_path.suffix.lower())
    if fmt is None:
        raise ScheduleParseError(f"Extensión no soportada: {sched_path.name}")
    return loads_schedule(sched_path.read_text(encoding="utf-8"), fmt)
