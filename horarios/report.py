# horarios/report.py
from pathlib import Path
from typing import Optional

import pandas as pd

from .model import Minutes, Timetable, Weekday, format_minutes
from .solver import SolveResult, SolveStatus


def format_elapsed(value: Minutes) -> str:
    return f"{value // 60}h{value % 60:02d}"


def format_day_hours(tt: Timetable, days=tuple(Weekday)[:5]) -> str:
    """Horas por día (L+M+X+J+V), cero si ese día no hay clases."""
    parts = []
    for day in days:
        span = tt.day_span(day)
        parts.append(format_elapsed(span[1] - span[0]) if span else "0")
    return "+".join(parts)


def format_timetable(i: int, tt: Timetable, elapsed: Minutes) -> str:
    return f"{i}. {tt.labels()} - {format_elapsed(elapsed)} ({format_day_hours(tt)})"


def print_report(result: SolveResult, top_n: Optional[int] = None) -> None:
    print(f"Horarios posibles sin choques: {result.valid_count} de {result.candidates_seen}")
    if result.truncated:
        print("AVISO: se alcanzó el tope de combinaciones; el resultado es parcial")
    if result.status is SolveStatus.NO_VALID_TIMETABLE:
        print("No existe ningún horario sin choques.")
        return
    if result.status is SolveStatus.TRUNCATED_NO_RESULT:
        print("Ninguna de las combinaciones revisadas está libre de choques; aumente max_candidates.")
        return
    if not result.groups:
        print("Ningún horario cae dentro del rango de días configurado.")
        return
    for n_days in result.day_counts:
        group = result.groups[n_days]
        print()
        print(f"Mejores horarios con {n_days} día(s) con clases ({len(group.timetables)} empatados):")
        winners = group.timetables if top_n is None else group.timetables[:top_n]
        for i, tt in enumerate(winners, start=1):
            print(format_timetable(i, tt, group.min_elapsed))


def result_to_dataframe(result: SolveResult) -> pd.DataFrame:
    data = []
    for n_days in result.day_counts:
        group = result.groups[n_days]
        for rank, tt in enumerate(group.timetables, start=1):
            for subject, shift in tt:
                for iv in shift.intervals:
                    data.append(
                        {
                            "Dias": n_days,
                            "Opcion": rank,
                            "Transcurrido_min": group.min_elapsed,
                            "Curso": subject.name,
                            "Turno": shift.label,
                            "Dia": iv.day.label,
                            "Hora_Inicio": format_minutes(iv.start),
                            "Hora_Fin": format_minutes(iv.end),
                        }
                    )
    columns = ["Dias", "Opcion", "Transcurrido_min", "Curso", "Turno", "Dia", "Hora_Inicio", "Hora_Fin"]
    return pd.DataFrame(data, columns=columns)


def summary_dataframe(result: SolveResult) -> pd.DataFrame:
    rows = [
        {"Dias": n, "Transcurrido_min": g.min_elapsed, "Empatados": len(g.timetables)}
        for n, g in sorted(result.groups.items())
    ]
    return pd.DataFrame(rows, columns=["Dias", "Transcurrido_min", "Empatados"])


def export_outputs(result: SolveResult, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    result_to_dataframe(result).to_csv(out_dir / "best_timetables.csv", index=False)
    summary_dataframe(result).to_csv(out_dir / "summary.csv", index=False)
    if result.history:
        pd.DataFrame(result.history).to_csv(out_dir / "history.csv", index=False)


def create_schedule_matrix(tt: Timetable, step: int = 30) -> pd.DataFrame:
    """Grilla hora x día; cada fila cubre [r, r + step)."""
    days = sorted(tt.day_footprint()) or list(Weekday)[:5]
    ivs = list(tt.intervals())
    first = min((iv.start for iv in ivs), default=8 * 60)
    last = max((iv.end for iv in ivs), default=18 * 60)
    first -= first % step
    rows = list(range(first, last, step))
    matrix = pd.DataFrame("", index=[format_minutes(r) for r in rows], columns=[d.label for d in days])
    for subject, shift in tt:
        for iv in shift.intervals:
            for r in rows:
                if iv.start < r + step and r < iv.end:
                    matrix.loc[format_minutes(r), iv.day.label] = f"{subject.name} ({shift.label})"
    return matrix
