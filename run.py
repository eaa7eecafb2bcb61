import argparse
import sys
import time
from pathlib import Path

import yaml

from horarios.config import load_config
from horarios.data_loader import load_schedule
from horarios.errors import ScheduleError, UnsatisfiableInputError
from horarios.report import export_outputs, print_report
from horarios.solver import TimetableSolver


def main():
    parser = argparse.ArgumentParser(description="Busca los mejores horarios por cantidad de días")
    parser.add_argument("--schedule", default="schedule.toml", help="Archivo con cursos y turnos")
    parser.add_argument("--config", default="config.yaml", help="Ruta al archivo de configuración")
    parser.add_argument("--out_dir", default=None, help="Directorio de salida para los CSV")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"Error en el archivo de configuración: {exc}", file=sys.stderr)
        sys.exit(1)

    print("Cargando horarios...")
    try:
        subjects = load_schedule(args.schedule)
        solver = TimetableSolver(subjects, cfg)
        start = time.perf_counter()
        result = solver.solve()
    except UnsatisfiableInputError as exc:
        print(f"Entrada insatisfacible: {exc}", file=sys.stderr)
        sys.exit(1)
    except ScheduleError as exc:
        print(f"Error en el archivo de horarios: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start

    print(f"Cursos: {len(subjects)}")
    print_report(result, cfg.top_n)

    out_dir = Path(args.out_dir or cfg.out_dir)
    export_outputs(result, out_dir)
    print(f"\nTiempo: {elapsed:.2f}s")
    print(f"Se guardaron resultados en {out_dir / 'best_timetables.csv'} y {out_dir / 'summary.csv'}")


if __name__ == "__main__":
    main()
