"""
Tipos de error del buscador de horarios.

Toda falla se produce al validar los datos de entrada; una vez
validados, generar, filtrar y rankear no puede fallar.
"""
from typing import Optional


class ScheduleError(Exception):
    """Excepción base del paquete."""


class MalformedIntervalError(ScheduleError, ValueError):
    """Intervalo con inicio >= fin o fuera del día."""

    def __init__(
        self,
        start: int,
        end: int,
        subject: Optional[str] = None,
        shift: Optional[str] = None,
    ) -> None:
        self.start = start
        self.end = end
        self.subject = subject
        self.shift = shift
        where = ""
        if subject is not None:
            where = f" en {subject}"
            if shift is not None:
                where += f" / {shift}"
        super().__init__(f"Intervalo inválido {start}->{end}{where}")


class UnsatisfiableInputError(ScheduleError):
    """Un curso no tiene turnos: ninguna combinación es posible."""

    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(f"El curso '{subject}' no tiene turnos disponibles")


class ScheduleParseError(ScheduleError, ValueError):
    """Archivo de horarios ilegible o mal formado."""
