"""
Configuración del buscador de horarios.

Incluye un cargador desde YAML para dejar los parámetros reproducibles:
estrategia de puntaje, rango de días de interés y un tope opcional de
combinaciones a revisar.
"""
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml


SCORING_STRATEGIES = ("per_day", "week_span")


@dataclass
class SolverConfig:
    # Ranking
    scoring: str = "per_day"

    # Rango de días de interés (None = todos los que aparezcan)
    min_days: Optional[int] = None
    max_days: Optional[int] = None

    # Tope de combinaciones a revisar (None = producto completo)
    max_candidates: Optional[int] = None

    # Salida
    top_n: Optional[int] = None
    out_dir: str = "outputs"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        merged = asdict(cls())
        for k, v in data.items():
            if k in merged:
                merged[k] = v
        return cls(**merged)

    def __post_init__(self):
        if self.scoring not in SCORING_STRATEGIES:
            raise ValueError(
                f"scoring debe ser uno de {SCORING_STRATEGIES}, no {self.scoring!r}"
            )
        if self.max_candidates is not None and self.max_candidates < 0:
            raise ValueError("max_candidates no puede ser negativo")

    @property
    def day_range(self) -> Optional[Tuple[int, int]]:
        if self.min_days is None and self.max_days is None:
            return None
        low = self.min_days if self.min_days is not None else 0
        high = self.max_days if self.max_days is not None else 7
        return (low, high)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    text = path.read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def load_config(path: str = "config.yaml") -> SolverConfig:
    cfg_path = Path(path)
    data = _load_yaml(cfg_path)
    if not isinstance(data, dict):
        raise ValueError("config.yaml debe contener un objeto mapeo")
    return SolverConfig.from_dict(data)
