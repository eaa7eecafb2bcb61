import tempfile
import unittest
from pathlib import Path

from horarios.config import SolverConfig, load_config


class ConfigTests(unittest.TestCase):
    def test_defaults_when_missing(self):
        cfg = load_config("/no/existe/config.yaml")
        self.assertEqual(cfg.scoring, "per_day")
        self.assertIsNone(cfg.day_range)

    def test_load_yaml_ignores_unknown_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("scoring: week_span\nmax_days: 5\nfoo: 1\n", encoding="utf-8")
            cfg = load_config(str(path))
        self.assertEqual(cfg.scoring, "week_span")
        self.assertEqual(cfg.day_range, (0, 5))

    def test_invalid_scoring(self):
        with self.assertRaises(ValueError):
            SolverConfig(scoring="fastest")

    def test_non_mapping_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(str(path))


if __name__ == "__main__":
    unittest.main()
