import tempfile
import unittest
from pathlib import Path

from horarios.data_loader import load_schedule, loads_schedule, parse_hour, parse_interval
from horarios.errors import MalformedIntervalError, ScheduleParseError
from horarios.model import Weekday

SCHEDULE_TOML = """\
[[Matematicas]]
T1 = "Monday 9:00->11:00"
T2 = ["Tuesday 9->10", "Thursday 9->10"]

[[Fisica]]
T1 = "Wednesday 14:30->16"
"""


class ParseTests(unittest.TestCase):
    def test_parse_hour(self):
        self.assertEqual(parse_hour("9"), 540)
        self.assertEqual(parse_hour("14:30"), 870)
        with self.assertRaises(ScheduleParseError):
            parse_hour("9:75")
        with self.assertRaises(ScheduleParseError):
            parse_hour("nueve")

    def test_parse_interval(self):
        self.assertEqual(parse_interval("Friday 8->9:15"), (Weekday.FRIDAY, 480, 555))
        with self.assertRaises(ScheduleParseError):
            parse_interval("Friday 8-9")
        with self.assertRaises(ScheduleParseError):
            parse_interval("Someday 8->9")


class LoadTests(unittest.TestCase):
    def test_loads_toml_keeps_file_order(self):
        subjects = loads_schedule(SCHEDULE_TOML)
        self.assertEqual([s.name for s in subjects], ["Matematicas", "Fisica"])
        mate = subjects[0]
        self.assertEqual([sh.label for sh in mate.shifts], ["T1", "T2"])
        self.assertEqual(mate.shifts[1].days, (Weekday.TUESDAY, Weekday.THURSDAY))
        self.assertEqual(subjects[1].shifts[0].intervals[0].start, 870)

    def test_loads_yaml(self):
        text = "Quimica:\n  L1: Monday 8->10\n  L2: [Tuesday 8->9, Friday 8->9]\n"
        subjects = loads_schedule(text, "yaml")
        self.assertEqual(len(subjects[0].shifts), 2)

    def test_repeated_tables_make_separate_subjects(self):
        text = '[[Mat]]\nT1 = "Monday 9->10"\n\n[[Mat]]\nP1 = "Tuesday 9->10"\n'
        subjects = loads_schedule(text)
        self.assertEqual(
            [(s.name, [sh.label for sh in s.shifts]) for s in subjects],
            [("Mat", ["T1"]), ("Mat", ["P1"])],
        )

    def test_bad_interval_names_subject_and_shift(self):
        with self.assertRaises(MalformedIntervalError) as ctx:
            loads_schedule('[[Historia]]\nH1 = "Monday 10->9"\n')
        self.assertEqual((ctx.exception.subject, ctx.exception.shift), ("Historia", "H1"))

    def test_invalid_toml(self):
        with self.assertRaises(ScheduleParseError):
            loads_schedule("[[Historia\n")

    def test_load_schedule_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "schedule.toml"
            path.write_text(SCHEDULE_TOML, encoding="utf-8")
            subjects = load_schedule(str(path))
        self.assertEqual(len(subjects), 2)

    def test_missing_file_and_bad_extension(self):
        with self.assertRaises(ScheduleParseError):
            load_schedule("/no/existe/schedule.toml")
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "schedule.txt"
            path.write_text(SCHEDULE_TOML, encoding="utf-8")
            with self.assertRaises(ScheduleParseError):
                load_schedule(str(path))


if __name__ == "__main__":
    unittest.main()
