import unittest

from horarios.errors import MalformedIntervalError
from horarios.model import Shift, Subject, TimeInterval, Timetable, Weekday


class IntervalTests(unittest.TestCase):
    def test_zero_length_is_rejected(self):
        with self.assertRaises(MalformedIntervalError):
            TimeInterval(Weekday.MONDAY, 600, 600)

    def test_inverted_is_rejected(self):
        with self.assertRaises(MalformedIntervalError):
            TimeInterval(Weekday.MONDAY, 660, 600)

    def test_shift_build_names_the_offender(self):
        with self.assertRaises(MalformedIntervalError) as ctx:
            Shift.build("Fisica", "T2", [(Weekday.MONDAY, 540, 600), (Weekday.TUESDAY, 600, 540)])
        self.assertEqual(ctx.exception.subject, "Fisica")
        self.assertEqual(ctx.exception.shift, "T2")
        self.assertIn("Fisica", str(ctx.exception))

    def test_overlaps(self):
        a = TimeInterval(Weekday.MONDAY, 540, 600)
        self.assertTrue(a.overlaps(TimeInterval(Weekday.MONDAY, 570, 630)))
        self.assertFalse(a.overlaps(TimeInterval(Weekday.MONDAY, 600, 660)))
        self.assertFalse(a.overlaps(TimeInterval(Weekday.TUESDAY, 540, 600)))


class WeekdayTests(unittest.TestCase):
    def test_parse(self):
        self.assertIs(Weekday.parse("Monday"), Weekday.MONDAY)
        self.assertIs(Weekday.parse("fri"), Weekday.FRIDAY)
        with self.assertRaises(ValueError):
            Weekday.parse("Funday")

    def test_ordering(self):
        self.assertEqual(sorted([Weekday.FRIDAY, Weekday.MONDAY]), [Weekday.MONDAY, Weekday.FRIDAY])


class TimetableTests(unittest.TestCase):
    def test_footprint_and_span(self):
        a = Shift.build("A", "T1", [(Weekday.MONDAY, 540, 600), (Weekday.WEDNESDAY, 540, 600)])
        b = Shift.build("B", "T1", [(Weekday.MONDAY, 720, 780)])
        tt = Timetable(((Subject("A", (a,)), a), (Subject("B", (b,)), b)))
        self.assertEqual(tt.day_count, 2)
        self.assertEqual(tt.day_span(Weekday.MONDAY), (540, 780))
        self.assertIsNone(tt.day_span(Weekday.FRIDAY))
        self.assertEqual(tt.labels(), "A T1, B T1")

    def test_subject_rejects_foreign_shift(self):
        other = Shift.build("B", "T1", [(Weekday.MONDAY, 540, 600)])
        with self.assertRaises(ValueError):
            Subject("A", (other,))


if __name__ == "__main__":
    unittest.main()
