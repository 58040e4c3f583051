import unittest
import os
import sys

# Add the parent directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hourcalc.time_parser import TimeComponents, parse_time_components, split_meridiem
from hourcalc.errors import TimeError, TimeFormatError, TimeValueError


class TestParseTimeComponents(unittest.TestCase):
    def test_valid_times(self):
        """Test accepted spellings"""
        test_cases = [
            ("09:00AM", (9, 0, "AM")),
            ("9:00am", (9, 0, "AM")),
            ("12:30PM", (12, 30, "PM")),
            ("01:15pm", (1, 15, "PM")),
            ("10:30pM", (10, 30, "PM")),
            ("09:00", (9, 0, None)),
            ("9:00", (9, 0, None)),
            ("12:00", (12, 0, None)),
            (" 07:00AM ", (7, 0, "AM")),
            ("\t7:00\n", (7, 0, None)),
        ]

        for raw, expected in test_cases:
            with self.subTest(raw=raw):
                self.assertEqual(parse_time_components(raw), TimeComponents(*expected))

    def test_every_valid_time_round_trips(self):
        """Every hour, minute and meridiem comes back unchanged"""
        for meridiem in ("AM", "PM"):
            for hour in range(1, 13):
                for minute in range(60):
                    raw = f"{hour}:{minute:02d}{meridiem}"
                    result = parse_time_components(raw)
                    self.assertEqual((result.hour12, result.minute, result.meridiem),
                                     (hour, minute, meridiem), raw)

    def test_invalid_format(self):
        """Test structural problems"""
        test_cases = [
            ("900AM", "colon_count"),
            ("9", "colon_count"),
            ("9AM", "colon_count"),
            ("", "colon_count"),
            ("9:00:00", "colon_count"),
            ("FOOAM", "colon_count"),
            ("AM", "meridiem_only"),
            ("pm", "meridiem_only"),
            ("  AM  ", "meridiem_only"),
            ("09:00XM", "minute_width"),
            ("09:00PMM", "minute_width"),
            ("09:0AM", "minute_width"),
            ("09:000AM", "minute_width"),
            ("09:AM", "minute_width"),
            ("09:BBAM", "minute_width"),
            ("9:0BPM", "minute_width"),
            ("10:30 AM", "minute_width"),
            ("090:00AM", "hour_width"),
            (":00AM", "hour_width"),
        ]

        for raw, problem in test_cases:
            with self.subTest(raw=raw):
                with self.assertRaises(TimeFormatError) as ctx:
                    parse_time_components(raw)
                self.assertEqual(ctx.exception.problem, problem)

    def test_invalid_values(self):
        """Test well-formed fields with bad values"""
        test_cases = [
            ("00:00AM", "hour", 0),
            ("13:00AM", "hour", 13),
            ("13:00", "hour", 13),
            ("09:60AM", "minute", 60),
            ("AA:00AM", "hour", None),
            ("09:BB", "minute", None),
            ("9:0B", "minute", None),
            ("+9:00", "hour", None),
            ("9 :00", "hour", None),
            ("9:-1", "minute", None),
        ]

        for raw, field, value in test_cases:
            with self.subTest(raw=raw):
                with self.assertRaises(TimeValueError) as ctx:
                    parse_time_components(raw)
                self.assertEqual(ctx.exception.field, field)
                self.assertEqual(ctx.exception.value, value)

    def test_non_numeric_reported_before_range(self):
        with self.assertRaises(TimeValueError) as ctx:
            parse_time_components("13:BB")
        self.assertEqual(ctx.exception.field, "minute")

    def test_punctuation_before_suffix_is_allowed(self):
        """Only letters disqualify the suffix; other characters stay with the minutes"""
        self.assertEqual(split_meridiem("9:00.AM", "9:00.AM"), ("9:00.", "AM"))
        with self.assertRaises(TimeFormatError) as ctx:
            parse_time_components("9:00.AM")
        self.assertEqual(ctx.exception.problem, "minute_width")

    def test_letter_before_suffix_is_not_a_meridiem(self):
        self.assertEqual(split_meridiem("FOOAM", "FOOAM"), ("FOOAM", None))

    def test_error_messages(self):
        """Messages name the raw input and the offending field"""
        test_cases = [
            ("AM", "Time string is too short or just an AM/PM indicator"),
            ("9", "Missing or too many colons"),
            ("090:00AM", "Hour part '090' must be 1 or 2 digits"),
            ("9:0", "Minute part '0' must be 2 digits"),
            ("AA:00", "Invalid hour value: 'AA' in 'AA:00'. Hour must be a number."),
            ("13:00AM", "Hour must be between 1 and 12 for 12-hour format in '13:00AM'"),
            ("9:75", "Invalid minute: 75. Minute must be between 0 and 59 in '9:75'."),
        ]

        for raw, expected in test_cases:
            with self.subTest(raw=raw):
                with self.assertRaises(TimeError) as ctx:
                    parse_time_components(raw)
                print(f"Debug - Message: {ctx.exception}")
                self.assertIn(expected, str(ctx.exception))
                self.assertTrue(ctx.exception.user_facing)


if __name__ == '__main__':
    unittest.main()
