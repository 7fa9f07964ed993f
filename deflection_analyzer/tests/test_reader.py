import unittest
import tempfile
from pathlib import Path

import numpy as np

from deflection_analyzer.errors import MalformedRecord
from deflection_analyzer.ingest.readers import parse_series_lines, read_series
from deflection_analyzer.models.catalog import Configuration, InstrumentType, SeriesKey


class TestParseSeriesLines(unittest.TestCase):
    def test_header_discarded_and_second_field_used(self):
        lines = ["time\tvoltage\n", "12:00:00\t1.5\n", "12:00:01\t-2.25\n", "x\t3e-1\n"]
        self.assertEqual(parse_series_lines(lines), [1.5, -2.25, 0.3])

    def test_extra_fields_ignored(self):
        lines = ["h", "a\t1.0\tjunk\tmore", "b\t2.0\t"]
        self.assertEqual(parse_series_lines(lines), [1.0, 2.0])

    def test_crlf_line_endings(self):
        self.assertEqual(parse_series_lines(["h\r\n", "a\t4.5\r\n"]), [4.5])

    def test_empty_and_header_only(self):
        self.assertEqual(parse_series_lines([]), [])
        self.assertEqual(parse_series_lines(["only a header"]), [])

    def test_single_field_line_is_fatal(self):
        with self.assertRaises(MalformedRecord) as cm:
            parse_series_lines(["h", "a\t1.0", "no-tab-here", "b\t2.0"], source="f.txt")
        self.assertEqual(cm.exception.line_no, 3)
        self.assertEqual(cm.exception.source, "f.txt")

    def test_blank_line_is_fatal(self):
        with self.assertRaises(MalformedRecord):
            parse_series_lines(["h", "a\t1.0", "", "b\t2.0"])

    def test_non_numeric_value_is_fatal(self):
        with self.assertRaises(MalformedRecord) as cm:
            parse_series_lines(["h", "a\tabc"])
        self.assertIn("not a number", str(cm.exception))
        # still a ValueError for generic callers
        self.assertIsInstance(cm.exception, ValueError)

    def test_undecodable_bytes_line_is_fatal(self):
        lines = [b"t\tmV\n", b"0\t1.0\n", b"1\t\xff2.0\n"]
        with self.assertRaises(MalformedRecord) as cm:
            parse_series_lines(lines, source="f.txt", encoding="utf-8")
        self.assertEqual(cm.exception.line_no, 3)
        self.assertIn("not valid utf-8", str(cm.exception))

    def test_python_float_grammar(self):
        # underscores and surrounding spaces are accepted, as by float()
        lines = ["h", "a\t1_0", "b\t 1.5 ", "c\tnan"]
        vals = parse_series_lines(lines)
        self.assertEqual(vals[:2], [10.0, 1.5])
        self.assertNotEqual(vals[2], vals[2])


class TestReadSeries(unittest.TestCase):
    def test_synthetic_x_index(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "cup_deflected_0.txt"
            p.write_text("t\tmV\n100\t5\n250\t6\n999\t7\n", encoding="utf-8")
            key = SeriesKey(InstrumentType.CUP, Configuration.DEFLECTED, 1)
            s = read_series(p, key=key)
            self.assertEqual(s.key, key)
            self.assertEqual(s.source_path, p.resolve())
            np.testing.assert_array_equal(s.x, [0.0, 1.0, 2.0])
            np.testing.assert_array_equal(s.y, [5.0, 6.0, 7.0])
            self.assertEqual(s.points(), [(0.0, 5.0), (1.0, 6.0), (2.0, 7.0)])
            self.assertEqual(s.df["x"].dtype, np.float64)

    def test_header_only_file_gives_empty_series(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "f.txt"
            p.write_text("t\tmV\n", encoding="utf-8")
            s = read_series(p)
            self.assertTrue(s.is_empty)
            self.assertEqual(len(s.warnings), 1)

    def test_malformed_file_aborts(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "f.txt"
            p.write_text("t\tmV\n0\t1\n1\toops\n", encoding="utf-8")
            with self.assertRaises(MalformedRecord) as cm:
                read_series(p)
            self.assertEqual(cm.exception.line_no, 3)

    def test_invalid_utf8_file_aborts(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "cup_deflected_0.txt"
            p.write_bytes(b"t\tmV\n0\t1.0\n1\t\xff2.0\n")
            with self.assertRaises(MalformedRecord) as cm:
                read_series(p)
            self.assertEqual(cm.exception.line_no, 3)

    def test_bytes_header_not_decoded(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "f.txt"
            p.write_bytes(b"\xff\xfeheader\r\n0\t2.5\r\n")
            self.assertEqual(read_series(p).y.tolist(), [2.5])

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                read_series(Path(d) / "nope.txt")


if __name__ == "__main__":
    unittest.main()
