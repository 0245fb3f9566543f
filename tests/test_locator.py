import unittest
from pathlib import Path

from fluent_contracts import DEFAULT_ARGUMENT_NAME, must, must_directory, must_file
from fluent_contracts.errors import ArgumentOutOfRangeError
from fluent_contracts.locator import _first_argument, get_name_or_default
from tests._util import tmp_bytes_file


class FirstArgumentTests(unittest.TestCase):
    def test_stops_at_top_level_comma_or_paren(self):
        line = "must(total, 'x')"
        self.assertEqual(_first_argument(line, 5), "total")
        line = "must(order.total).be(3)"
        self.assertEqual(_first_argument(line, 5), "order.total")

    def test_nested_brackets_and_quotes(self):
        line = 'must(fn(a, b)["k,)"]).be(1)'
        self.assertEqual(_first_argument(line, 5), 'fn(a, b)["k,)"]')

    def test_unterminated_returns_empty(self):
        self.assertEqual(_first_argument("must(a,", 5), "a")
        self.assertEqual(_first_argument("must(abc", 5), "")


class GetNameTests(unittest.TestCase):
    def test_reads_the_source_line(self):
        path = tmp_bytes_file(b"x = 1\ncheck = must(order_total).be(3)\n", suffix=".py")
        try:
            self.assertEqual(get_name_or_default(str(path), 2, "must", "d"), "order_total")
            self.assertEqual(get_name_or_default(str(path), 1, "must", "d"), "d")
        finally:
            path.unlink()

    def test_entry_point_must_not_be_a_suffix(self):
        path = tmp_bytes_file(b"c = dont_must(a)\n", suffix=".py")
        try:
            self.assertEqual(get_name_or_default(str(path), 1, "must", "d"), "d")
        finally:
            path.unlink()

    def test_several_calls_on_one_line_fall_back(self):
        path = tmp_bytes_file(b"must(a).be_positive(); must(b).be_positive()\n", suffix=".py")
        try:
            self.assertEqual(get_name_or_default(str(path), 1, "must", "d"), "d")
        finally:
            path.unlink()

    def test_missing_file_returns_default(self):
        self.assertEqual(get_name_or_default("<stdin>", 1, "must", "d"), "d")


class CallerNameTests(unittest.TestCase):
    def test_must_uses_argument_text(self):
        my_value = 10
        self.assertEqual(must(my_value).name, "my_value")

    def test_expression_argument(self):
        order = {"total": 3}
        self.assertEqual(must(order["total"]).name, 'order["total"]')

    def test_name_appears_in_error(self):
        page_size = -1
        with self.assertRaisesRegex(ArgumentOutOfRangeError, r"\(Parameter 'page_size'\)"):
            must(page_size).be_positive()

    def test_second_call_on_a_line_is_not_misnamed(self):
        first, second = 1, -1
        with self.assertRaisesRegex(ArgumentOutOfRangeError, r"\(Parameter 'argument'\)"):
            must(first).be_positive(); must(second).be_positive()  # noqa: E702

    def test_explicit_name_wins(self):
        self.assertEqual(must(5, "limit").name, "limit")

    def test_path_entry_points(self):
        report = Path("report.csv")
        self.assertEqual(must_file(report).name, "report")
        self.assertEqual(must_directory(report.parent).name, "report.parent")

    def test_unavailable_source_falls_back(self):
        ns = {"must": must}
        exec("c = must(5)", ns)
        self.assertEqual(ns["c"].name, DEFAULT_ARGUMENT_NAME)


if __name__ == "__main__":
    unittest.main()
