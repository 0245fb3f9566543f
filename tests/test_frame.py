import unittest

import pandas as pd

from fluent_contracts import DataFrameContract, must
from fluent_contracts.errors import ArgumentNullError, ArgumentOutOfRangeError


class Rejected(Exception):
    pass


class DataFrameTests(unittest.TestCase):
    def setUp(self):
        self.df = pd.DataFrame({"id": [1, 2, 3], "score": [0.5, 0.7, 0.9]})

    def test_dispatch(self):
        self.assertIsInstance(must(self.df, "df"), DataFrameContract)

    def test_row_counts(self):
        must(self.df, "df").have_count_equal_to(3).and_.not_be_empty()
        must(pd.DataFrame(), "df").be_empty()

    def test_equality_uses_frame_equals(self):
        same = self.df.copy()
        other = self.df.assign(score=[0.1, 0.2, 0.3])
        must(self.df, "df").be(same).and_.not_be(other)
        must(self.df, "df").be_any_of(other, same)
        must(self.df, "df").not_be_any_of(other)
        with self.assertRaises(ArgumentOutOfRangeError):
            must(self.df, "df").be(other)

    def test_be_with_user_error(self):
        with self.assertRaises(Rejected):
            must(self.df, "df").be(self.df.head(1), error=Rejected)
        DataFrameContract(None, "df").be(None, error=Rejected)

    def test_columns(self):
        must(self.df, "df").have_columns("id", "score").and_.not_have_columns("label")
        with self.assertRaises(ArgumentOutOfRangeError):
            must(self.df, "df").have_columns("id", "label")

    def test_missing_values(self):
        must(self.df, "df").have_no_missing_values()
        holes = self.df.assign(score=[0.5, float("nan"), 0.9])
        with self.assertRaises(ArgumentOutOfRangeError):
            must(holes, "df").have_no_missing_values()

    def test_null(self):
        with self.assertRaises(ArgumentNullError):
            DataFrameContract(None, "df").have_columns("id")
        with self.assertRaises(ArgumentNullError):
            DataFrameContract(None, "df").have_count_equal_to(0)


if __name__ == "__main__":
    unittest.main()
