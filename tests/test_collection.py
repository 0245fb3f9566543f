import array
import unittest

from fluent_contracts import ArrayContract, DictionaryContract, ListContract, must
from fluent_contracts.errors import ArgumentNullError, ArgumentOutOfRangeError


class CountTests(unittest.TestCase):
    def test_empty(self):
        must([], "items").be_empty()
        must([1], "items").not_be_empty()
        with self.assertRaises(ArgumentOutOfRangeError):
            must([1], "items").be_empty()

    def test_null_is_a_null_violation(self):
        with self.assertRaises(ArgumentNullError):
            ListContract(None, "items").be_empty()
        with self.assertRaises(ArgumentNullError):
            ListContract(None, "items").have_count_equal_to(0)

    def test_counts(self):
        items = [1, 2, 3]
        (
            must(items, "items")
            .have_count_equal_to(3)
            .and_.not_have_count_equal_to(2)
            .and_.have_count_greater_than(2)
            .and_.have_count_greater_or_equal_to(3)
            .and_.have_count_less_than(4)
            .and_.have_count_less_or_equal_to(3)
            .and_.have_count_between(3, 3)
        )
        with self.assertRaises(ArgumentOutOfRangeError):
            must(items, "items").have_count_between(4, 10)
        with self.assertRaises(ArgumentOutOfRangeError):
            must(items, "items").have_count_greater_than(3)


class SequenceTests(unittest.TestCase):
    def test_contain(self):
        must([1, 2, 3], "items").contain(3, 1).and_.contain(2)
        with self.assertRaises(ArgumentOutOfRangeError):
            must([1, 2, 3], "items").contain(1, 4)

    def test_not_contain_requires_all_present_to_fail(self):
        must([1, 2, 3], "items").not_contain(4).and_.not_contain(1, 4)
        with self.assertRaises(ArgumentOutOfRangeError):
            must([1, 2, 3], "items").not_contain(1, 2)

    def test_elements_of_type(self):
        must(["a", "b"], "items").have_elements_of_type(str)
        with self.assertRaises(ArgumentOutOfRangeError):
            must(["a", 1], "items").have_elements_of_type(str)

    def test_arrays(self):
        must((1, 2), "pair").have_count_equal_to(2).and_.contain(2)
        must(array.array("d", [1.0, 2.0]), "buf").have_elements_of_type(float)
        with self.assertRaises(ArgumentNullError):
            ArrayContract(None, "pair").contain(1)


class DictionaryTests(unittest.TestCase):
    def setUp(self):
        self.headers = {"Content-Type": "json", "X-Trace": None}

    def test_keys(self):
        must(self.headers, "headers").contain_key("X-Trace").and_.not_contain_key("Accept")
        with self.assertRaises(ArgumentOutOfRangeError):
            must(self.headers, "headers").contain_key("Accept")

    def test_values(self):
        must(self.headers, "headers").contain_value("json").and_.contain_value(None)
        must(self.headers, "headers").not_contain_value("xml")
        with self.assertRaises(ArgumentOutOfRangeError):
            must(self.headers, "headers").not_contain_value("json")

    def test_pairs(self):
        d = must(self.headers, "headers")
        d.contain_key_value_pair("Content-Type", "json")
        d.not_contain_key_value_pair("Content-Type", "xml")
        d.not_contain_key_value_pair("Accept", "json")
        with self.assertRaises(ArgumentOutOfRangeError):
            d.contain_key_value_pair("Content-Type", "xml")

    def test_counts_and_null(self):
        must(self.headers, "headers").have_count_equal_to(2).and_.not_be_empty()
        with self.assertRaises(ArgumentNullError):
            DictionaryContract(None, "headers").contain_key("a")


if __name__ == "__main__":
    unittest.main()
