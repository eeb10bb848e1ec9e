"""Tests for the live filter."""

import unittest

from addrbook.core import filter_records, matches, remove_matching
from addrbook.models import Both, Company, Name, Record, format_record

ALICE = Record(Name("Alice"), "1234567890")
ACME = Record(Company("Acme Inc"), "9876543210")
BOB = Record(Both(company="Test Company", name="Bob"), "10293848576")
RECORDS = [ALICE, ACME, BOB]


class TestMatches(unittest.TestCase):
    """Test the per-record match rule."""

    def test_name_substring_any_case(self):
        self.assertTrue(matches(ALICE, "LIC"))
        self.assertFalse(matches(ALICE, "bob"))

    def test_company_substring(self):
        self.assertTrue(matches(ACME, "me in"))

    def test_both_fields(self):
        """Test a Both record matches on either its name or company."""
        self.assertTrue(matches(BOB, "bob"))
        self.assertTrue(matches(BOB, "test comp"))
        self.assertFalse(matches(BOB, "acme"))

    def test_phone_prefix(self):
        """Test phone numbers match from the front."""
        self.assertTrue(matches(ACME, "987"))
        self.assertFalse(matches(ACME, "654"))

    def test_empty_query(self):
        for r in RECORDS:
            self.assertTrue(matches(r, ""))


class TestFilterRecords(unittest.TestCase):
    """Test filtering a record set."""

    def test_empty_query_returns_everything_in_order(self):
        self.assertEqual(filter_records(RECORDS, ""), RECORDS)

    def test_scenario_queries(self):
        self.assertEqual(filter_records(RECORDS, "bo"), [BOB])
        self.assertEqual(filter_records(RECORDS, "acme"), [ACME])
        self.assertEqual(filter_records(RECORDS, "9"), [ACME])

    def test_result_is_ordered_subsequence(self):
        """Test results keep the original relative order."""
        records = [Record(Name(n), "0") for n in ("Anna", "Bert", "Hannah", "Joan")]
        result = filter_records(records, "an")
        self.assertEqual([r.ident.name for r in result], ["Anna", "Hannah", "Joan"])
        positions = [records.index(r) for r in result]
        self.assertEqual(positions, sorted(positions))
        for r in result:
            self.assertTrue(matches(r, "an"))

    def test_pure(self):
        """Test repeated calls give identical results and leave input alone."""
        before = list(RECORDS)
        first = filter_records(RECORDS, "c")
        second = filter_records(RECORDS, "c")
        self.assertEqual(first, second)
        self.assertEqual(RECORDS, before)

    def test_no_match(self):
        self.assertEqual(filter_records(RECORDS, "zzz"), [])

    def test_accepts_any_iterable(self):
        self.assertEqual(filter_records(iter(RECORDS), "ali"), [ALICE])


class TestRemoveMatching(unittest.TestCase):

    def test_split(self):
        kept, removed = remove_matching(RECORDS, "a")
        self.assertEqual(removed, [ALICE, ACME, BOB])
        self.assertEqual(kept, [])
        kept, removed = remove_matching(RECORDS, "alice")
        self.assertEqual(kept, [ACME, BOB])
        self.assertEqual(removed, [ALICE])


class TestFormatRecord(unittest.TestCase):

    def test_labels(self):
        self.assertEqual(format_record(ALICE), "    Alice Phone: 1234567890")
        self.assertEqual(format_record(ACME), "    Acme Inc Phone: 9876543210")
        self.assertEqual(format_record(BOB), "    Bob (Test Company) Phone: 10293848576")


if __name__ == "__main__":
    unittest.main()
