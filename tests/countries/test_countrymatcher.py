"""Tests for country name matching.

Tests cover:
1. fuzzy_compare substring and comma-reversal rules
2. Exact pass (case-insensitive, first hit wins)
3. Fuzzy pass (unique match only)
4. Shape rejection of short or empty input
"""

import pytest

from flagidentity.countries.countrymatcher import (
    fuzzy_compare,
    fuzzy_candidates,
    resolve,
    resolve_exact,
    resolve_fuzzy,
)
from flagidentity.countries.countrytables import table_from_mapping


class TestFuzzyCompare:
    """Test the substring / comma-reversal comparison"""

    def test_query_inside_name(self):
        assert fuzzy_compare("vatican", "Holy See (Vatican City State)")

    def test_name_inside_query(self):
        assert fuzzy_compare("russian federation of states", "Russian Federation")

    def test_name_is_lowercased(self):
        assert fuzzy_compare("russia", "RUSSIAN FEDERATION")

    def test_comma_clauses_reversed(self):
        assert fuzzy_compare("republic of moldova", "Moldova, Republic of")
        assert fuzzy_compare("british virgin islands", "Virgin Islands, British")

    def test_comma_reversal_substring(self):
        # Part of the reversed form
        assert fuzzy_compare("of moldova", "Moldova, Republic of")

    def test_no_match(self):
        assert not fuzzy_compare("france", "Germany")
        assert not fuzzy_compare("moldova republic", "Moldova, Republic of")

    def test_candidate_is_not_lowercased(self):
        """The query is expected to be normalized by the caller"""
        assert not fuzzy_compare("Russia", "Russian Federation")


class TestResolveExact:
    """Test the short-circuiting exact pass"""

    def test_primary_name(self, small_table):
        assert resolve_exact("Russian Federation", small_table) == "RU"

    def test_alternate_name(self, small_table):
        assert resolve_exact("Russia", small_table) == "RU"
        assert resolve_exact("UK", small_table) == "GB"

    def test_case_and_whitespace(self, small_table):
        assert resolve_exact("  rUsSiA ", small_table) == "RU"

    def test_substring_is_not_exact(self, small_table):
        assert resolve_exact("Vatican", small_table) is None

    def test_first_hit_in_table_order(self):
        table = table_from_mapping({"AA": "Sameland", "BB": ["Other", "Sameland"]})
        assert resolve_exact("sameland", table) == "AA"


class TestResolveFuzzy:
    """Test the collect-then-count fuzzy pass"""

    def test_unique_substring(self, small_table):
        assert resolve_fuzzy("Vatican", small_table) == "VA"

    def test_comma_reversal(self, small_table):
        assert resolve_fuzzy("Republic of Moldova", small_table) == "MD"
        assert resolve_fuzzy("British Virgin Islands", small_table) == "VG"

    def test_ambiguous_is_no_match(self, small_table):
        assert fuzzy_candidates("United", small_table) == ["GB", "US", "AE"]
        assert resolve_fuzzy("United", small_table) is None

    def test_no_candidates(self, small_table):
        assert fuzzy_candidates("Atlantis", small_table) == []
        assert resolve_fuzzy("Atlantis", small_table) is None


class TestResolve:
    """Test exact-then-fuzzy resolution"""

    def test_exact_beats_ambiguous_fuzzy(self, small_table):
        """'Niger' is also a substring of 'Nigeria'"""
        assert fuzzy_candidates("Niger", small_table) == ["NE", "NG"]
        assert resolve_fuzzy("Niger", small_table) is None
        assert resolve("Niger", small_table) == "NE"

    def test_fuzzy_fallback(self, small_table):
        assert resolve("Holy See", small_table) == "VA"

    def test_case_insensitive(self, small_table):
        results = {resolve(s, small_table) for s in ["russia", "RUSSIA", "Russia"]}
        assert results == {"RU"}

    @pytest.mark.parametrize("bad", [None, "", "x", "   ", 42, ["Russia"]])
    def test_rejects_malformed_input(self, small_table, bad):
        assert resolve(bad, small_table) is None
        assert fuzzy_candidates(bad, small_table) == []

    def test_empty_table(self):
        assert resolve("Russia", table_from_mapping({})) is None
