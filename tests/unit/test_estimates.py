"""Tests for state-keyed estimates and multi-state comparison."""

import pytest

from takehome.sdk import (
    JurisdictionNotFoundError,
    compare_states,
    estimate_take_home,
)


class TestEstimateTakeHome:

    def test_by_abbreviation(self):
        b = estimate_take_home(100_000, "TX", year=2026)
        assert b.jurisdiction == "texas"
        assert b.tax_year == 2026
        assert b.take_home_pay == pytest.approx(79_180)

    def test_unknown_state(self):
        with pytest.raises(JurisdictionNotFoundError):
            estimate_take_home(100_000, "atlantis", year=2026)


class TestCompareStates:

    def test_sorted_by_take_home_with_name_tiebreak(self):
        rows = compare_states(100_000, ["california", "texas", "florida"], year=2026)

        assert [r.jurisdiction for r in rows] == ["florida", "texas", "california"]
        assert rows[0].difference == 0
        assert rows[1].difference == 0
        assert rows[2].difference == pytest.approx(-rows[2].breakdown.state_tax)

    def test_reference_outside_selection(self):
        rows = compare_states(100_000, ["new-york"], reference="texas", year=2026)

        assert len(rows) == 1
        assert rows[0].difference < 0
        assert rows[0].difference == pytest.approx(-rows[0].breakdown.state_tax)

    def test_custom_reference(self):
        rows = compare_states(100_000, ["texas"], reference="california", year=2026)
        assert rows[0].difference > 0

    def test_duplicates_collapsed(self):
        rows = compare_states(100_000, ["NY", "new-york", "New York"], year=2026)
        assert len(rows) == 1

    def test_all_states(self):
        rows = compare_states(100_000, year=2026)

        assert len(rows) == 50
        take_homes = [r.breakdown.take_home_pay for r in rows]
        assert take_homes == sorted(take_homes, reverse=True)
        # No-tax states share the top spot
        assert {r.jurisdiction for r in rows[:9]} == {
            "alaska", "florida", "nevada", "new-hampshire", "south-dakota",
            "tennessee", "texas", "washington", "wyoming",
        }

    def test_unknown_state_in_selection(self):
        with pytest.raises(JurisdictionNotFoundError):
            compare_states(100_000, ["texas", "atlantis"], year=2026)
