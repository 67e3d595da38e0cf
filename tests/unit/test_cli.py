"""Tests for the takehome CLI commands."""

import json

import pytest
from click.testing import CliRunner

from takehome.cli.__main__ import cli
from takehome.cli.renderers.breakdown_renderer import (
    fmt_currency,
    fmt_pct,
    fmt_rate,
    fmt_signed,
)


@pytest.fixture
def runner():
    return CliRunner()


class TestCalc:

    def test_table_output(self, runner):
        result = runner.invoke(cli, ["calc", "100000", "texas", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "$79,180" in result.output
        assert "$13,170" in result.output
        assert "Texas" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["calc", "$50,000", "CA", "--year", "2026", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["jurisdiction"] == "california"
        assert data["state_name"] == "California"
        assert data["tax_year"] == 2026
        assert data["state_tax"] == pytest.approx(1_815.44)
        assert data["pay_periods"]["monthly"] == pytest.approx(data["take_home_pay"] / 12)
        assert [s["rate"] for s in data["federal_brackets"]] == [0.10, 0.12]

    def test_invalid_salary(self, runner):
        result = runner.invoke(cli, ["calc", "lots", "texas"])

        assert result.exit_code == 2
        assert "Invalid salary" in result.output

    def test_salary_out_of_range(self, runner):
        result = runner.invoke(cli, ["calc", "500", "texas"])

        assert result.exit_code == 2
        assert "between" in result.output

    def test_unknown_state(self, runner):
        result = runner.invoke(cli, ["calc", "100000", "atlantis"])

        assert result.exit_code == 1
        assert "Unknown state 'atlantis'" in result.output

    def test_unknown_year(self, runner):
        result = runner.invoke(cli, ["calc", "100000", "texas", "--year", "1999"])

        assert result.exit_code == 1
        assert "1999" in result.output

    def test_uses_configured_year(self, runner):
        runner.invoke(cli, ["settings", "tax-year", "2025"])
        result = runner.invoke(cli, ["calc", "100000", "texas", "--format", "json"])

        data = json.loads(result.output)
        assert data["tax_year"] == 2025
        assert data["federal_tax"] == pytest.approx(13_449)
        # 2025 schedule: 12% bracket ends at 48,475
        assert data["federal_brackets"][1]["up_to"] == 48_475

    def test_malformed_year_env(self, runner, monkeypatch):
        monkeypatch.setenv("TAKEHOME_TAX_YEAR", "next")
        result = runner.invoke(cli, ["calc", "100000", "texas"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "TAKEHOME_TAX_YEAR" in result.output
        assert "'next'" in result.output

    def test_explicit_year_ignores_malformed_env(self, runner, monkeypatch):
        monkeypatch.setenv("TAKEHOME_TAX_YEAR", "next")
        result = runner.invoke(cli, ["calc", "100000", "texas", "--year", "2026", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["take_home_pay"] == pytest.approx(79_180)


class TestCompare:

    def test_json(self, runner):
        result = runner.invoke(cli, [
            "compare", "100000", "-s", "california", "-s", "texas", "--year", "2026", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["reference"] == "texas"
        assert [s["jurisdiction"] for s in data["states"]] == ["texas", "california"]
        assert data["states"][1]["difference"] < 0

    def test_table(self, runner):
        result = runner.invoke(cli, ["compare", "100000", "-s", "NY", "-s", "FL", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "New York" in result.output
        assert "Florida" in result.output

    def test_unknown_reference(self, runner):
        result = runner.invoke(cli, ["compare", "100000", "--reference", "atlantis"])
        assert result.exit_code == 1

    def test_malformed_year_env(self, runner, monkeypatch):
        monkeypatch.setenv("TAKEHOME_TAX_YEAR", "next")

        for args in (["compare", "100000"], ["states"], ["brackets", "federal"]):
            result = runner.invoke(cli, args)
            assert result.exit_code == 1, args
            assert "TAKEHOME_TAX_YEAR" in result.output


class TestListings:

    def test_states(self, runner):
        result = runner.invoke(cli, ["states", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "California" in result.output
        assert "13.3%" in result.output

    def test_federal_brackets(self, runner):
        result = runner.invoke(cli, ["brackets", "federal", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "Over $640,600" in result.output
        assert "Standard deduction: $16,100" in result.output
        assert "$184,500" in result.output

    def test_state_brackets(self, runner):
        result = runner.invoke(cli, ["brackets", "california", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "Over $1,000,000" in result.output
        assert "1.1% of gross wages" in result.output

    def test_flat_state(self, runner):
        result = runner.invoke(cli, ["brackets", "IL", "--year", "2026"])

        assert result.exit_code == 0, result.output
        assert "flat 4.95%" in result.output
        assert "$2,425" in result.output

    def test_no_tax_state(self, runner):
        result = runner.invoke(cli, ["brackets", "texas"])

        assert result.exit_code == 0
        assert "no state income tax" in result.output


class TestSettingsCommands:

    def test_show_defaults(self, runner):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0, result.output
        assert "No settings configured" in result.output
        assert "Effective tax year: 2026 (latest)" in result.output

    def test_set_and_clear_year(self, runner):
        result = runner.invoke(cli, ["settings", "tax-year", "2025"])
        assert result.exit_code == 0, result.output
        assert "Set tax_year: 2025" in result.output

        result = runner.invoke(cli, ["settings", "show"])
        assert "tax_year: 2025" in result.output

        result = runner.invoke(cli, ["settings", "tax-year", "--clear"])
        assert "Cleared tax_year setting." in result.output

    def test_rejects_unknown_year(self, runner):
        result = runner.invoke(cli, ["settings", "tax-year", "1999"])

        assert result.exit_code == 2
        assert "No tax rules for 1999" in result.output

    def test_show_reports_malformed_saved_year(self, runner, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "settings.json").write_text('{"tax_year": "latest"}')

        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 1
        assert "tax_year: latest" in result.output
        assert "must be a tax year" in result.output


class TestFormatting:

    @pytest.mark.parametrize("amount,expected", [
        (79_180.4, "$79,180"),
        (0.5, "$1"),
        (0, "$0"),
        (-1_234.5, "-$1,235"),
        (None, "-"),
    ])
    def test_currency(self, amount, expected):
        assert fmt_currency(amount) == expected

    def test_pct(self):
        assert fmt_pct(0.2082) == "20.8%"
        assert fmt_pct(0) == "0.0%"

    def test_rate(self):
        assert fmt_rate(0.05525) == "5.525%"
        assert fmt_rate(0.10) == "10%"
        assert fmt_rate(0.0145) == "1.45%"

    def test_signed(self):
        assert fmt_signed(1_200) == "+$1,200"
        assert fmt_signed(-1_200) == "-$1,200"
        assert fmt_signed(0.2) == "$0"
