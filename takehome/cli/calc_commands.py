"""Take-home calculation commands."""

import json

import click
from rich.console import Console

from takehome.sdk import (
    DEFAULT_REFERENCE_STATE,
    InvalidSalaryError,
    InvalidTaxYearError,
    compare_states,
    estimate_take_home,
    validate_salary,
)
from takehome.sdk.taxes import (
    JurisdictionNotFoundError,
    TaxRulesNotFoundError,
    bracket_breakdown,
    get_jurisdiction,
    list_jurisdictions,
    load_tax_rules,
)
from .renderers.breakdown_renderer import (
    fmt_currency,
    fmt_rate,
    render_breakdown,
    render_comparison,
    render_schedule,
    render_states,
)

year_option = click.option(
    "--year", type=int, default=None,
    help="Tax year (default: 'settings tax-year' value, else latest available)",
)
format_option = click.option(
    "--format", "output_format", type=click.Choice(["table", "json"]), default="table",
    help="Output format (default: table)",
)


def _parse_salary(value: str) -> float:
    try:
        return validate_salary(value)
    except InvalidSalaryError as e:
        raise click.BadParameter(str(e), param_hint="SALARY")


def _load_rules(year):
    try:
        return load_tax_rules(year)
    except (TaxRulesNotFoundError, InvalidTaxYearError) as e:
        raise click.ClickException(str(e))


def _state_error(e: JurisdictionNotFoundError) -> click.ClickException:
    return click.ClickException(f"{e}. Run 'takehome states' to list valid keys.")


def _lookup(state: str, year: int):
    try:
        return get_jurisdiction(state, year)
    except JurisdictionNotFoundError as e:
        raise _state_error(e)


@click.command("calc")
@click.argument("salary")
@click.argument("state")
@year_option
@format_option
def calc(salary, state, year, output_format):
    """Show take-home pay for SALARY in STATE.

    STATE is a state key or abbreviation (texas, new-york, NY).

    Examples:
        takehome calc 100000 texas
        takehome calc '$85,000' CA --format json
    """
    amount = _parse_salary(salary)
    try:
        breakdown = estimate_take_home(amount, state, year)
    except JurisdictionNotFoundError as e:
        raise _state_error(e)
    except (TaxRulesNotFoundError, InvalidTaxYearError) as e:
        raise click.ClickException(str(e))

    rules = _load_rules(breakdown.tax_year)
    jurisdiction = _lookup(breakdown.jurisdiction, breakdown.tax_year)
    slices = bracket_breakdown(breakdown.federal_taxable_income, rules.federal.tax_brackets)

    if output_format == "json":
        output = breakdown.model_dump()
        output["state_name"] = jurisdiction.name
        output["pay_periods"] = breakdown.pay_periods
        output["federal_brackets"] = [s.model_dump() for s in slices]
        click.echo(json.dumps(output, indent=2))
        return

    render_breakdown(Console(), breakdown, jurisdiction, slices)


@click.command("compare")
@click.argument("salary")
@click.option("--state", "-s", "states", multiple=True,
              help="State to include (repeatable; default: all states)")
@click.option("--reference", "-r", default=DEFAULT_REFERENCE_STATE, show_default=True,
              help="State the differences are measured against")
@year_option
@format_option
def compare(salary, states, reference, year, output_format):
    """Compare take-home pay for SALARY across states.

    Examples:
        takehome compare 120000
        takehome compare 120000 -s california -s new-york -s florida
    """
    amount = _parse_salary(salary)
    rules = _load_rules(year)
    reference_state = _lookup(reference, rules.year)

    try:
        rows = compare_states(amount, states or None, reference=reference_state.key, year=rules.year)
    except JurisdictionNotFoundError as e:
        raise _state_error(e)

    if output_format == "json":
        output = {
            "tax_year": rules.year,
            "gross_salary": amount,
            "reference": reference_state.key,
            "states": [
                {
                    "jurisdiction": row.jurisdiction,
                    "name": row.name,
                    "state_tax": row.breakdown.state_tax,
                    "take_home_pay": row.breakdown.take_home_pay,
                    "effective_total_rate": row.breakdown.effective_total_rate,
                    "difference": row.difference,
                }
                for row in rows
            ],
        }
        click.echo(json.dumps(output, indent=2))
        return

    render_comparison(Console(width=120), rows, reference_state.name)


@click.command("states")
@year_option
def states(year):
    """List states with their income tax type and top rate."""
    rules = _load_rules(year)
    render_states(Console(width=100), list_jurisdictions(rules.year), rules.year)


@click.command("brackets")
@click.argument("state")
@year_option
def brackets(state, year):
    """Show the tax schedule for STATE ('federal' for the federal schedule)."""
    rules = _load_rules(year)
    console = Console()

    if state.strip().lower() == "federal":
        federal = rules.federal
        render_schedule(
            console,
            f"Federal Income Tax Brackets ({rules.year}, single)",
            federal.tax_brackets,
            federal.standard_deduction,
            notes=[
                f"Social Security: {fmt_rate(federal.social_security.tax_rate)} "
                f"up to {fmt_currency(federal.social_security.wage_cap)}",
                f"Medicare: {fmt_rate(federal.medicare_rate)}, plus "
                f"{fmt_rate(federal.additional_medicare_rate)} over "
                f"{fmt_currency(federal.additional_medicare_threshold)}",
            ],
        )
        return

    jurisdiction = _lookup(state, rules.year)
    notes = []
    if jurisdiction.supplemental_rate:
        notes.append(f"Plus {fmt_rate(jurisdiction.supplemental_rate)} of gross wages (SDI / local tax)")

    if not jurisdiction.has_income_tax:
        click.echo(f"{jurisdiction.name} has no state income tax on wages.")
    elif jurisdiction.flat_rate is not None:
        click.echo(
            f"{jurisdiction.name} ({rules.year}): flat {fmt_rate(jurisdiction.flat_rate)} "
            f"after a {fmt_currency(jurisdiction.standard_deduction)} deduction"
        )
        for note in notes:
            click.echo(note)
    else:
        render_schedule(
            console,
            f"{jurisdiction.name} Income Tax Brackets ({rules.year})",
            jurisdiction.tax_brackets,
            jurisdiction.standard_deduction,
            notes=notes,
        )
