"""Take-home estimates by state name, and multi-state comparisons.

Resolves the tax year and jurisdiction from the rule tables, then hands
off to the pure engine functions in takehome.sdk.taxes.engine.
"""

import logging
from typing import Iterable, List, Optional

from .taxes.engine import calculate_tax
from .taxes.rules import get_jurisdiction, list_jurisdictions, load_tax_rules
from .taxes.schemas import StateComparison, TaxBreakdown

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_STATE = "texas"


def estimate_take_home(gross_salary: float, state: str, year: Optional[int] = None) -> TaxBreakdown:
    """Calculate the tax breakdown for a salary in a state.

    Args:
        gross_salary: Annual salary (already validated)
        state: State slug or abbreviation ("new-york", "NY")
        year: Tax year (default: configured or latest)

    Raises:
        JurisdictionNotFoundError: If the state is unknown
        TaxRulesNotFoundError: If the year has no rules
    """
    rules = load_tax_rules(year)
    jurisdiction = get_jurisdiction(state, rules.year)
    return calculate_tax(gross_salary, jurisdiction, rules.federal, tax_year=rules.year)


def compare_states(
    gross_salary: float,
    states: Optional[Iterable[str]] = None,
    reference: str = DEFAULT_REFERENCE_STATE,
    year: Optional[int] = None,
) -> List[StateComparison]:
    """Compare take-home pay for one salary across states.

    Args:
        gross_salary: Annual salary (already validated)
        states: State keys to include (default: all)
        reference: State whose take-home is the baseline for `difference`
        year: Tax year

    Returns:
        StateComparison rows, highest take-home first (ties by name)
    """
    rules = load_tax_rules(year)
    if states is None:
        jurisdictions = list_jurisdictions(rules.year)
    else:
        jurisdictions = []
        for key in states:
            jurisdiction = get_jurisdiction(key, rules.year)
            if jurisdiction not in jurisdictions:
                jurisdictions.append(jurisdiction)

    baseline = calculate_tax(
        gross_salary, get_jurisdiction(reference, rules.year), rules.federal, tax_year=rules.year
    )
    logger.debug("Comparing %d states against %s", len(jurisdictions), baseline.jurisdiction)

    rows = []
    for jurisdiction in jurisdictions:
        breakdown = calculate_tax(gross_salary, jurisdiction, rules.federal, tax_year=rules.year)
        rows.append(StateComparison(
            jurisdiction=jurisdiction.key,
            name=jurisdiction.name,
            breakdown=breakdown,
            difference=breakdown.take_home_pay - baseline.take_home_pay,
        ))

    rows.sort(key=lambda row: (-row.breakdown.take_home_pay, row.name))
    return rows
