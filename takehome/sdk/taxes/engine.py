"""Take-home pay estimation.

Pure functions over the frozen rule tables: progressive federal tax,
FICA with the SS wage base and additional Medicare threshold, and state tax
(none, flat or progressive, plus an optional supplemental rate on gross).
Single filer, standard deduction only.
"""

from typing import Dict, List, Sequence, Tuple

from .schemas import (
    BracketSlice,
    FederalTaxSchedule,
    FicaBreakdown,
    TaxBracket,
    TaxBreakdown,
    TaxJurisdiction,
)


def _upper(bracket: TaxBracket) -> float:
    return float("inf") if bracket.up_to is None else bracket.up_to


def apply_brackets(income: float, brackets: Sequence[TaxBracket]) -> Tuple[float, float]:
    """Apply a progressive bracket schedule to income.

    Each bracket's rate only applies to the slice of income inside it.
    Iteration stops at the first bracket whose lower bound is not exceeded.

    Args:
        income: Taxable income (already net of deductions)
        brackets: Ascending, contiguous schedule starting at 0

    Returns:
        Tuple of (tax, marginal_rate). The marginal rate is the rate of the
        highest bracket reached, or the lowest bracket's rate when income is 0.
    """
    tax = 0.0
    marginal_rate = brackets[0].rate if brackets else 0.0

    for bracket in brackets:
        if income <= bracket.over:
            break
        tax += (min(income, _upper(bracket)) - bracket.over) * bracket.rate
        marginal_rate = bracket.rate

    return tax, marginal_rate


def bracket_breakdown(income: float, brackets: Sequence[TaxBracket]) -> List[BracketSlice]:
    """Split income across the brackets it reaches.

    Returns one BracketSlice per bracket reached; the slices' tax sums to
    the tax returned by apply_brackets for the same income.
    """
    slices = []
    for bracket in brackets:
        if income <= bracket.over:
            break
        in_bracket = min(income, _upper(bracket)) - bracket.over
        slices.append(BracketSlice(
            over=bracket.over,
            up_to=bracket.up_to,
            rate=bracket.rate,
            income_in_bracket=in_bracket,
            tax=in_bracket * bracket.rate,
        ))
    return slices


def compute_federal_tax(taxable_income: float, schedule: FederalTaxSchedule) -> Tuple[float, float]:
    """Calculate federal income tax and marginal rate on taxable income.

    Negative input is the caller's concern; pass max(0, gross - deduction).
    """
    return apply_brackets(taxable_income, schedule.tax_brackets)


def compute_fica_tax(gross_salary: float, schedule: FederalTaxSchedule) -> FicaBreakdown:
    """Calculate Social Security, Medicare and additional Medicare tax."""
    ss = schedule.social_security
    social_security = min(gross_salary, ss.wage_cap) * ss.tax_rate
    medicare = gross_salary * schedule.medicare_rate
    additional_medicare = (
        max(0.0, gross_salary - schedule.additional_medicare_threshold)
        * schedule.additional_medicare_rate
    )

    return FicaBreakdown(
        social_security=social_security,
        medicare=medicare,
        additional_medicare=additional_medicare,
        total=social_security + medicare + additional_medicare,
    )


def compute_state_tax(gross_salary: float, jurisdiction: TaxJurisdiction) -> float:
    """Calculate state income tax for a jurisdiction.

    Flat and bracket modes apply to gross minus the state's own standard
    deduction. The supplemental rate applies to full gross.
    """
    if not jurisdiction.has_income_tax:
        return 0.0

    taxable = max(0.0, gross_salary - jurisdiction.standard_deduction)
    if jurisdiction.flat_rate is not None:
        tax = taxable * jurisdiction.flat_rate
    else:
        tax, _ = apply_brackets(taxable, jurisdiction.tax_brackets)

    if jurisdiction.supplemental_rate:
        tax += gross_salary * jurisdiction.supplemental_rate

    return max(0.0, tax)


def calculate_tax(
    gross_salary: float,
    jurisdiction: TaxJurisdiction,
    federal_schedule: FederalTaxSchedule,
    tax_year: int = 0,
) -> TaxBreakdown:
    """Calculate the full tax breakdown for an annual salary.

    Args:
        gross_salary: Annual gross salary in USD (validated by the caller;
            negative values are treated as 0)
        jurisdiction: State configuration
        federal_schedule: Federal rules for the tax year
        tax_year: Year label carried on the result

    Returns:
        TaxBreakdown where total_tax = federal + FICA + state and
        take_home_pay = gross - total_tax
    """
    gross = max(0.0, float(gross_salary))

    federal_taxable = max(0.0, gross - federal_schedule.standard_deduction)
    federal_tax, marginal_rate = compute_federal_tax(federal_taxable, federal_schedule)
    fica = compute_fica_tax(gross, federal_schedule)
    state_tax = compute_state_tax(gross, jurisdiction)

    total_tax = federal_tax + fica.total + state_tax

    return TaxBreakdown(
        tax_year=tax_year,
        jurisdiction=jurisdiction.key,
        gross_salary=gross,
        standard_deduction=federal_schedule.standard_deduction,
        federal_taxable_income=federal_taxable,
        federal_tax=federal_tax,
        federal_marginal_rate=marginal_rate,
        social_security_tax=fica.social_security,
        medicare_tax=fica.medicare,
        additional_medicare_tax=fica.additional_medicare,
        fica_total=fica.total,
        state_tax=state_tax,
        total_tax=total_tax,
        take_home_pay=gross - total_tax,
        effective_federal_rate=federal_tax / gross if gross > 0 else 0.0,
        effective_total_rate=total_tax / gross if gross > 0 else 0.0,
    )


def take_home_by_period(breakdown: TaxBreakdown) -> Dict[str, float]:
    """Take-home pay divided into the standard pay periods."""
    return breakdown.pay_periods
