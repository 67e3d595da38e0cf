"""taxes - Tax rules and take-home calculation.

Scope:
- Federal income tax brackets and standard deduction (single filer)
- FICA: Social Security (wage base cap), Medicare, additional Medicare
- State income tax: none, flat, or progressive, plus supplemental rates

Constraints:
- Pure calculation in engine - no file access, no settings
- Year-specific rules loaded from tax_rules/{year}.yaml by rules

Modules:
- schemas: Pydantic models for rules and results
- rules: YAML loading, year resolution, jurisdiction lookup
- engine: Federal/FICA/state tax and the full breakdown

Usage:
    from takehome.sdk.taxes import calculate_tax, load_tax_rules, get_jurisdiction

    rules = load_tax_rules(2026)
    breakdown = calculate_tax(100000, get_jurisdiction("texas", 2026), rules.federal)
"""

from .schemas import (
    PAY_PERIODS,
    BracketSlice,
    FederalTaxSchedule,
    FicaBreakdown,
    SocialSecurityRules,
    StateComparison,
    TaxBracket,
    TaxBreakdown,
    TaxJurisdiction,
    TaxRules,
)

from .rules import (
    JurisdictionNotFoundError,
    TaxRulesNotFoundError,
    get_available_years,
    get_jurisdiction,
    list_jurisdictions,
    load_tax_rules,
    normalize_key,
    resolve_year,
)

from .engine import (
    apply_brackets,
    bracket_breakdown,
    calculate_tax,
    compute_federal_tax,
    compute_fica_tax,
    compute_state_tax,
    take_home_by_period,
)

__all__ = [
    # Schemas
    "PAY_PERIODS",
    "BracketSlice",
    "FederalTaxSchedule",
    "FicaBreakdown",
    "SocialSecurityRules",
    "StateComparison",
    "TaxBracket",
    "TaxBreakdown",
    "TaxJurisdiction",
    "TaxRules",
    # Rules
    "JurisdictionNotFoundError",
    "TaxRulesNotFoundError",
    "get_available_years",
    "get_jurisdiction",
    "list_jurisdictions",
    "load_tax_rules",
    "normalize_key",
    "resolve_year",
    # Engine
    "apply_brackets",
    "bracket_breakdown",
    "calculate_tax",
    "compute_federal_tax",
    "compute_fica_tax",
    "compute_state_tax",
    "take_home_by_period",
]
