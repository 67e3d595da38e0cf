"""Pydantic schemas for tax rules validation and calculation results.

These schemas validate the tax_rules/*.yaml files and provide typed, frozen
access to federal and state parameters like brackets, deductions and the
SS wage base. Result models (TaxBreakdown etc.) are frozen value objects.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


# Take-home divisors: 2080 = 40 hrs x 52 weeks, 260 = weekdays per year
PAY_PERIODS = {
    "annual": 1,
    "monthly": 12,
    "biweekly": 26,
    "weekly": 52,
    "daily": 260,
    "hourly": 2080,
}


class TaxBracket(BaseModel):
    """Single tax bracket entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    over: float = Field(default=0, ge=0, description="Lower bound of the bracket")
    up_to: Optional[float] = Field(default=None, description="Upper bound (None for the top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")


def check_bracket_schedule(brackets: Sequence[TaxBracket]) -> Tuple[TaxBracket, ...]:
    """Verify a schedule is contiguous, covers [0, inf) and never lowers the rate.

    Raises:
        ValueError: If any of the schedule invariants is violated
    """
    if not brackets:
        raise ValueError("bracket schedule is empty")
    if brackets[0].over != 0:
        raise ValueError(f"first bracket must start at 0, not {brackets[0].over}")

    for prev, cur in zip(brackets, brackets[1:]):
        if prev.up_to is None:
            raise ValueError(f"open-ended bracket over {prev.over} is not the last one")
        if prev.up_to <= prev.over:
            raise ValueError(f"bracket over {prev.over} has up_to {prev.up_to} <= its lower bound")
        if cur.over != prev.up_to:
            raise ValueError(f"gap or overlap between {prev.up_to} and {cur.over}")
        if cur.rate < prev.rate:
            raise ValueError(f"rate drops from {prev.rate} to {cur.rate} at {cur.over}")

    if brackets[-1].up_to is not None:
        raise ValueError("last bracket must be open-ended (no up_to)")
    return tuple(brackets)


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    wage_cap: float = Field(..., gt=0, description="SS wage base (max taxable)")
    tax_rate: float = Field(default=0.062, ge=0, le=1, description="SS tax rate (employee portion)")


class FederalTaxSchedule(BaseModel):
    """Federal income tax and FICA parameters for one tax year (single filer)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_deduction: float = Field(..., ge=0)
    tax_brackets: Tuple[TaxBracket, ...]
    social_security: SocialSecurityRules
    medicare_rate: float = Field(default=0.0145, ge=0, le=1)
    additional_medicare_rate: float = Field(default=0.009, ge=0, le=1)
    additional_medicare_threshold: float = Field(default=200000, ge=0)

    @field_validator("tax_brackets")
    @classmethod
    def _check_brackets(cls, value):
        return check_bracket_schedule(value)


class TaxJurisdiction(BaseModel):
    """State income tax configuration.

    Exactly one mode is active: no income tax, a flat rate, or a progressive
    bracket schedule. Flat and bracket modes apply to gross minus the state's
    own standard deduction. ``supplemental_rate`` (CA SDI, MD county average)
    applies to full gross on top of either mode.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., description="Slug, e.g. 'new-york'")
    name: str
    abbr: str = Field(..., min_length=2, max_length=2)
    has_income_tax: bool
    flat_rate: Optional[float] = Field(default=None, ge=0, le=1)
    tax_brackets: Optional[Tuple[TaxBracket, ...]] = None
    standard_deduction: float = Field(default=0, ge=0)
    supplemental_rate: Optional[float] = Field(default=None, ge=0, le=1)
    top_rate_display: str = "0%"
    description: str = ""

    @field_validator("tax_brackets")
    @classmethod
    def _check_brackets(cls, value):
        if value is None:
            return value
        return check_bracket_schedule(value)

    @model_validator(mode="after")
    def _check_tax_mode(self):
        has_flat = self.flat_rate is not None
        has_brackets = self.tax_brackets is not None
        if not self.has_income_tax:
            if has_flat or has_brackets:
                raise ValueError(f"{self.key}: no-tax jurisdiction cannot define a rate")
        elif has_flat == has_brackets:
            raise ValueError(f"{self.key}: define exactly one of flat_rate or tax_brackets")
        return self


class TaxRules(BaseModel):
    """Complete tax rules for a year.

    Loaded rules are cached for the whole process, so nested collections are
    read-only too: bracket schedules are tuples and ``states`` is a mapping
    proxy.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    federal: FederalTaxSchedule
    states: Mapping[str, TaxJurisdiction] = Field(default_factory=dict, validate_default=True)

    @field_validator("states", mode="before")
    @classmethod
    def _inject_keys(cls, value):
        # YAML keys the mapping by slug; each entry carries it as well
        if isinstance(value, dict):
            return {
                key: ({"key": key, **entry} if isinstance(entry, dict) else entry)
                for key, entry in value.items()
            }
        return value

    @field_validator("states")
    @classmethod
    def _read_only_states(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("states")
    def _dump_states(self, value):
        return dict(value)


class FicaBreakdown(BaseModel):
    """Payroll taxes for one annual salary."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    social_security: float
    medicare: float
    additional_medicare: float
    total: float


class TaxBreakdown(BaseModel):
    """Federal, FICA and state taxes for one salary in one jurisdiction."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    tax_year: int
    jurisdiction: str
    gross_salary: float
    standard_deduction: float
    federal_taxable_income: float
    federal_tax: float
    federal_marginal_rate: float
    social_security_tax: float
    medicare_tax: float
    additional_medicare_tax: float
    fica_total: float
    state_tax: float
    total_tax: float
    take_home_pay: float
    effective_federal_rate: float
    effective_total_rate: float

    @property
    def pay_periods(self) -> Dict[str, float]:
        """Take-home pay per period (annual, monthly, ..., hourly)."""
        return {name: self.take_home_pay / divisor for name, divisor in PAY_PERIODS.items()}


class BracketSlice(BaseModel):
    """Portion of income falling in one bracket and the tax on it."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    over: float
    up_to: Optional[float]
    rate: float
    income_in_bracket: float
    tax: float


class StateComparison(BaseModel):
    """One row of a multi-state take-home comparison."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    jurisdiction: str
    name: str
    breakdown: TaxBreakdown
    difference: float = Field(..., description="Take-home minus the reference state's take-home")
