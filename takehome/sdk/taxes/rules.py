"""Tax rules loading and jurisdiction lookup.

Rules live in takehome/tax_rules/{year}.yaml, one file per tax year, and are
validated into frozen TaxRules models. Each year is parsed once per process.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml

from ..config import get_default_tax_year
from .schemas import TaxJurisdiction, TaxRules

logger = logging.getLogger(__name__)


class TaxRulesNotFoundError(FileNotFoundError):
    """Raised when no rules file exists for a requested tax year."""
    pass


class JurisdictionNotFoundError(KeyError):
    """Raised when a state key does not match any jurisdiction."""

    def __init__(self, key: str, year: int):
        self.key = key
        self.year = year
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown state '{self.key}' for tax year {self.year}"


def _get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path."""
    return Path(__file__).parent.parent.parent / "tax_rules"  # taxes -> sdk -> takehome


def get_available_years() -> List[int]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = _get_tax_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def resolve_year(year: Optional[int] = None) -> int:
    """Pick the tax year to use.

    Explicit year, then the configured default, then the latest available.
    """
    if year is not None:
        return int(year)

    configured = get_default_tax_year()
    if configured is not None:
        return configured

    available = get_available_years()
    if not available:
        raise TaxRulesNotFoundError(f"No tax rules files in {_get_tax_rules_dir()}")
    return available[0]


def _read_year_file(year: int) -> dict:
    config_file = _get_tax_rules_dir() / f"{year}.yaml"
    if not config_file.exists():
        raise TaxRulesNotFoundError(f"Tax rules file not found for year {year}: {config_file}")

    with open(config_file, "r") as f:
        logger.debug("Loading tax rules from %s", config_file)
        return yaml.safe_load(f) or {}


def _find_states_section(year: int) -> dict:
    """Get the 'states' section with fallback to other years.

    Looks in years <= the requested year in descending order; if none of
    them defines states, tries later years starting with the nearest.
    """
    available_years = get_available_years()
    candidate_years = [y for y in available_years if y <= year]
    candidate_years += sorted(y for y in available_years if y > year)

    for check_year in candidate_years:
        rules = _read_year_file(check_year)
        if "states" in rules:
            if check_year != year:
                logger.debug("Tax year %s has no state tables; using %s", year, check_year)
            return rules["states"]

    raise TaxRulesNotFoundError("No tax rules file defines a 'states' section")


@lru_cache(maxsize=None)
def _load_year(year: int) -> TaxRules:
    raw = _read_year_file(year)
    raw.setdefault("year", year)
    if "states" not in raw:
        raw["states"] = _find_states_section(year)
    return TaxRules.model_validate(raw)


def load_tax_rules(year: Optional[int] = None) -> TaxRules:
    """Load tax rules for a specific year (default: configured or latest).

    Raises:
        TaxRulesNotFoundError: If no rules file exists for the year
        InvalidTaxYearError: If the configured default year is malformed
        pydantic.ValidationError: If the file violates the rules schema
    """
    return _load_year(resolve_year(year))


def normalize_key(key: str) -> str:
    """Normalize user input to a jurisdiction slug ('New York' -> 'new-york')."""
    return "-".join(key.strip().lower().replace("_", " ").split())


def get_jurisdiction(key: str, year: Optional[int] = None) -> TaxJurisdiction:
    """Look up a state by slug or two-letter abbreviation.

    Raises:
        JurisdictionNotFoundError: If the key matches no jurisdiction
    """
    rules = load_tax_rules(year)
    slug = normalize_key(key)

    if slug in rules.states:
        return rules.states[slug]

    for jurisdiction in rules.states.values():
        if jurisdiction.abbr.lower() == slug:
            return jurisdiction

    raise JurisdictionNotFoundError(key, rules.year)


def list_jurisdictions(year: Optional[int] = None) -> List[TaxJurisdiction]:
    """All jurisdictions for a year, sorted by name."""
    rules = load_tax_rules(year)
    return sorted(rules.states.values(), key=lambda j: j.name)
