"""takehome SDK - Core functionality for take-home pay estimates."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_default_tax_year,
    InvalidTaxYearError,
)

from .salary import (
    InvalidSalaryError,
    validate_salary,
    MIN_SALARY,
    MAX_SALARY,
)

from .estimates import (
    estimate_take_home,
    compare_states,
    DEFAULT_REFERENCE_STATE,
)

from .taxes import (
    TaxBreakdown,
    TaxJurisdiction,
    JurisdictionNotFoundError,
    TaxRulesNotFoundError,
    calculate_tax,
    get_available_years,
    get_jurisdiction,
    list_jurisdictions,
    load_tax_rules,
)

__all__ = [
    # Settings
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_default_tax_year",
    "InvalidTaxYearError",
    # Salary validation
    "InvalidSalaryError",
    "validate_salary",
    "MIN_SALARY",
    "MAX_SALARY",
    # Estimates
    "estimate_take_home",
    "compare_states",
    "DEFAULT_REFERENCE_STATE",
    # Taxes
    "TaxBreakdown",
    "TaxJurisdiction",
    "JurisdictionNotFoundError",
    "TaxRulesNotFoundError",
    "calculate_tax",
    "get_available_years",
    "get_jurisdiction",
    "list_jurisdictions",
    "load_tax_rules",
]
