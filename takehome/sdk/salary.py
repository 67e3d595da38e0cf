"""Salary input validation.

The engine assumes a valid, non-negative finite salary; callers check
user input here before computing a breakdown.
"""

import math
from typing import Union

MIN_SALARY = 1_000
MAX_SALARY = 2_000_000


class InvalidSalaryError(ValueError):
    """Raised when a salary is non-numeric, non-finite or out of range."""
    pass


def validate_salary(
    amount: Union[str, int, float],
    minimum: float = MIN_SALARY,
    maximum: float = MAX_SALARY,
) -> float:
    """Parse and range-check an annual salary.

    Accepts numbers or strings like "$100,000" or "100_000".

    Returns:
        Salary as float

    Raises:
        InvalidSalaryError: If the value can't be used as a salary
    """
    if isinstance(amount, bool):
        raise InvalidSalaryError(f"Invalid salary: {amount!r}")

    if isinstance(amount, str):
        cleaned = amount.strip().lstrip("$").replace(",", "").replace("_", "")
        try:
            value = float(cleaned)
        except ValueError:
            raise InvalidSalaryError(f"Invalid salary: {amount!r}") from None
    else:
        value = float(amount)

    if not math.isfinite(value):
        raise InvalidSalaryError(f"Salary must be a finite number, got {amount!r}")
    if value < 0:
        raise InvalidSalaryError(f"Salary cannot be negative, got {amount!r}")
    if not minimum <= value <= maximum:
        raise InvalidSalaryError(
            f"Salary must be between ${minimum:,.0f} and ${maximum:,.0f}, got ${value:,.0f}"
        )

    return value
