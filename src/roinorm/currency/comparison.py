"""Precision-safe comparison of currency amounts.

Python 3.13+. Zero external dependencies.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Literal

from roinorm.constants import DEFAULT_COMPARISON_PRECISION

__all__ = ["compare_currency_amounts", "round_to_units"]

_HALF = Decimal("0.5")


def round_to_units(amount: int | float | Decimal, precision: int) -> int | None:
    """Scale an amount by 10**precision and round half toward +infinity.

    Floats go through their shortest repr, so 10.005 is treated as the
    decimal 10.005 and not as 10.00499999999999989... Non-finite and
    non-numeric amounts return None.

    Examples:
        >>> round_to_units(10.005, 2)
        1001
        >>> round_to_units(-2.5, 0)
        -2
        >>> round_to_units(float("nan"), 2) is None
        True
    """
    try:
        exact = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if not exact.is_finite():
            return None
        return math.floor(exact.scaleb(precision) + _HALF)
    except (InvalidOperation, TypeError, ValueError):
        return None


def _is_nan(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def compare_currency_amounts(
    a: int | float | Decimal,
    b: int | float | Decimal,
    precision: int = DEFAULT_COMPARISON_PRECISION,
) -> Literal[-1, 0, 1]:
    """Compare two amounts at a fixed number of decimal places.

    Each side is rounded half up before comparing, so 10.006 becomes 10.01
    at two places and compare_currency_amounts(10.004, 10.006, 2) is -1.

    Args:
        a: First amount
        b: Second amount
        precision: Decimal places that matter (default: 2, cents)

    Returns:
        -1 if a < b, 0 if equal at this precision, 1 if a > b

    Examples:
        >>> compare_currency_amounts(0.1 + 0.2, 0.3)
        0
        >>> compare_currency_amounts(10.001, 10.004)
        0
        >>> compare_currency_amounts(10.004, 10.006, 3)
        -1
    """
    left = round_to_units(a, precision)
    right = round_to_units(b, precision)
    if left is None or right is None:
        # NaN (float or Decimal, quiet or signaling) is unordered: 0.
        if _is_nan(a) or _is_nan(b):
            return 0
        # Infinities still order correctly.
        left_value: object = a if left is None else left
        right_value: object = b if right is None else right
        try:
            if left_value < right_value:  # type: ignore[operator]
                return -1
            if left_value > right_value:  # type: ignore[operator]
                return 1
        except TypeError:
            pass
        return 0

    if left < right:
        return -1
    if left > right:
        return 1
    return 0
