"""Hypothesis strategies for roinorm property-based testing.

Strategies are organized by domain:

- currency: Amounts, currency codes and typed amount strings
- validation: Raw form values and field rules

Usage:
    from tests.strategies import currency_amounts, field_rules
    from tests.strategies.currency import typed_amount_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - currency_amounts, typed_amount_strings, raw_field_values
"""

from .currency import (
    currency_amounts,
    known_currency_codes,
    typed_amount_strings,
    unknown_currency_codes,
)
from .validation import field_rules, numeric_field_values, raw_field_values

__all__ = [
    "currency_amounts",
    "field_rules",
    "known_currency_codes",
    "numeric_field_values",
    "raw_field_values",
    "typed_amount_strings",
    "unknown_currency_codes",
]
