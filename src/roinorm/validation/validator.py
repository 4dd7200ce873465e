"""RuleValidator: per-field, whole-form and cross-field validation.

Validation never raises for user input. Every outcome (empty required field,
unreadable number, out-of-range value, missing dependent field) is returned
as a result value carrying the message text to show next to the field.

Value coercion:
    - None, "" and whitespace-only strings are empty.
    - int, float and Decimal are used as-is (bool is not a number here).
    - Strings are stripped and read with float(); "1,5" or "12abc" are not
      numbers. NaN is rejected.

Python 3.13+.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from threading import RLock
from types import MappingProxyType

from roinorm.diagnostics import ErrorTemplate

from .results import FieldValidationResult, FormValidationResult
from .rules import (
    DEFAULT_DEPENDENCIES,
    DEFAULT_RULES,
    FieldDependency,
    FieldValue,
    ValidationRule,
)

__all__ = ["RuleValidator", "coerce_number", "is_empty"]

logger = logging.getLogger(__name__)


def is_empty(value: FieldValue) -> bool:
    """Check whether a raw field value counts as "not filled in"."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def coerce_number(value: FieldValue) -> float | None:
    """Coerce a raw field value to float, or None when it is not a number.

    Examples:
        >>> coerce_number(" 12.5 ")
        12.5
        >>> coerce_number(Decimal("3"))
        3.0
        >>> coerce_number("12,5") is None
        True
        >>> coerce_number(True) is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            # Decimal("sNaN") refuses conversion; huge ints overflow.
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


class RuleValidator:
    """Validates calculator form values against numeric field rules.

    Starts from the calculator's default rule set and dependencies unless
    others are given. Rules can be added and removed at runtime; call
    freeze() to turn the validator into an immutable snapshot.

    Thread Safety:
        Rule lookups and mutations are serialized by an RLock.

    Example:
        >>> validator = RuleValidator()
        >>> validator.validate_field("term", "0").error_message
        'Minimum value is 1'
        >>> validator.validate_field("unknownField", "abc").valid
        True
        >>> validator.validate_related_fields({"loanAmount": 1000, "loanRate": 0, "loanTerm": 5})
        {'loanRate': 'Required when loanAmount is greater than zero'}
    """

    __slots__ = ("_dependencies", "_frozen", "_lock", "_rules")

    def __init__(
        self,
        rules: Mapping[str, ValidationRule] | None = None,
        dependencies: Iterable[FieldDependency] | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            rules: Field name -> rule. Defaults to DEFAULT_RULES (copied).
            dependencies: Cross-field dependencies. Defaults to
                DEFAULT_DEPENDENCIES.
        """
        self._rules: dict[str, ValidationRule] = dict(
            DEFAULT_RULES if rules is None else rules
        )
        self._dependencies: tuple[FieldDependency, ...] = tuple(
            DEFAULT_DEPENDENCIES if dependencies is None else dependencies
        )
        self._lock = RLock()
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"RuleValidator(rules={len(self._rules)}, "
            f"dependencies={len(self._dependencies)}, frozen={self._frozen})"
        )

    @property
    def rules(self) -> Mapping[str, ValidationRule]:
        """Read-only snapshot of the current rule mapping."""
        with self._lock:
            return MappingProxyType(dict(self._rules))

    @property
    def dependencies(self) -> tuple[FieldDependency, ...]:
        return self._dependencies

    @property
    def frozen(self) -> bool:
        """Whether add_rule() and remove_rule() are disabled."""
        return self._frozen

    # ------------------------------------------------------------------
    # Rule management
    # ------------------------------------------------------------------

    def get_field_rules(self, name: str) -> ValidationRule | None:
        """Get the rule for a field, or None when the field is unconstrained."""
        with self._lock:
            return self._rules.get(name)

    def add_rule(self, name: str, rule: ValidationRule) -> None:
        """Insert or replace the rule for a field.

        Raises:
            TypeError: If the validator is frozen
        """
        with self._lock:
            self._check_mutable("add_rule")
            replaced = name in self._rules
            self._rules[name] = rule
        logger.debug("%s rule for field '%s': %s", "Replaced" if replaced else "Added", name, rule)

    def remove_rule(self, name: str) -> None:
        """Delete the rule for a field. Unknown names are ignored.

        Raises:
            TypeError: If the validator is frozen
        """
        with self._lock:
            self._check_mutable("remove_rule")
            removed = self._rules.pop(name, None)
        if removed is not None:
            logger.debug("Removed rule for field '%s'", name)

    def freeze(self) -> None:
        """Disable further rule changes. Idempotent."""
        with self._lock:
            self._frozen = True

    def copy(self) -> "RuleValidator":
        """Create an unfrozen validator with the same rules and dependencies."""
        with self._lock:
            return RuleValidator(rules=dict(self._rules), dependencies=self._dependencies)

    def _check_mutable(self, operation: str) -> None:
        # Caller holds self._lock.
        if self._frozen:
            msg = f"Cannot {operation}() on a frozen RuleValidator; use copy() first"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_field(self, name: str, value: FieldValue) -> FieldValidationResult:
        """Validate one raw field value against its rule.

        Bounds are inclusive. Fields without a rule are always valid, and
        optional fields may be left empty.

        Args:
            name: Form field id
            value: Raw value from the form layer

        Returns:
            FieldValidationResult with the message to display on failure
        """
        rule = self.get_field_rules(name)
        if rule is None:
            return FieldValidationResult.ok()

        if is_empty(value):
            if rule.required:
                return FieldValidationResult.failed(ErrorTemplate.field_required(name))
            return FieldValidationResult.ok()

        number = coerce_number(value)
        if number is None:
            return FieldValidationResult.failed(ErrorTemplate.invalid_number(name, value))

        if rule.min is not None and number < rule.min:
            return FieldValidationResult.failed(ErrorTemplate.below_minimum(name, rule.min))
        if rule.max is not None and number > rule.max:
            return FieldValidationResult.failed(ErrorTemplate.above_maximum(name, rule.max))

        return FieldValidationResult.ok()

    def validate_form(
        self,
        fields: Mapping[str, FieldValue],
        *,
        include_dependencies: bool = False,
    ) -> FormValidationResult:
        """Validate every field of a form independently.

        Args:
            fields: Field id -> raw value
            include_dependencies: Also merge validate_related_fields() errors
                for fields that passed their own rule (default: False)

        Returns:
            FormValidationResult, invalid iff any field has an error
        """
        errors: dict[str, str] = {}
        for name, value in fields.items():
            result = self.validate_field(name, value)
            if not result.valid:
                errors[name] = result.error_message or ""

        if include_dependencies:
            for name, message in self.validate_related_fields(fields).items():
                errors.setdefault(name, message)

        if errors:
            logger.debug("Form validation failed for fields: %s", ", ".join(sorted(errors)))
        return FormValidationResult.from_errors(errors)

    def validate_related_fields(self, fields: Mapping[str, FieldValue]) -> dict[str, str]:
        """Check cross-field dependencies.

        A dependency fires when its trigger field is present and greater
        than zero; each dependent that is then absent, unreadable or not
        greater than zero gets an error. Runs independently of the per-field
        range checks.

        Args:
            fields: Field id -> raw value

        Returns:
            Dependent field id -> message; empty when all dependencies hold
        """
        errors: dict[str, str] = {}
        for dependency in self._dependencies:
            if not _is_positive(fields.get(dependency.trigger)):
                continue
            for dependent in dependency.dependents:
                if dependent in errors or _is_positive(fields.get(dependent)):
                    continue
                diagnostic = ErrorTemplate.dependency_missing(dependent, dependency.trigger)
                errors[dependent] = diagnostic.message
        return errors


def _is_positive(value: FieldValue) -> bool:
    number = coerce_number(value)
    return number is not None and number > 0
