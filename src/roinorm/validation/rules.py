"""Field rules and cross-field dependencies for the ROI calculator form.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "DEFAULT_DEPENDENCIES",
    "DEFAULT_RULES",
    "FieldDependency",
    "FieldValue",
    "ValidationRule",
]

type FieldValue = str | int | float | Decimal | None
"""Raw value as supplied by the form layer: text, a number, or absent."""


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """Numeric constraint for one form field.

    Attributes:
        required: Empty values are rejected (default: False)
        min: Inclusive lower bound, or None for unbounded
        max: Inclusive upper bound, or None for unbounded

    Example:
        >>> rule = ValidationRule(required=True, min=1, max=50)
        >>> rule.bounds
        (1, 50)
    """

    required: bool = False
    min: float | None = None
    max: float | None = None

    def __post_init__(self) -> None:
        """Validate rule bounds at construction time.

        Raises:
            ValueError: If both bounds are set and min > max.
        """
        if self.min is not None and self.max is not None and self.min > self.max:
            msg = f"min ({self.min}) must not exceed max ({self.max})"
            raise ValueError(msg)

    @property
    def bounds(self) -> tuple[float | None, float | None]:
        return (self.min, self.max)


@dataclass(frozen=True, slots=True)
class FieldDependency:
    """A field whose positive value makes other fields mandatory.

    When ``trigger`` holds a number greater than zero, every field in
    ``dependents`` must hold a number greater than zero as well.

    Example:
        >>> FieldDependency("loanAmount", ("loanRate", "loanTerm"))
        FieldDependency(trigger='loanAmount', dependents=('loanRate', 'loanTerm'))
    """

    trigger: str
    dependents: tuple[str, ...]


# Keyed by the calculator's form field ids.
DEFAULT_RULES: dict[str, ValidationRule] = {
    "startCapital": ValidationRule(required=True, min=0),
    "loanAmount": ValidationRule(min=0),
    "loanRate": ValidationRule(min=0, max=20),
    "term": ValidationRule(required=True, min=1, max=50),
    "loanTerm": ValidationRule(min=1, max=50),
    "expectedReturn": ValidationRule(required=True, min=-10, max=50),
    "reinvestmentPercentage": ValidationRule(min=0, max=100),
    "fixedCosts": ValidationRule(min=0),
    "reinvestmentThreshold": ValidationRule(min=0),
    "inflation": ValidationRule(min=0, max=10),
    "box1Rate": ValidationRule(min=0, max=60),
    "box3Return": ValidationRule(min=0, max=20),
    "box3Rate": ValidationRule(min=0, max=50),
    "box3Exemption": ValidationRule(min=0),
}

DEFAULT_DEPENDENCIES: tuple[FieldDependency, ...] = (
    FieldDependency("loanAmount", ("loanRate", "loanTerm")),
    FieldDependency("reinvestmentPercentage", ("reinvestmentThreshold",)),
)
