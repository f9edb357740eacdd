"""Discount policies — a closed set of interchangeable pricing algorithms.

A policy is plain immutable data; the algorithms live in the module-level
functions below, each of which matches exhaustively over the four kinds:

    FixedDiscount        a flat amount, never more than the price itself
    PercentageDiscount   a fraction of the price, fraction in [0, 1]
    ProgressiveDiscount  5% / 10% / 15% depending on which tier the price falls in
    NoDiscount           always zero; the default policy

Parameters are validated when a policy is built. Out-of-range values raise
`ValidationError`; they are never clamped.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import assert_never

from protean.exceptions import ValidationError

CURRENCY_SYMBOL = "R$"

ZERO = Decimal("0")
ONE = Decimal("1")
CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Coerce ints, floats and strings to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL} {amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


def format_rate(rate: Decimal) -> str:
    """Render a fraction as a whole percentage, e.g. 0.05 -> "5%"."""
    return f"{(rate * 100).normalize():f}%"


# ---------------------------------------------------------------------------
# Policy kinds
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FixedDiscount:
    amount: Decimal

    def __post_init__(self):
        if self.amount is None:
            raise ValidationError({"amount": ["Fixed discount amount is required"]})
        amount = to_decimal(self.amount)
        if amount < ZERO:
            raise ValidationError({"amount": ["Fixed discount amount must be zero or greater"]})
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class PercentageDiscount:
    fraction: Decimal

    def __post_init__(self):
        if self.fraction is None:
            raise ValidationError({"fraction": ["Discount fraction is required"]})
        fraction = to_decimal(self.fraction)
        if fraction < ZERO or fraction > ONE:
            raise ValidationError({"fraction": ["Discount fraction must be between 0 and 1"]})
        object.__setattr__(self, "fraction", fraction)


@dataclass(frozen=True)
class ProgressiveDiscount:
    """Three-tier discount keyed on the original amount.

    Each tier's upper bound is inclusive: an amount of exactly
    `first_threshold` still gets `first_rate`.
    """

    first_threshold: Decimal = Decimal("100.00")
    second_threshold: Decimal = Decimal("500.00")
    first_rate: Decimal = Decimal("0.05")
    second_rate: Decimal = Decimal("0.10")
    third_rate: Decimal = Decimal("0.15")

    def __post_init__(self):
        errors = {}
        for name in ("first_threshold", "second_threshold", "first_rate", "second_rate", "third_rate"):
            value = getattr(self, name)
            if value is None:
                errors[name] = [f"{name} is required"]
                continue
            object.__setattr__(self, name, to_decimal(value))

        if not errors:
            if self.first_threshold <= ZERO:
                errors["first_threshold"] = ["Tier thresholds must be greater than zero"]
            elif self.second_threshold <= self.first_threshold:
                errors["second_threshold"] = ["Second threshold must be greater than the first"]
            for name in ("first_rate", "second_rate", "third_rate"):
                rate = getattr(self, name)
                if rate < ZERO or rate > ONE:
                    errors[name] = ["Tier rates must be between 0 and 1"]

        if errors:
            raise ValidationError(errors)

    def rate_for(self, amount: Decimal) -> Decimal:
        if amount <= self.first_threshold:
            return self.first_rate
        if amount <= self.second_threshold:
            return self.second_rate
        return self.third_rate


@dataclass(frozen=True)
class NoDiscount:
    pass


DiscountPolicy = FixedDiscount | PercentageDiscount | ProgressiveDiscount | NoDiscount


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------
def discount_for(policy: DiscountPolicy | None, original_amount) -> Decimal:
    """Compute the unrounded discount for `original_amount`.

    Absent or non-positive amounts yield zero for every policy, and the
    result never exceeds the original amount.
    """
    if original_amount is None:
        return ZERO
    original = to_decimal(original_amount)
    if original <= ZERO:
        return ZERO

    if policy is None:
        policy = NoDiscount()

    match policy:
        case FixedDiscount(amount=amount):
            computed = amount
        case PercentageDiscount(fraction=fraction):
            computed = original * fraction
        case ProgressiveDiscount():
            computed = original * policy.rate_for(original)
        case NoDiscount():
            computed = ZERO
        case _:
            assert_never(policy)

    return min(computed, original)


def describe(policy: DiscountPolicy) -> str:
    match policy:
        case FixedDiscount():
            return "Fixed discount"
        case PercentageDiscount():
            return "Percentage discount"
        case ProgressiveDiscount():
            return "Progressive discount"
        case NoDiscount():
            return "No discount"
        case _:
            assert_never(policy)


def info(policy: DiscountPolicy) -> str:
    """Short human-readable summary of the policy's parameter."""
    match policy:
        case FixedDiscount(amount=amount):
            return format_money(amount)
        case PercentageDiscount(fraction=fraction):
            return f"{(fraction * 100).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"
        case ProgressiveDiscount():
            return (
                f"{format_rate(policy.first_rate)} up to {format_money(policy.first_threshold)}, "
                f"{format_rate(policy.second_rate)} up to {format_money(policy.second_threshold)}, "
                f"{format_rate(policy.third_rate)} above {format_money(policy.second_threshold)}"
            )
        case NoDiscount():
            return "0%"
        case _:
            assert_never(policy)


def applied_rate(policy: ProgressiveDiscount, amount) -> str:
    """Label of the tier a progressive policy applies to `amount`."""
    if amount is None or to_decimal(amount) <= ZERO:
        return "0%"
    return format_rate(policy.rate_for(to_decimal(amount)))
