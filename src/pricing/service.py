"""Pricing application services — selector parsing and policy comparison."""

from decimal import Decimal

from pricing.calculator import PriceBreakdown, calculate
from pricing.exceptions import UnsupportedDiscountPolicy
from pricing.policies import (
    DiscountPolicy,
    FixedDiscount,
    PercentageDiscount,
    ProgressiveDiscount,
    to_decimal,
)

DEFAULT_PERCENTAGE = Decimal("10")
DEFAULT_FIXED_AMOUNT = Decimal("50.00")

POLICY_KINDS = ("percentage", "fixed", "progressive")


def policy_from_selector(kind: str, value=None) -> DiscountPolicy:
    """Build a policy from a caller-supplied selector.

    For ``percentage`` the value is a percentage from 0 to 100; for
    ``fixed`` it is an amount. ``progressive`` ignores the value.
    """
    match (kind or "").strip().lower():
        case "percentage":
            percent = to_decimal(value) if value is not None else DEFAULT_PERCENTAGE
            return PercentageDiscount(fraction=percent / 100)
        case "fixed":
            amount = to_decimal(value) if value is not None else DEFAULT_FIXED_AMOUNT
            return FixedDiscount(amount=amount)
        case "progressive":
            return ProgressiveDiscount()
        case _:
            raise UnsupportedDiscountPolicy(kind)


def price_with_selector(original_price, kind: str, value=None) -> PriceBreakdown:
    return calculate(policy_from_selector(kind, value), original_price)


def comparison_policies() -> list[DiscountPolicy]:
    return [
        PercentageDiscount(fraction=DEFAULT_PERCENTAGE / 100),
        FixedDiscount(amount=DEFAULT_FIXED_AMOUNT),
        ProgressiveDiscount(),
    ]


def compare_policies(original_price) -> list[str]:
    """Detail lines for the same price under each standard policy."""
    return [calculate(policy, original_price).details() for policy in comparison_policies()]
