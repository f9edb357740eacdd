"""Price calculation on top of the discount policies.

`calculate()` is the stateless entry point: the policy is an argument, so
concurrent callers never observe each other's choice. `PriceCalculator`
is a convenience wrapper for callers that want an imperative "current
policy" API; each owner should hold its own instance.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import structlog

from pricing.policies import (
    CENTS,
    ZERO,
    DiscountPolicy,
    NoDiscount,
    describe,
    discount_for,
    format_money,
    info,
    to_decimal,
)

logger = structlog.get_logger(__name__)


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PriceBreakdown:
    """Presentation-ready result of applying one policy to one price.

    All amounts are already rounded to cents.
    """

    original_price: Decimal
    discount: Decimal
    final_price: Decimal
    policy: str
    policy_info: str

    def details(self) -> str:
        return (
            f"Type: {self.policy} ({self.policy_info}) | "
            f"Original price: {format_money(self.original_price)} | "
            f"Discount: {format_money(self.discount)} | "
            f"Final price: {format_money(self.final_price)}"
        )

    def to_dict(self) -> dict:
        return {
            "originalPrice": float(self.original_price),
            "finalPrice": float(self.final_price),
            "discount": float(self.discount),
            "strategy": self.policy,
            "strategyInfo": self.policy_info,
            "details": self.details(),
        }


def calculate(policy: DiscountPolicy | None, original_price) -> PriceBreakdown:
    """Apply `policy` to `original_price`.

    Rounding happens once, here, on the values handed back; the final
    price is derived from the unrounded discount.
    """
    policy = policy if policy is not None else NoDiscount()
    original = to_decimal(original_price) if original_price is not None else ZERO

    if original <= ZERO:
        discount = ZERO
        final = ZERO
    else:
        discount = discount_for(policy, original)
        final = original - discount

    breakdown = PriceBreakdown(
        original_price=round_money(original),
        discount=round_money(discount),
        final_price=round_money(final),
        policy=describe(policy),
        policy_info=info(policy),
    )
    logger.debug(
        "price_calculated",
        policy=breakdown.policy,
        original_price=str(breakdown.original_price),
        final_price=str(breakdown.final_price),
    )
    return breakdown


class PriceCalculator:
    """Stateful adapter holding a current discount policy.

    Not safe to share across concurrent callers: a `set_policy` from one
    caller is visible to every other reader of the same instance.
    """

    def __init__(self, policy: DiscountPolicy | None = None) -> None:
        self._policy: DiscountPolicy = policy if policy is not None else NoDiscount()

    @property
    def policy(self) -> DiscountPolicy:
        return self._policy

    def set_policy(self, policy: DiscountPolicy | None) -> None:
        self._policy = policy if policy is not None else NoDiscount()

    def final_price(self, original_price) -> Decimal:
        return calculate(self._policy, original_price).final_price

    def discount_amount(self, original_price) -> Decimal:
        return round_money(discount_for(self._policy, original_price))

    def details(self, original_price) -> str:
        if original_price is None or to_decimal(original_price) <= ZERO:
            return "Invalid price"
        return calculate(self._policy, original_price).details()
