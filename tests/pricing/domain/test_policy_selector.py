from decimal import Decimal

import pytest
from pricing.exceptions import UnsupportedDiscountPolicy
from pricing.policies import FixedDiscount, PercentageDiscount, ProgressiveDiscount
from pricing.service import (
    DEFAULT_FIXED_AMOUNT,
    compare_policies,
    comparison_policies,
    policy_from_selector,
    price_with_selector,
)
from protean.exceptions import ValidationError


class TestPolicyFromSelector:
    def test_percentage_value_is_a_whole_percentage(self):
        policy = policy_from_selector("percentage", Decimal("15"))
        assert policy == PercentageDiscount(fraction=Decimal("0.15"))

    def test_percentage_defaults_to_ten_percent(self):
        policy = policy_from_selector("percentage")
        assert policy.fraction == Decimal("0.1")

    def test_fixed_with_value(self):
        assert policy_from_selector("fixed", 25) == FixedDiscount(amount=Decimal("25"))

    def test_fixed_defaults_to_fifty(self):
        assert policy_from_selector("fixed").amount == DEFAULT_FIXED_AMOUNT

    def test_progressive_ignores_value(self):
        assert policy_from_selector("progressive", 99) == ProgressiveDiscount()

    @pytest.mark.parametrize("kind", ["PERCENTAGE", " Percentage ", "percentage"])
    def test_kind_is_case_insensitive(self, kind):
        assert isinstance(policy_from_selector(kind), PercentageDiscount)

    @pytest.mark.parametrize("kind", ["bogus", "", None, "none"])
    def test_unknown_kind_is_rejected(self, kind):
        with pytest.raises(UnsupportedDiscountPolicy) as exc_info:
            policy_from_selector(kind)
        assert exc_info.value.kind == kind
        assert "Unsupported discount policy type" in str(exc_info.value)

    def test_percentage_over_one_hundred_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            policy_from_selector("percentage", 150)
        assert "fraction" in exc_info.value.messages

    def test_negative_fixed_amount_is_rejected(self):
        with pytest.raises(ValidationError):
            policy_from_selector("fixed", -10)


class TestPriceWithSelector:
    def test_applies_selected_policy(self):
        breakdown = price_with_selector(Decimal("200"), "percentage", 15)
        assert breakdown.discount == Decimal("30.00")
        assert breakdown.final_price == Decimal("170.00")
        assert breakdown.policy == "Percentage discount"


class TestComparePolicies:
    def test_standard_policies(self):
        policies = comparison_policies()
        assert [type(policy) for policy in policies] == [PercentageDiscount, FixedDiscount, ProgressiveDiscount]

    def test_one_detail_line_per_policy(self):
        lines = compare_policies(Decimal("200"))

        assert len(lines) == 3
        assert lines[0] == (
            "Type: Percentage discount (10.0%) | Original price: R$ 200.00 | "
            "Discount: R$ 20.00 | Final price: R$ 180.00"
        )
        assert lines[1] == (
            "Type: Fixed discount (R$ 50.00) | Original price: R$ 200.00 | "
            "Discount: R$ 50.00 | Final price: R$ 150.00"
        )
        assert lines[2].startswith("Type: Progressive discount (5% up to R$ 100.00")
        assert lines[2].endswith("Discount: R$ 20.00 | Final price: R$ 180.00")
