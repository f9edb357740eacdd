"""Tests for the OrderRequest value object."""

from decimal import Decimal

import pytest
from ordering.order.request import OrderRequest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields


class TestOrderRequestConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert OrderRequest.element_type == DomainObjects.VALUE_OBJECT

    def test_declared_fields(self):
        fields = declared_fields(OrderRequest)
        for name in (
            "product_id",
            "quantity",
            "amount",
            "card_number",
            "cvv",
            "expiry_date",
            "address",
            "zip_code",
        ):
            assert name in fields

    def test_valid_request(self, order_request):
        request = order_request()
        assert request.product_id == "PROD-002"
        assert request.quantity == 2
        assert request.amount == 199.90
        assert request.zip_code == "01310-100"

    def test_merchandise_amount_is_exact_decimal(self, order_request):
        assert order_request(amount=199.90).merchandise_amount() == Decimal("199.9")
        assert order_request(amount=0.1).merchandise_amount() == Decimal("0.1")

    def test_short_card_number_is_accepted_here(self, order_request):
        # Card checks belong to the payment station, not the request shape.
        assert order_request(card_number="1234").card_number == "1234"

    def test_large_quantity_is_accepted_here(self, order_request):
        assert order_request(quantity=500).quantity == 500

    def test_equal_requests_are_equal(self, order_request):
        assert order_request() == order_request()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("product_id", "A&B-0"),
            ("product_id", "<sku>"),
            ("card_number", "4111&1111<1111>1111"),
            ("expiry_date", "12/29<"),
            ("address", 'Rua "A" & B, 1'),
            ("zip_code", "01310&100"),
        ],
    )
    def test_text_is_kept_verbatim(self, order_request, field, value):
        assert getattr(order_request(**{field: value}), field) == value

    def test_long_card_number_is_accepted(self, order_request):
        assert order_request(card_number="4" * 40).card_number == "4" * 40

    def test_long_text_fields_are_accepted(self, order_request):
        request = order_request(product_id="P" * 300, address="A" * 500, zip_code="0" * 50, expiry_date="1" * 30)
        assert len(request.address) == 500
        assert len(request.product_id) == 300


class TestOrderRequestInvariants:
    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, order_request, quantity):
        with pytest.raises(ValidationError) as exc:
            order_request(quantity=quantity)
        assert "quantity" in exc.value.messages

    @pytest.mark.parametrize("amount", [0.0, -10.0])
    def test_amount_must_be_positive(self, order_request, amount):
        with pytest.raises(ValidationError) as exc:
            order_request(amount=amount)
        assert "amount" in exc.value.messages

    def test_cvv_too_short(self, order_request):
        with pytest.raises(ValidationError) as exc:
            order_request(cvv="12")
        assert "cvv" in exc.value.messages

    def test_cvv_too_long(self, order_request):
        with pytest.raises(ValidationError):
            order_request(cvv="12345")

    @pytest.mark.parametrize(
        "missing",
        ["product_id", "quantity", "amount", "card_number", "cvv", "expiry_date", "address", "zip_code"],
    )
    def test_required_fields(self, missing):
        fields = {
            "product_id": "PROD-002",
            "quantity": 1,
            "amount": 10.0,
            "card_number": "4111111111111111",
            "cvv": "123",
            "expiry_date": "12/29",
            "address": "Rua A, 1",
            "zip_code": "01310-100",
        }
        del fields[missing]
        with pytest.raises(ValidationError) as exc:
            OrderRequest(**fields)
        assert missing in exc.value.messages
