"""OrderRequest value object — a customer's purchase request as received."""

from decimal import Decimal

from protean.fields import Float, Integer, String, Text

from ordering.domain import ordering


@ordering.value_object
class OrderRequest:
    """Everything needed to place one order for a single product.

    Field constraints only cover the shape of the request. Whether the card
    data is acceptable or the product is in stock is decided by the
    stations while the order is processed, so a request with a short card
    number or a large quantity can still be built and submitted.

    Text fields are stored exactly as sent: product ids are hashed and card
    data is pattern-checked downstream, so no HTML sanitizing and no length
    caps beyond the security code's.
    """

    product_id = Text(required=True, sanitize=False)
    quantity = Integer(required=True, min_value=1)
    amount = Float(required=True, min_value=0.01)
    card_number = Text(required=True, sanitize=False)
    cvv = String(required=True, min_length=3, max_length=4, sanitize=False)
    expiry_date = Text(required=True, sanitize=False)
    address = Text(required=True, sanitize=False)
    zip_code = Text(required=True, sanitize=False)

    def merchandise_amount(self) -> Decimal:
        """Amount as a Decimal, free of binary float artefacts."""
        return Decimal(str(self.amount))
