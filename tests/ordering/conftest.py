import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def order_request():
    """Build an OrderRequest that succeeds against the simulated stations."""
    from ordering.order.request import OrderRequest

    def _build(**overrides):
        fields = {
            "product_id": "PROD-002",
            "quantity": 2,
            "amount": 199.90,
            "card_number": "4111111111111111",
            "cvv": "123",
            "expiry_date": "12/29",
            "address": "Av. Paulista, 1000",
            "zip_code": "01310-100",
        }
        fields.update(overrides)
        return OrderRequest(**fields)

    return _build
