import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config environment and disables the simulated payment
    latency so authorization does not sleep during tests.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("PAYMENT_LATENCY_SECONDS", "0")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Give every test fresh station adapters and configuration."""
    from fulfillment.station import reset_delivery
    from inventory.station import reset_inventory
    from payments.station import reset_payments
    from shared.config import AppConfig, init_config, reset_config

    reset_config()
    init_config(AppConfig(environment="test", payment_latency_seconds=0.0))

    yield

    reset_inventory()
    reset_payments()
    reset_delivery()
    reset_config()
