"""Plain-text operation report combining configuration, stock, shipping and pricing."""

from ordering.checkout.orchestrator import OrderOrchestrator
from pricing.service import compare_policies
from shared.config import AppConfig


def operation_report(
    config: AppConfig,
    orchestrator: OrderOrchestrator,
    product_id: str,
    quantity: int,
    original_price,
    zip_code: str,
) -> str:
    lines = [
        "=== OPERATION REPORT ===",
        f"1. {config.describe()}",
        f"2. Availability: {orchestrator.check_availability(product_id, quantity)}",
        f"3. Shipping: {orchestrator.shipping_quote(zip_code)}",
        "4. Discount policies:",
    ]
    for position, details in enumerate(compare_policies(original_price), start=1):
        lines.append(f"   {position}. {details}")
    return "\n".join(lines) + "\n"
