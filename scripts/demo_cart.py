"""
Walk through a cart session: add items, price them with a discount,
save the cart to a file and load it back.

Usage:
    python scripts/demo_cart.py [--file cart.json] [--discount 10]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.config import settings
from app.exceptions import SmartCartError
from domain.discounts import percentage_discount
from domain.models import Item
from repositories import CartStore, OperationLog
from services.cart_service import CartService

logger = logging.getLogger("smartcart.demo")


def run(cart_file: str, discount: float) -> int:
    service = CartService(
        store=CartStore(), operation_log=OperationLog(settings.operation_log_file)
    )

    service.add_item(Item(1, "Laptop", 1200.00))
    service.add_item(Item(2, "Headphones", 150.00))
    service.add_item(Item(3, "Mouse", 50.00))

    print("Cart Contents:")
    for line in service.describe():
        print(f"  {line}")

    strategy = percentage_discount(discount)
    total = service.calculate_total()
    print(f"Total before discount: {total:.2f}")
    print(f"Total after discount: {strategy.apply_discount_formatted(total)}")

    try:
        service.save(cart_file)
        print(f"Cart saved to file: {cart_file}")
    except SmartCartError as e:
        print(f"Error saving cart to file: {e}", file=sys.stderr)
        return 1

    try:
        loaded = service.store.load(cart_file)
    except SmartCartError as e:
        print(f"Error loading cart from file: {e}", file=sys.stderr)
        return 1

    print("Cart loaded from file:")
    for item in loaded:
        print(f"  {item!r}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="SmartCart demo session")
    parser.add_argument("--file", default=settings.cart_file, help="Cart file path")
    parser.add_argument(
        "--discount", type=float, default=10.0, help="Percentage discount to quote"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    return run(args.file, args.discount)


if __name__ == "__main__":
    sys.exit(main())
