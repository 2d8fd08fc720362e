#!/usr/bin/env python3
"""
Interactive local checkout harness (no HTTP).

Usage:
  python3 scripts/checkout_local.py [--fast]

Runs one shopper session through the same wiring the API uses: catalog with
fallback, cart, simulated M-Pesa payment and order submission.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from storefront.application.exceptions import (  # noqa: E402
    CheckoutInProgressError,
    EmptyCartError,
    InvalidCheckoutStateError,
    PhoneNumberRequiredError,
)
from storefront.core.config import settings  # noqa: E402
from storefront.wiring.dependencies import get_list_catalog_use_case, get_session_store  # noqa: E402


HELP = "Commands: list, add <id>, remove <id>, cart, checkout, pay <phone>, close, quit"


def _money(amount) -> str:
    return f"{settings.CURRENCY} {amount:,}"


async def run(fast: bool) -> None:
    if fast:
        settings.PAYMENT_PROCESSING_SECONDS = 0.2
        settings.PAYMENT_SUCCESS_DISPLAY_SECONDS = 0.2

    catalog = get_list_catalog_use_case()
    store = get_session_store()
    checkout = store.get(store.get_or_create(None))

    print(f"\n{settings.BUSINESS_NAME} - local checkout")
    print("-" * 60)
    print(HELP)
    print("-" * 60)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not line:
            continue
        command, _, arg = line.partition(" ")
        arg = arg.strip()

        try:
            if command == "quit":
                return
            elif command == "list":
                services = catalog.execute()
                for category in catalog.categories(services):
                    print(f"\n{category}")
                    for s in services:
                        if s.category == category:
                            print(f"  [{s.id:>3}] {s.name:<40} {_money(s.price):>12}  ~{s.estimated_days}d")
            elif command == "add":
                service = catalog.find(arg)
                if service is None:
                    print(f"Unknown service {arg!r}")
                    continue
                checkout.add_service(service)
                print(f"Added {service.name} ({checkout.cart.count()} in cart)")
            elif command == "remove":
                checkout.remove_service(arg)
                print(f"{checkout.cart.count()} in cart")
            elif command == "cart":
                checkout.open_cart()
                for s in checkout.cart.services():
                    print(f"  {s.name:<40} {_money(s.price):>12}")
                print(f"  {'Total:':<40} {_money(checkout.cart.total()):>12}")
                checkout.close_cart()
            elif command == "checkout":
                total = checkout.begin_checkout()
                print(f"Amount to pay: {_money(total)}. Enter: pay <phone>")
            elif command == "pay":
                await checkout.start_payment(arg)
                print("Processing payment... check your phone for the M-Pesa prompt")
                result = await checkout.wait_for_payment()
                if result is not None:
                    print(f"\n{result.title}\n{result.description}")
            elif command == "close":
                checkout.close_payment()
                print("Checkout cancelled")
            else:
                print(HELP)
        except (PhoneNumberRequiredError, EmptyCartError, CheckoutInProgressError, InvalidCheckoutStateError) as e:
            print(f"! {e}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Local storefront checkout harness")
    parser.add_argument("--fast", action="store_true", help="shorten the simulated payment delays")
    args = parser.parse_args()
    asyncio.run(run(args.fast))


if __name__ == "__main__":
    main()
