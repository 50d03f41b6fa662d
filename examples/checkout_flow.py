"""
Checkout — cart to confirmation, in memory.

    python examples/checkout_flow.py
"""

from kungfu import Ok, Error

from storefront.app import Storefront
from storefront.config import Settings, configure_logging
from storefront.confirmation import ConfirmationView, render
from storefront.stores import CartLine


def banner(title: str) -> None:
    print(f"\n{'═' * 60}\n  {title}\n{'═' * 60}")


def main() -> None:
    configure_logging("INFO")
    shop = Storefront.create(Settings(database_url="memory://"))

    banner("Cart")
    for product_id, quantity in (("p1", 1), ("p3", 9)):
        product = shop.catalog.get_product(product_id)
        match shop.cart.add_item(CartLine.of(product, quantity)):
            case Ok(outcome):
                print(f"  + {product.name} x{outcome.line.quantity} ({outcome.notice.name})")
            case Error(e):
                print(f"  ✗ {e.message}")
    print(f"  subtotal: {shop.cart.subtotal}")

    banner("Checkout")
    flow = shop.checkout()
    steps = (
        lambda: flow.submit_contact({
            "first_name": "Jane", "last_name": "Doe",
            "email": "jane@mail.com", "phone": "5551234567",
        }),
        lambda: flow.submit_address({
            "street": "12 Main Street", "city": "Springfield", "state": "IL",
            "zip_code": "62701", "country": "US", "shipping_method": "express",
        }),
        lambda: flow.submit_payment({
            "card_number": "4111111111114242", "card_holder": "Jane Doe",
            "expiry_date": "12/29", "cvv": "123",
        }),
    )
    for submit in steps:
        match submit():
            case Ok(stage):
                print(f"  ✓ → {stage.value}")
            case Error(e):
                print(f"  ✗ {e.kind.name}: {e.message}")
                for f in e.fields:
                    print(f"      {f.field}: {f.message}")
                return

    banner("Confirmation")
    view = render(shop.inbox.take())
    if isinstance(view, ConfirmationView):
        print(f"  order {view.order_id} for {view.customer_name}")
        for line in view.lines:
            print(f"    {line.name} x{line.quantity} = {line.line_total}")
        print(f"  total {view.total} (card {view.card})")
    print(f"  cart now: {shop.cart.lines}")


if __name__ == "__main__":
    main()
