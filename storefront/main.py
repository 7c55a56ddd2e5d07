import logging

from storefront.config import settings
from storefront.models.cart import ShoppingCart
from storefront.models.catalog import Catalog
from storefront.models.order import Order
from storefront.models.products import Clothing, Electronics, Grocery, Product
from storefront.services.invoice_pdf import generate_invoice_pdf
from storefront.services.pricing import unit_price
from storefront.utils.formatters import amount


def run_demo() -> None:
    # 1. products
    e1 = Electronics(1, "Smartphone", 699.99, "ELEC-100", warranty_months=12)
    c1 = Clothing(2, "Leather Jacket", 250.00, "CLOTH-200", size="L", clearance=False)
    g1 = Grocery(3, "Organic Milk", 3.49, "GROC-300", expiry_date="2025-12-01")

    print(e1)
    print(c1)
    print(g1)
    print()

    # 2. base vs final price
    print(f"Base price of {e1.name}: {amount(e1.base_price())} | Final price (after discount): {amount(e1.final_price())}")
    print(f"Base price of Jacket: {amount(c1.base_price())} | Final price (after discount): {amount(c1.final_price())}")
    print()

    # 3. += and +
    cart = ShoppingCart()
    cart += e1
    cart = cart + c1
    cart += g1
    print(cart)
    print()

    # 4. discount capability per product
    products: list[Product] = [e1, c1, g1]
    for p in products:
        print(f"{p.name} -> Final Price: {amount(unit_price(p))}")
    print()

    # 5. catalog
    catalog: Catalog[Product] = Catalog()
    for p in products:
        catalog.add(p)
    print(f"Catalog contains {catalog.size()} items:")
    for p in catalog:
        print(f"  {p}")
    print()

    # 6. cart, order, invalid input
    print(f"Cart total: {amount(cart.total())}")

    order = Order(cart)
    print("Order created:")
    print(order)

    order.pay()
    print("After payment:")
    print(order)

    if settings.invoice_export:
        print(f"Invoice: {generate_invoice_pdf(order, settings.export_dir)}")

    print(f"Removing product ID={c1.product_id} (Jacket) from cart...")
    cart.remove(c1.product_id, 1)
    print(cart)

    print("Attempting to remove invalid product ID=999...")
    cart.remove(999, 1)
    print("Cart still contains:")
    print(cart)

    cart.clear()
    print(f"Cart cleared. Empty? {str(cart.is_empty()).lower()}")


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    run_demo()


if __name__ == "__main__":
    main()
