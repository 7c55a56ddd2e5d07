import pytest

from storefront.models.cart import CartLine
from storefront.models.products import Clothing, Electronics, Grocery
from storefront.services.pricing import (
    clothing_discount,
    electronics_discount,
    line_total,
    lines_total,
    unit_price,
)


def test_rules():
    assert electronics_discount(100.0) == pytest.approx(90.0)
    assert clothing_discount(100.0, True) == pytest.approx(70.0)
    assert clothing_discount(100.0, False) == pytest.approx(95.0)


def test_unit_price_falls_back_to_base():
    g = Grocery(1, "Eggs", 2.5, "GR-1", expiry_date="2025-02-01")
    assert unit_price(g) == 2.5
    assert line_total(g, 4) == pytest.approx(10.0)


def test_lines_total():
    lines = [
        CartLine(Electronics(1, "TV", 500.0, "E-1"), 2),
        CartLine(Clothing(2, "Hat", 20.0, "C-1", size="S", clearance=True), 3),
    ]
    assert lines_total(lines) == pytest.approx(500.0 * 0.9 * 2 + 20.0 * 0.7 * 3)
    assert lines_total([]) == 0.0
