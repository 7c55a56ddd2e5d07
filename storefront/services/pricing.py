from __future__ import annotations

from typing import Iterable

from storefront.constants import (
    CLOTHING_CLEARANCE_RATE,
    CLOTHING_REGULAR_RATE,
    ELECTRONICS_RATE,
)


def electronics_discount(price: float) -> float:
    return price * ELECTRONICS_RATE


def clothing_discount(price: float, clearance: bool) -> float:
    if clearance:
        return price * CLOTHING_CLEARANCE_RATE
    return price * CLOTHING_REGULAR_RATE


def unit_price(product) -> float:
    """Base price run through the product's discount rule, if it has one."""
    rule = product.discount_rule()
    base = product.base_price()
    if rule is None:
        return base
    return rule(base)


def line_total(product, qty: int) -> float:
    return unit_price(product) * qty


def lines_total(lines: Iterable) -> float:
    """
    Sum of unit price x quantity over cart/order lines.
    Each line needs `.product` and `.qty`.
    """
    total = 0.0
    for line in lines:
        total += line_total(line.product, line.qty)
    return total
