from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from storefront.models.products import Product
from storefront.services.pricing import lines_total
from storefront.utils.formatters import amount
from storefront.utils.validators import is_positive_qty

log = logging.getLogger(__name__)


@dataclass
class CartLine:
    product: Product
    qty: int


def copy_lines(items: Dict[int, CartLine]) -> Dict[int, CartLine]:
    # new line objects, shared products
    return {pid: CartLine(line.product, line.qty) for pid, line in items.items()}


def render_lines(items: Dict[int, CartLine]) -> list[str]:
    return [f"  x{line.qty} {line.product}" for line in items.values()]


class ShoppingCart:
    def __init__(self) -> None:
        self.items: Dict[int, CartLine] = {}  # product_id -> line

    def add(self, product: Optional[Product], qty: int = 1) -> None:
        if product is None or not is_positive_qty(qty):
            log.debug("ignored add: product=%r qty=%r", product, qty)
            return

        line = self.items.get(product.product_id)
        if line is None:
            self.items[product.product_id] = CartLine(product, qty)
        else:
            line.qty += qty
        log.debug("cart add: id=%s +%s", product.product_id, qty)

    def remove(self, product_id: int, qty: int = 1) -> None:
        line = self.items.get(product_id)
        if line is None or not is_positive_qty(qty):
            log.debug("ignored remove: id=%r qty=%r", product_id, qty)
            return

        if qty >= line.qty:
            del self.items[product_id]
        else:
            line.qty -= qty
        log.debug("cart remove: id=%s -%s", product_id, qty)

    def total(self) -> float:
        return lines_total(self.items.values())

    def is_empty(self) -> bool:
        return not self.items

    def clear(self) -> None:
        self.items.clear()

    def snapshot(self) -> Dict[int, CartLine]:
        return copy_lines(self.items)

    def quantity_of(self, product_id: int) -> int:
        line = self.items.get(product_id)
        return line.qty if line else 0

    def item_count(self) -> int:
        return sum(line.qty for line in self.items.values())

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(list(self.items.values()))

    def __iadd__(self, product: Optional[Product]) -> "ShoppingCart":
        self.add(product, 1)
        return self

    def __add__(self, product: Optional[Product]) -> "ShoppingCart":
        cart = ShoppingCart()
        cart.items = self.snapshot()
        cart.add(product, 1)
        return cart

    def __str__(self) -> str:
        lines = ["ShoppingCart:"]
        lines.extend(render_lines(self.items))
        lines.append(f"Total: {amount(self.total())}")
        return "\n".join(lines)
