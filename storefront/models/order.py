from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime
from enum import Enum
from typing import Dict, List

from storefront.constants import STATUS_LABELS
from storefront.models.cart import CartLine, ShoppingCart, copy_lines, render_lines
from storefront.services.pricing import lines_total
from storefront.utils.formatters import amount

log = logging.getLogger(__name__)

_order_ids = itertools.count(1)
_order_ids_lock = threading.Lock()


def next_order_id() -> int:
    with _order_ids_lock:
        return next(_order_ids)


class OrderStatus(Enum):
    CREATED = "created"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"


class Order:
    """Point-in-time copy of a cart."""

    def __init__(self, cart: ShoppingCart) -> None:
        self.order_id = next_order_id()
        self._items: Dict[int, CartLine] = cart.snapshot()
        self.status = OrderStatus.CREATED
        self.created_at = datetime.now()
        log.info("order #%s created: %s lines", self.order_id, len(self._items))

    def total(self) -> float:
        return lines_total(self._items.values())

    def lines(self) -> List[CartLine]:
        return list(copy_lines(self._items).values())

    def item_count(self) -> int:
        return sum(line.qty for line in self._items.values())

    def _set_status(self, status: OrderStatus) -> None:
        log.info("order #%s: %s -> %s", self.order_id, self.status.value, status.value)
        self.status = status

    def pay(self) -> None:
        self._set_status(OrderStatus.PAID)

    def ship(self) -> None:
        self._set_status(OrderStatus.SHIPPED)

    def cancel(self) -> None:
        self._set_status(OrderStatus.CANCELLED)

    def status_label(self) -> str:
        return STATUS_LABELS[self.status.value]

    def __str__(self) -> str:
        lines = [f"Order#{self.order_id} ({self.status_label()})"]
        lines.extend(render_lines(self._items))
        lines.append(f"Order Total: {amount(self.total())}")
        return "\n".join(lines)
