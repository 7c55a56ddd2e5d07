from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from storefront.constants import (
    KIND_CLOTHING,
    KIND_ELECTRONICS,
    KIND_GROCERY,
    KIND_PRODUCT,
)
from storefront.services.pricing import clothing_discount, electronics_discount
from storefront.utils.formatters import amount
from storefront.utils.validators import require_non_negative

DiscountRule = Callable[[float], float]


@dataclass(frozen=True)
class Product:
    product_id: int
    name: str
    price: float
    sku: str

    def __post_init__(self) -> None:
        require_non_negative(self.price, "price")

    def base_price(self) -> float:
        return self.price

    def type_name(self) -> str:
        return KIND_PRODUCT

    def discount_rule(self) -> Optional[DiscountRule]:
        # plain products carry no discount capability
        return None

    def final_price(self) -> float:
        rule = self.discount_rule()
        if rule is None:
            return self.price
        return rule(self.price)

    def _details(self) -> str:
        return f"SKU:{self.sku}"

    def __str__(self) -> str:
        return f"[{self.type_name()}] {self.name} ({self._details()}) : {amount(self.final_price())}"


@dataclass(frozen=True)
class Electronics(Product):
    warranty_months: int = 0

    def type_name(self) -> str:
        return KIND_ELECTRONICS

    def apply_discount(self, price: float) -> float:
        """Flat promotional 10% off."""
        return electronics_discount(price)

    def discount_rule(self) -> Optional[DiscountRule]:
        return self.apply_discount


@dataclass(frozen=True)
class Clothing(Product):
    size: str = ""
    clearance: bool = False

    def type_name(self) -> str:
        return KIND_CLOTHING

    def apply_discount(self, price: float) -> float:
        """30% off on clearance, 5% otherwise."""
        return clothing_discount(price, self.clearance)

    def discount_rule(self) -> Optional[DiscountRule]:
        return self.apply_discount

    def _details(self) -> str:
        return f"Size:{self.size}, SKU:{self.sku}"


@dataclass(frozen=True)
class Grocery(Product):
    expiry_date: str = ""

    def type_name(self) -> str:
        return KIND_GROCERY

    def _details(self) -> str:
        return f"exp:{self.expiry_date}, SKU:{self.sku}"
