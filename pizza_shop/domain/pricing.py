# pizza_shop/domain/pricing.py
"""
Cart valuation.

Every cart item is resolved against the menu on each read. Top-level items
are priced at their own size, additions at their parent's size. A cart that
references a menu item (or a size) the menu no longer has cannot be priced,
so the whole summary fails instead of silently dropping the line.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional

from pydantic import BaseModel, field_serializer

from pizza_shop.data.models.cart_item import CartItem
from pizza_shop.data.models.menu_item import MenuItem
from pizza_shop.domain.errors import IntegrityError, NotFoundError
from pizza_shop.domain.identity import hash_item

CENT = Decimal("0.01")

MenuLookup = Callable[[str], MenuItem]


class SummaryItem(BaseModel):
    id: str
    name: str
    size: Optional[str] = None
    price: Decimal
    add: Optional[List["SummaryItem"]] = None

    @field_serializer("price")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


def summarize(items: List[CartItem], menu: MenuLookup,
              parent: CartItem | None = None) -> List[SummaryItem]:
    return [_summary_item(item, menu, parent) for item in items]


def _summary_item(item: CartItem, menu: MenuLookup, parent: CartItem | None) -> SummaryItem:
    try:
        menu_item = menu(item.id)
    except NotFoundError as e:
        raise IntegrityError(f"menu item {item.id!r} no longer exists") from e

    size = item.size if parent is None else parent.size

    if size not in menu_item.price:
        raise IntegrityError(f"menu item {item.id!r} has no price for size {size!r}")

    summary = SummaryItem(
        id=hash_item(item),
        name=menu_item.name,
        size=size,
        price=Decimal(str(menu_item.price[size])),
    )

    if item.add is not None:
        summary.add = summarize(item.add, menu, parent=item)

    return summary


def _subtotal(items: Optional[List[SummaryItem]]) -> Decimal:
    if not items:
        return Decimal("0")
    return sum((i.price + _subtotal(i.add) for i in items), Decimal("0"))


def cart_total(items: Optional[List[SummaryItem]]) -> Decimal:
    """Sum of all prices in the forest, rounded to cents once at the end."""
    return _subtotal(items).quantize(CENT, rounding=ROUND_HALF_UP)
