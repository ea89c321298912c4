# pizza_shop/domain/identity.py
import base64
import hashlib
import json

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pizza_shop.data.models.cart_item import CartItem


def canonical_json(data) -> str:
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonical_item(item: "CartItem") -> "CartItem":
    """Copy of `item` with its additions sorted by menu id (ties by full content)."""
    if not item.add:
        return item.model_copy(deep=True)

    add = sorted(
        (canonical_item(sub) for sub in item.add),
        key=lambda sub: (sub.id, canonical_json(sub.to_record())),
    )
    return item.model_copy(update={"add": add}, deep=True)


def hash_item(item: "CartItem") -> str:
    """sha256 of the canonical serialization, url-safe base64 without padding."""
    digest = hashlib.sha256(canonical_json(item.to_record()).encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
