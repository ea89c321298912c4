# pizza_shop/api/validators/cart.py
from typing import Any, Dict, List, Tuple

from pizza_shop.api.validators.common import raise_for, token_rule
from pizza_shop.data.models.menu_item import ITEM_SIZES
from pizza_shop.validation import Validator, field


def validate_cart_items(items: List[Any] | None, depth: int = 0) -> List[Dict[str, Any]]:
    """
    Check a list of cart items and, recursively, their additions.

    Each level gets a fresh validator; nested errors are merged into the
    returned list. Additions may not carry additions of their own.
    """
    if not items:
        return []

    validator = Validator()
    errors: List[Dict[str, Any]] = []

    validator.check(
        field("depth", value=depth).is_in_range(min=0, max=1, msg="add items cannot have add items")
    )

    for item in items:
        if not isinstance(item, dict):
            validator.check(field("item", value=item).is_object(msg="item must be an object"))
            continue

        validator.check(field("item.id", value=item.get("id")).is_string(msg="item.id must be a string"))

        if depth == 0:
            validator.check(
                field("item.size", value=item.get("size"))
                .is_string(msg="item.size must be a string")
                .is_in(ITEM_SIZES, msg=f"item.size must be one of {', '.join(ITEM_SIZES)}")
            )
        else:
            # additions are priced at the parent's size and never carry their own
            validator.check(
                field("item.size", value=item.get("size"))
                .optional()
                .is_in((), msg="add items cannot have a size")
            )

        add = validator.check(
            field("item.add", value=item.get("add")).optional().is_array(msg="item.add must be an array")
        )
        errors.extend(validate_cart_items(add, depth + 1))

    return [*errors, *validator.errors()]


def post(request_data: Dict[str, Any]) -> Tuple[str, List[Dict[str, Any]]]:
    validator = Validator(request_data)
    token_id = validator.check(token_rule())
    items = validator.check(
        field("items", source="payload")
        .is_array(msg="must include an items array")
        .is_length(min=1, msg="items cannot be empty")
    )

    raise_for(validator.errors(), validate_cart_items(items))
    return token_id, items


def get(request_data: Dict[str, Any]) -> str:
    validator = Validator(request_data)
    token_id = validator.check(token_rule())
    raise_for(validator.errors())
    return token_id


def delete(request_data: Dict[str, Any]) -> Tuple[str, str | None]:
    validator = Validator(request_data)
    token_id = validator.check(token_rule())
    item_id = validator.check(
        field("id", source="query").optional().is_string(trim=True, msg="id must be a string")
    )
    raise_for(validator.errors())
    return token_id, item_id or None
