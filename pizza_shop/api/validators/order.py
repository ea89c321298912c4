# pizza_shop/api/validators/order.py
from datetime import date
from typing import Any, Dict, Tuple

from pizza_shop.api.validators.common import raise_for, token_rule
from pizza_shop.validation import Validator, field


def post(request_data: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    validator = Validator(request_data)
    token_id = validator.check(token_rule())

    ccinfo = validator.check(
        field("ccinfo", source="payload").is_object(msg="ccinfo must be an object")
    )
    card = ccinfo or {}
    this_year = date.today().year

    card_validator = Validator().validate(
        field("number", value=card.get("number"))
        .is_number(msg="ccinfo.number must be a number")
        .is_integer(msg="ccinfo.number must be a number"),
        field("exp_month", value=card.get("exp_month"))
        .is_number(msg="ccinfo.exp_month must be a number")
        .is_in_range(min=1, max=12, msg="ccinfo.exp_month must be a valid month"),
        field("exp_year", value=card.get("exp_year"))
        .is_number(msg="ccinfo.exp_year must be a number")
        .is_in_range(min=this_year, max=this_year + 20, msg="ccinfo.exp_year must be a valid year"),
        field("cvc", value=card.get("cvc"))
        .is_number(msg="ccinfo.cvc must be a number")
        .is_in_range(min=1, max=9999, msg="ccinfo.cvc must be a valid cvc"),
    )

    raise_for(validator.errors(), card_validator.errors() if ccinfo is not None else [])
    return token_id, card_validator.get_values()
