# pizza_shop/api/validators/tokens.py
from typing import Any, Dict

from pizza_shop.api.validators.common import raise_for, run, token_rule
from pizza_shop.validation import field


def post(request_data: Dict[str, Any]) -> Dict[str, Any]:
    validator = run(
        request_data,
        field("email", source="payload").is_string(trim=True, msg="email must be a string"),
        field("password", source="payload").is_string(trim=True, msg="password must be a string"),
    )
    raise_for(validator.errors())
    return validator.get_values()


def get(request_data: Dict[str, Any]) -> str:
    validator = run(request_data, token_rule("query"))
    raise_for(validator.errors())
    return validator.get_values()["token"]


def put(request_data: Dict[str, Any]) -> str:
    validator = run(
        request_data,
        field("token", source="payload").is_string(trim=True, msg="token must be a string"),
        field("extend", source="payload")
        .is_boolean(msg="extend must be a boolean")
        .is_true(msg="extend must be true"),
    )
    raise_for(validator.errors())
    return validator.get_values()["token"]


def delete(request_data: Dict[str, Any]) -> str:
    validator = run(
        request_data,
        field("token", source="query").is_string(trim=True, msg="token must be a string"),
    )
    raise_for(validator.errors())
    return validator.get_values()["token"]
