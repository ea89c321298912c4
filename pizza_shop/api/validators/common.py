# pizza_shop/api/validators/common.py
from typing import Any, Dict, List

from pizza_shop.domain.errors import ValidationFailed
from pizza_shop.validation import Rule, Validator, field

RE_EMAIL = r"^.+?@.+?\..{2,4}$"


def token_rule(source: str = "headers") -> Rule:
    return (
        field("token", source=source)
        .is_string(trim=True, msg="token must be a string")
        .is_length(exact=32, msg="invalid token format")
    )


def email_rule(source: str) -> Rule:
    return (
        field("email", source=source)
        .is_string(trim=True, msg="email must be a string")
        .matches(RE_EMAIL, msg="email must be an email address")
    )


def raise_for(*error_lists: List[Dict[str, Any]]) -> None:
    errors = [e for errors in error_lists for e in errors]
    if errors:
        raise ValidationFailed(errors)


def run(request_data: Dict[str, Any], *rules: Rule) -> Validator:
    return Validator(request_data).validate(*rules)
