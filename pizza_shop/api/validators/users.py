# pizza_shop/api/validators/users.py
from typing import Any, Dict, List, Tuple

from pizza_shop.api.validators.common import email_rule, raise_for, token_rule
from pizza_shop.validation import Validator, field

RE_STATE = r"^[A-Za-z]{2}$"
RE_ZIP = r"^\d{5}(?:-\d{4})?$"


def _text(name: str, source: str, label: str | None = None):
    label = label or name
    return (
        field(name, source=source)
        .is_string(trim=True, msg=f"{label} must be a string")
        .is_length(min=1, msg=f"{label} cannot be blank")
    )


def _password(source: str = "payload"):
    return (
        field("password", source=source)
        .is_string(trim=True, msg="password must be a string")
        .is_length(min=10, max=128, msg="password must be between 10 and 128 characters")
    )


def validate_address(address: Dict[str, Any]) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """Sub-object validation with its own validator; returns (values, errors)."""
    validator = Validator()

    def line(name: str, optional: bool = False):
        rule = (
            field(name, value=address.get(name))
            .is_string(trim=True, msg=f"address.{name} must be a string")
            .is_truthy(msg=f"address.{name} must be non-empty string")
        )
        return rule.optional() if optional else rule

    validator.validate(
        line("line1"),
        line("line2", optional=True),
        line("city"),
        line("state").matches(RE_STATE, msg="address.state must be a valid state abbreviation"),
        field("zip", value=address.get("zip"))
        .is_string(trim=True, msg="address.zip must be a string")
        .matches(RE_ZIP, msg="address.zip must be proper zip code format"),
    )
    return validator.get_values(), validator.errors()


def post(request_data: Dict[str, Any]) -> Dict[str, Any]:
    validator = Validator(request_data)
    validator.validate(
        email_rule("payload"),
        _text("firstName", "payload"),
        _text("lastName", "payload"),
        _password(),
    )
    address = validator.check(
        field("address", source="payload").is_object(msg="address must be an object")
    )

    address_values, address_errors = validate_address(address) if address is not None else ({}, [])
    raise_for(validator.errors(), address_errors)

    values = validator.get_values()
    values["address"] = address_values
    return values


def get(request_data: Dict[str, Any]) -> Tuple[str, str]:
    validator = Validator(request_data).validate(email_rule("query"), token_rule())
    raise_for(validator.errors())
    values = validator.get_values()
    return values["email"], values["token"]


def put(request_data: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    validator = Validator(request_data)
    token_id = validator.check(token_rule())

    validator.validate(
        email_rule("payload").optional(),
        _text("firstName", "payload").optional(),
        _text("lastName", "payload").optional(),
        _password().optional(),
    )
    address = validator.check(
        field("address", source="payload").optional().is_object(msg="address must be an object")
    )

    address_values, address_errors = validate_address(address) if address is not None else ({}, [])
    raise_for(validator.errors(), address_errors)

    fields = validator.get_values()
    fields.pop("token", None)
    if address is not None:
        fields["address"] = address_values
    return token_id, fields


delete = get
