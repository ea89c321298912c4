# pizza_shop/validation/rules.py
"""
Declarative field rules.

A rule names a field, where its value comes from (a request source or a
literal) and a chain of checks. Rules are immutable: every chain call
returns a new rule, so a partially built rule can be shared and extended.

    field("token", source="headers")
        .is_string(trim=True, msg="token must be a string")
        .is_length(exact=32, msg="invalid token format")
"""
import math
import re
from dataclasses import dataclass, field as dc_field, replace
from typing import Any, Callable, Iterable, Pattern, Tuple

SOURCES = ("headers", "query", "payload")


class _Missing:
    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_sized(value: Any) -> bool:
    return isinstance(value, (str, list))


def _always(value: Any) -> bool:
    return True


@dataclass(frozen=True)
class Check:
    name: str
    predicate: Callable[[Any], bool]
    message: str
    # checks that only make sense for one value type pass other types through
    applies: Callable[[Any], bool] = _always
    transform: Callable[[Any], Any] | None = None


@dataclass(frozen=True)
class Rule:
    name: str
    source: str | None = None
    literal: Any = MISSING
    is_optional: bool = False
    checks: Tuple[Check, ...] = dc_field(default_factory=tuple)

    def optional(self) -> "Rule":
        return replace(self, is_optional=True)

    def _chain(self, check: Check) -> "Rule":
        return replace(self, checks=self.checks + (check,))

    # type checks

    def is_string(self, trim: bool = False, msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_string",
            lambda v: isinstance(v, str),
            msg or "is not a string",
            transform=str.strip if trim else None,
        ))

    def is_number(self, msg: str | None = None) -> "Rule":
        return self._chain(Check("is_number", _is_number, msg or "is not a number"))

    def is_integer(self, msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_integer",
            lambda v: float(v).is_integer(),
            msg or "is not an integer",
            applies=_is_number,
        ))

    def is_boolean(self, msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_boolean", lambda v: isinstance(v, bool), msg or "is not a boolean"
        ))

    def is_object(self, msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_object", lambda v: isinstance(v, dict), msg or "is not an object"
        ))

    def is_array(self, msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_array", lambda v: isinstance(v, list), msg or "is not an array"
        ))

    # bounds

    def is_length(self, exact: int | None = None, min: int = 0,
                  max: float = math.inf, msg: str | None = None) -> "Rule":
        if exact is not None:
            min = max = exact

        return self._chain(Check(
            "is_length",
            lambda v: min <= len(v) <= max,
            msg or "is out of range",
            applies=_is_sized,
        ))

    def is_in_range(self, min: float = -math.inf, max: float = math.inf,
                    msg: str | None = None) -> "Rule":
        return self._chain(Check(
            "is_in_range",
            lambda v: min <= v <= max,
            msg or "is out of range",
            applies=_is_number,
        ))

    def is_in(self, choices: Iterable[Any], msg: str | None = None) -> "Rule":
        allowed = tuple(choices)
        return self._chain(Check(
            "is_in", lambda v: v in allowed, msg or "is not in list"
        ))

    def matches(self, pattern: str | Pattern[str], msg: str | None = None) -> "Rule":
        expr = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._chain(Check(
            "matches",
            lambda v: expr.search(v) is not None,
            msg or "does not match",
            applies=lambda v: isinstance(v, str),
        ))

    # truth

    def is_truthy(self, msg: str | None = None) -> "Rule":
        return self._chain(Check("is_truthy", bool, msg or "is not truthy"))

    def is_true(self, msg: str | None = None) -> "Rule":
        return self._chain(Check("is_true", lambda v: v is True, msg or "is not true"))


def field(name: str, source: str | None = None, value: Any = MISSING) -> Rule:
    """Start a rule for `name`, read from a request source or given a literal value."""
    if source is not None and source not in SOURCES:
        raise ValueError(f"unknown validation source {source!r}")
    if source is None and value is MISSING:
        raise ValueError(f"rule {name!r} needs a source or a value")

    return Rule(name=name, source=source, literal=value)
