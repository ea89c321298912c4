# pizza_shop/validation/validator.py
import copy
from typing import Any, Dict, List, Mapping

from pizza_shop.validation.rules import MISSING, Rule


class Validator:
    """
    Runs rules against one request.

    - each field short-circuits on its first failed check
    - other fields keep being checked, so every bad field is reported
    - passing fields land (trimmed if asked) in the sanitized values bag
    """

    def __init__(self, request_data: Mapping[str, Any] | None = None):
        data = request_data or {}
        self._sources = {
            "headers": data.get("headers") or {},
            "query": data.get("query") or {},
            "payload": data.get("payload") or {},
        }
        self._errors: List[Dict[str, Any]] = []
        self._values: Dict[str, Any] = {}

    def check(self, rule: Rule) -> Any:
        """Evaluate a single rule; returns the sanitized value or None on failure/absence."""
        raw = self._resolve(rule)

        if raw is MISSING or raw is None:
            if rule.is_optional:
                return None
            raw = None

        value = raw
        for check in rule.checks:
            if not check.applies(value):
                continue

            if not check.predicate(value):
                self._errors.append({
                    "check": check.name,
                    "name": rule.name,
                    "error": check.message,
                })
                return None

            if check.transform is not None:
                value = check.transform(value)

        self._values[rule.name] = value
        return value

    def validate(self, *rules: Rule) -> "Validator":
        for rule in rules:
            self.check(rule)
        return self

    def errors(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._errors)

    def get_values(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def _resolve(self, rule: Rule) -> Any:
        if rule.literal is not MISSING:
            return rule.literal

        source = self._sources.get(rule.source) or {}
        if not isinstance(source, Mapping):
            return MISSING
        return source.get(rule.name, MISSING)
