from pizza_shop.validation.rules import MISSING, Rule, field
from pizza_shop.validation.validator import Validator

__all__ = ["MISSING", "Rule", "Validator", "field"]
