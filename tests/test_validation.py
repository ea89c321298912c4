import pytest

from pizza_shop.validation import Validator, field


def make_request(headers=None, query=None, payload=None):
    return {"headers": headers or {}, "query": query or {}, "payload": payload or {}}


class TestValidator:
    def test_first_failure_short_circuits_only_its_own_field(self):
        validator = Validator(make_request(payload={"a": 5, "b": "ok"}))

        validator.validate(
            field("a", source="payload").is_string(msg="a bad").is_length(min=10, msg="a short"),
            field("b", source="payload").is_string(msg="b bad"),
        )

        assert validator.errors() == [{"check": "is_string", "name": "a", "error": "a bad"}]
        assert validator.get_values() == {"b": "ok"}

    def test_every_failing_field_is_reported(self):
        validator = Validator(make_request(payload={"a": 1, "b": 2}))

        validator.validate(
            field("a", source="payload").is_string(msg="a bad"),
            field("b", source="payload").is_string(msg="b bad"),
        )

        assert [e["name"] for e in validator.errors()] == ["a", "b"]

    def test_trim_sanitizes_value(self):
        validator = Validator(make_request(headers={"token": "  abc  "}))

        value = validator.check(field("token", source="headers").is_string(trim=True))

        assert value == "abc"
        assert validator.get_values() == {"token": "abc"}

    def test_optional_absent_field_is_skipped(self):
        validator = Validator(make_request(payload={"b": None}))

        assert validator.check(field("a", source="payload").optional().is_string()) is None
        assert validator.check(field("b", source="payload").optional().is_string()) is None
        assert validator.errors() == []
        assert validator.get_values() == {}

    def test_optional_present_field_is_checked(self):
        validator = Validator(make_request(payload={"a": 3}))

        validator.check(field("a", source="payload").optional().is_string(msg="a bad"))

        assert validator.errors()[0]["error"] == "a bad"

    def test_required_absent_field_fails(self):
        validator = Validator(make_request())

        validator.check(field("a", source="payload").is_string(msg="a must be a string"))

        assert validator.errors() == [
            {"check": "is_string", "name": "a", "error": "a must be a string"}
        ]

    def test_literal_value_source(self):
        validator = Validator()

        assert validator.check(field("depth", value=1).is_in_range(min=0, max=1)) == 1
        validator.check(field("depth", value=2).is_in_range(min=0, max=1, msg="too deep"))

        assert validator.errors()[0]["error"] == "too deep"

    def test_results_are_copies(self):
        validator = Validator(make_request(payload={"items": [{"id": "x"}]}))
        validator.check(field("items", source="payload").is_array())
        validator.check(field("zip", source="payload").is_string(msg="zip"))

        validator.get_values()["items"].append("mutated")
        validator.errors().clear()

        assert validator.get_values() == {"items": [{"id": "x"}]}
        assert len(validator.errors()) == 1

    def test_non_object_payload_reads_as_absent(self):
        validator = Validator(make_request(payload=["not", "an", "object"]))

        validator.check(field("a", source="payload").optional().is_string())

        assert validator.errors() == []


class TestRules:
    @pytest.mark.parametrize("value", [True, False, "1", None, float("nan")])
    def test_is_number_rejects_non_numbers(self, value):
        validator = Validator()
        validator.check(field("n", value=value).is_number())
        assert validator.errors()

    @pytest.mark.parametrize("value", [0, 12, 1.5, -3])
    def test_is_number_accepts_numbers(self, value):
        validator = Validator()
        validator.check(field("n", value=value).is_number())
        assert validator.errors() == []

    def test_is_integer(self):
        validator = Validator()
        validator.check(field("n", value=4.0).is_number().is_integer())
        validator.check(field("m", value=4.5).is_number().is_integer(msg="not whole"))
        assert validator.errors() == [{"check": "is_integer", "name": "m", "error": "not whole"}]

    def test_is_length_exact_and_bounds(self):
        validator = Validator()
        validator.check(field("a", value="x" * 32).is_length(exact=32))
        validator.check(field("b", value="x" * 31).is_length(exact=32, msg="exact"))
        validator.check(field("c", value=[]).is_length(min=1, msg="empty"))
        assert [e["error"] for e in validator.errors()] == ["exact", "empty"]

    def test_is_length_ignores_unsized_values(self):
        validator = Validator()
        validator.check(field("a", value=5).is_length(min=10))
        assert validator.errors() == []

    def test_is_in_range_ignores_non_numbers(self):
        validator = Validator()
        validator.check(field("a", value="x").is_in_range(min=1, max=2))
        assert validator.errors() == []

    def test_is_in(self):
        validator = Validator()
        validator.check(field("size", value="large").is_in(("small", "large")))
        validator.check(field("other", value="huge").is_in(("small", "large"), msg="size"))
        assert [e["name"] for e in validator.errors()] == ["other"]

    def test_matches_searches(self):
        validator = Validator()
        validator.check(field("email", value="a@b.com").matches(r"^.+?@.+?\..{2,4}$"))
        validator.check(field("bad", value="nope").matches(r"@", msg="no at"))
        assert [e["name"] for e in validator.errors()] == ["bad"]

    def test_truthy_and_true(self):
        validator = Validator()
        validator.check(field("a", value="").is_truthy(msg="blank"))
        validator.check(field("b", value=1).is_true(msg="not true"))
        validator.check(field("c", value=True).is_boolean().is_true())
        assert [e["error"] for e in validator.errors()] == ["blank", "not true"]

    def test_rules_are_immutable(self):
        base = field("a", source="payload").is_string()
        longer = base.is_length(min=3)

        assert len(base.checks) == 1
        assert len(longer.checks) == 2
        assert not base.is_optional and base.optional().is_optional

    def test_unknown_source_is_rejected(self):
        with pytest.raises(ValueError):
            field("a", source="cookies")

    def test_rule_needs_source_or_value(self):
        with pytest.raises(ValueError):
            field("a")
