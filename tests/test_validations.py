"""Tests for the predicate rule families on PropertyChain."""

from datetime import date, datetime, timezone

import pytest

from conftest import Event
from lucidity import Validator


def _failures(build, value):
    """Run one chain built by ``build`` against ``{"value": value}``."""
    validator = Validator()
    build(validator.rule_for(key="value"))
    return validator.get_exceptions({"value": value})


def _messages(build, value):
    return [failure.message for failure in _failures(build, value)]


# (strict rule, or-null rule, a passing value)
FAMILIES = [
    (lambda c: c.not_empty(), lambda c: c.not_empty_or_null(), "x"),
    (lambda c: c.is_empty(), lambda c: c.is_empty_or_null(), ""),
    (lambda c: c.min_length(2), lambda c: c.min_length_or_null(2), "ab"),
    (lambda c: c.max_length(2), lambda c: c.max_length_or_null(2), "ab"),
    (lambda c: c.matches_pattern(r"\d"), lambda c: c.matches_pattern_or_null(r"\d"), "a1"),
    (lambda c: c.must_have_lowercase(), lambda c: c.must_have_lowercase_or_null(), "a"),
    (lambda c: c.must_have_uppercase(), lambda c: c.must_have_uppercase_or_null(), "A"),
    (lambda c: c.must_have_number(), lambda c: c.must_have_number_or_null(), "1"),
    (
        lambda c: c.must_have_special_character(),
        lambda c: c.must_have_special_character_or_null(),
        "@",
    ),
    (lambda c: c.valid_email(), lambda c: c.valid_email_or_null(), "a@b.com"),
    (lambda c: c.equal_to(1), lambda c: c.equal_to_or_null(1), 1),
    (lambda c: c.not_equal_to(1), lambda c: c.not_equal_to_or_null(1), 2),
    (lambda c: c.greater_than(1), lambda c: c.greater_than_or_null(1), 2),
    (lambda c: c.less_than(1), lambda c: c.less_than_or_null(1), 0),
    (lambda c: c.min(1), lambda c: c.min_or_null(1), 1),
    (lambda c: c.max(1), lambda c: c.max_or_null(1), 1),
    (lambda c: c.range(1, 3), lambda c: c.range_or_null(1, 3), 2),
    (
        lambda c: c.greater_than_or_equal_to(date(2024, 1, 1)),
        lambda c: c.greater_than_or_equal_to_or_null(date(2024, 1, 1)),
        date(2024, 1, 1),
    ),
    (
        lambda c: c.less_than_or_equal_to(date(2024, 1, 1)),
        lambda c: c.less_than_or_equal_to_or_null(date(2024, 1, 1)),
        date(2024, 1, 1),
    ),
    (
        lambda c: c.inclusive_between("2024-01-01", "2024-12-31"),
        lambda c: c.inclusive_between_or_null("2024-01-01", "2024-12-31"),
        date(2024, 6, 1),
    ),
    (
        lambda c: c.exclusive_between("2024-01-01", "2024-12-31"),
        lambda c: c.exclusive_between_or_null("2024-01-01", "2024-12-31"),
        date(2024, 6, 1),
    ),
    (lambda c: c.valid_cpf(), lambda c: c.valid_cpf_or_null(), "529.982.247-25"),
    (lambda c: c.valid_cnpj(), lambda c: c.valid_cnpj_or_null(), "11.222.333/0001-81"),
    (lambda c: c.valid_cpf_or_cnpj(), lambda c: c.valid_cpf_or_cnpj_or_null(), "52998224725"),
    (lambda c: c.valid_cep(), lambda c: c.valid_cep_or_null(), "01001-000"),
    (
        lambda c: c.valid_credit_card(),
        lambda c: c.valid_credit_card_or_null(),
        "4111 1111 1111 1111",
    ),
    (lambda c: c.valid_phone_br(), lambda c: c.valid_phone_br_or_null(), "75912345678"),
    (
        lambda c: c.valid_phone_with_country_code_br(),
        lambda c: c.valid_phone_with_country_code_br_or_null(),
        "+5575912345678",
    ),
]


@pytest.mark.parametrize("strict, or_null, valid", FAMILIES)
def test_null_fails_strict_form(strict, or_null, valid):
    """Test the plain form fails on None."""
    assert len(_failures(strict, None)) == 1


@pytest.mark.parametrize("strict, or_null, valid", FAMILIES)
def test_null_passes_or_null_form(strict, or_null, valid):
    """Test the _or_null form lets None through."""
    assert _failures(or_null, None) == []


@pytest.mark.parametrize("strict, or_null, valid", FAMILIES)
def test_valid_value_passes_both_forms(strict, or_null, valid):
    assert _failures(strict, valid) == []
    assert _failures(or_null, valid) == []


@pytest.mark.parametrize("strict, or_null, valid", FAMILIES)
def test_message_and_code_overrides(strict, or_null, valid):
    """Test every family honours the message and code keywords."""

    def build(chain):
        method = strict(_Recorder())
        getattr(chain, method.name)(*method.args, message="custom", code="my_code")

    failures = _failures(build, None)
    assert [(f.message, f.code, f.key) for f in failures] == [("custom", "my_code", "value")]


class _Recorder:
    """Captures the method name and arguments a family lambda calls."""

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.name, self.args = name, args
            return self

        return record


def test_not_empty_message():
    assert _messages(lambda c: c.not_empty(), "") == ["'value' must not be empty."]


def test_not_empty_on_collections():
    assert _messages(lambda c: c.not_empty(), []) == ["'value' must not be empty."]
    assert _failures(lambda c: c.not_empty(), [1]) == []


def test_is_empty_message():
    assert _messages(lambda c: c.is_empty(), "x") == ["'value' must be empty."]


def test_min_length_message():
    assert _messages(lambda c: c.min_length(8), "abc") == [
        "The length of 'value' must be at least 8 characters. You entered 3 characters."
    ]


def test_max_length_message():
    assert _messages(lambda c: c.max_length(4), "description") == [
        "The length of 'value' must be 4 characters or fewer. You entered 11 characters."
    ]


def test_max_length_null_message_counts_zero():
    assert _messages(lambda c: c.max_length(4), None) == [
        "The length of 'value' must be 4 characters or fewer. You entered 0 characters."
    ]


def test_matches_pattern_message():
    assert _messages(lambda c: c.matches_pattern(r"^\d+$"), "12a") == [
        "'value' is not in the correct format."
    ]


def test_character_class_messages():
    def build(chain):
        return (
            chain.must_have_lowercase()
            .must_have_uppercase()
            .must_have_number()
            .must_have_special_character()
        )

    assert _messages(build, " ") == [
        "'value' must have at least one lowercase letter.",
        "'value' must have at least one uppercase letter.",
        "'value' must have at least one digit ('0'-'9').",
    ]


def test_is_null_and_is_not_null():
    assert _failures(lambda c: c.is_null(), None) == []
    assert _messages(lambda c: c.is_null(), "x") == ["'value' must be null."]
    assert _failures(lambda c: c.is_not_null(), "x") == []
    assert _messages(lambda c: c.is_not_null(), None) == ["'value' must not be null."]


def test_is_not_null_then_max_length():
    assert _failures(lambda c: c.is_not_null().max_length(4), "desc") == []


def test_equal_to_literal_message():
    assert _messages(lambda c: c.equal_to("a"), "b") == ["'value' must be equal to 'a'."]


def test_not_equal_to_message():
    assert _messages(lambda c: c.not_equal_to("a"), "a") == ["'value' must not be equal to 'a'."]


def test_equal_to_entity_callable():
    validator = Validator()
    validator.rule_for(key="confirm").equal_to(lambda e: e["password"])

    assert validator.validate({"password": "p", "confirm": "p"}).is_valid
    assert validator.validate({"password": "p", "confirm": "q"}).messages == [
        "'confirm' must be equal to 'p'."
    ]


def test_greater_than_message():
    assert _messages(lambda c: c.greater_than(10), 5) == ["'value' must be greater than '10'."]


def test_less_than_message():
    assert _messages(lambda c: c.less_than(17), 20) == ["'value' must be less than '17'."]


def test_ordering_with_entity_callable():
    validator = Validator()
    validator.rule_for(key="end").greater_than(lambda e: e["start"])

    assert validator.validate({"start": 1, "end": 2}).is_valid
    assert validator.validate({"start": 3, "end": 2}).messages == [
        "'end' must be greater than '3'."
    ]


def test_min_and_max_messages():
    assert _messages(lambda c: c.min(18), 15) == [
        "'value' must be greater than or equal to 18. You entered 15."
    ]
    assert _messages(lambda c: c.max(18), 20) == [
        "'value' must be less than or equal to 18. You entered 20."
    ]


def test_range_message():
    assert _messages(lambda c: c.range(1, 10), 11) == [
        "'value' must be between 1 and 10. You entered 11."
    ]
    assert _failures(lambda c: c.range(1, 10), 10) == []


def test_greater_than_datetime_uses_date_message():
    bound = datetime(2024, 1, 1)
    assert _messages(lambda c: c.greater_than(bound), datetime(2023, 1, 1)) == [
        "'value' must be greater than date '2024-01-01 00:00:00'."
    ]
    assert _failures(lambda c: c.greater_than(bound), "2024-02-01") == []


def test_less_than_datetime_code():
    failures = _failures(lambda c: c.less_than(date(2024, 1, 1)), date(2024, 1, 1))
    assert [f.code for f in failures] == ["lessThanDateTime"]
    assert failures[0].message == "'value' must be less than date '2024-01-01'."


def test_greater_than_or_equal_to_message():
    assert _messages(
        lambda c: c.greater_than_or_equal_to(datetime(2024, 1, 1)), datetime(2023, 12, 31)
    ) == ["'value' must be greater than or equal to date '2024-01-01 00:00:00'."]


def test_less_than_or_equal_to_parses_string_bound():
    failures = _failures(lambda c: c.less_than_or_equal_to("2024-01-01"), date(2024, 1, 2))
    assert [f.code for f in failures] == ["lessThanOrEqualToDateTime"]


def test_datetime_rule_rejects_unparseable_value():
    assert [f.code for f in _failures(lambda c: c.greater_than_or_equal_to(date(2024, 1, 1)), "soon")] == [
        "greaterThanOrEqualToDateTime"
    ]


def test_datetime_rule_rejects_unparseable_bound():
    with pytest.raises(ValueError):
        Validator().rule_for(key="value").inclusive_between("yesterday-ish", "2024-01-01")


def test_inclusive_between_bounds():
    def build(chain):
        return chain.inclusive_between(date(2024, 1, 1), date(2024, 1, 31))

    assert _failures(build, date(2024, 1, 1)) == []
    assert _failures(build, date(2024, 1, 31)) == []
    assert _messages(build, date(2024, 2, 1)) == [
        "'value' must be greater than or equal to '2024-01-01' date "
        "and less than or equal to '2024-01-31' date."
    ]


def test_exclusive_between_bounds():
    def build(chain):
        return chain.exclusive_between(date(2024, 1, 1), date(2024, 1, 31))

    assert _failures(build, date(2024, 1, 15)) == []
    assert _messages(build, date(2024, 1, 1)) == [
        "'value' must be greater than the '2024-01-01' date and less than the '2024-01-31' date."
    ]


def test_datetime_rules_on_model_entity():
    validator = Validator()
    validator.rule_for(lambda e: e.start, key="start").greater_than_or_equal_to_or_null(
        "2024-01-01"
    )

    assert validator.validate(Event()).is_valid
    assert validator.validate(Event(start="2024-05-01T09:00:00")).is_valid
    assert not validator.validate(Event(start=datetime(2023, 5, 1))).is_valid


def test_datetime_rules_mix_aware_and_naive_values():
    """A naive side is read in the aware side's timezone instead of raising."""
    validator = Validator()
    validator.rule_for(key="start").greater_than_or_equal_to(datetime(2024, 1, 1))

    assert validator.validate({"start": "2024-06-01T00:00:00Z"}).is_valid
    assert not validator.validate({"start": "2023-06-01T00:00:00+03:00"}).is_valid

    aware_bound = datetime(2024, 1, 1, tzinfo=timezone.utc)
    failures = _failures(lambda c: c.less_than(aware_bound), datetime(2024, 6, 1))
    assert [f.code for f in failures] == ["lessThanDateTime"]
    assert _failures(lambda c: c.less_than(aware_bound), datetime(2023, 1, 1)) == []


def test_ordering_with_entity_callable_returning_date():
    """A date read from the entity compares as a date, parsing string values."""
    validator = Validator()
    validator.rule_for(key="end").greater_than(lambda e: e["start"])

    assert validator.validate({"start": date(2024, 1, 1), "end": "2024-02-01"}).is_valid
    failures = validator.get_exceptions({"start": date(2024, 1, 1), "end": "2023-12-01"})
    assert [f.code for f in failures] == ["greaterThan"]
    assert not validator.validate({"start": date(2024, 1, 1), "end": "someday"}).is_valid


def test_document_messages():
    assert _messages(lambda c: c.valid_cpf(), "123") == ["'value' is not a valid CPF."]
    assert _messages(lambda c: c.valid_cnpj(), "123") == ["'value' is not a valid CNPJ."]
    assert _messages(lambda c: c.valid_cep(), "123") == ["'value' is not a valid CEP."]
    assert _messages(lambda c: c.valid_credit_card(), "1") == [
        "'value' is not a valid credit card number."
    ]
    assert _messages(lambda c: c.valid_phone_br(), "751234567") == [
        "'value' is not a valid phone number."
    ]
    assert _messages(lambda c: c.valid_phone_with_country_code_br(), "751234567") == [
        "'value' is not a valid phone number with DDI."
    ]


def test_cpf_chain_with_null():
    def build(chain):
        return chain.is_not_null().not_empty().valid_cpf()

    assert _messages(build, None)[0] == "'value' must not be null."
    assert _failures(build, "529.982.247-25") == []


@pytest.mark.parametrize(
    "build, value",
    [
        (lambda c: c.valid_email(), "a@b.com\n"),
        (lambda c: c.valid_cep(), "01001-000\n"),
        (lambda c: c.valid_phone_br(), "75912345678\n"),
        (lambda c: c.valid_phone_with_country_code_br(), "+5575912345678\n"),
    ],
)
def test_format_rules_reject_trailing_newline(build, value):
    assert _failures(build, value.rstrip("\n")) == []
    assert len(_failures(build, value)) == 1
