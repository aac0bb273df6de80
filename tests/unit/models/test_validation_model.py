import pytest
from pydantic import TypeAdapter, ValidationError

from exercise_naming.models.validation import Invalid, Valid, ValidationResult

result_adapter: TypeAdapter = TypeAdapter(ValidationResult)


def test_valid_results_are_equal():
    assert Valid() == Valid()
    assert Valid().is_valid is True


def test_invalid_results_equal_when_reason_and_suggestion_match():
    assert Invalid(reason="Too short") == Invalid(reason="Too short", suggestion=None)
    assert Invalid(reason="Too long", suggestion="Abc") == Invalid(
        reason="Too long", suggestion="Abc"
    )


def test_invalid_results_differ_on_payload():
    assert Invalid(reason="Too long", suggestion="Abc") != Invalid(
        reason="Too long", suggestion="Abd"
    )
    assert Invalid(reason="Too long") != Invalid(reason="Too short")


def test_valid_is_never_equal_to_invalid():
    assert Valid() != Invalid(reason="Too short")
    assert Invalid(reason="Too short").is_valid is False


def test_results_are_immutable():
    result = Invalid(reason="Too short")

    with pytest.raises(ValidationError):
        result.reason = "Fine"  # type: ignore[misc]


def test_invalid_requires_reason():
    with pytest.raises(ValidationError):
        Invalid()  # type: ignore[call-arg]


def test_results_serialize_with_status_tag():
    assert Valid().model_dump() == {"status": "valid"}
    assert Invalid(reason="Nope", suggestion="Yes").model_dump() == {
        "status": "invalid",
        "reason": "Nope",
        "suggestion": "Yes",
    }


def test_result_union_parses_by_status():
    assert result_adapter.validate_python({"status": "valid"}) == Valid()
    assert result_adapter.validate_python(
        {"status": "invalid", "reason": "Nope"}
    ) == Invalid(reason="Nope")

    with pytest.raises(ValidationError):
        result_adapter.validate_python({"status": "maybe"})
