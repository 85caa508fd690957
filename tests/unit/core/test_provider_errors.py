"""Tests for the provider error hierarchy."""

import pytest

from oaiprovider.core.errors import (
    EmptyResponseError,
    JsonParseError,
    ProviderError,
    ResponseParseError,
    SerializationError,
)


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("error_class", "code"),
    [
        (ProviderError, "PROVIDER_ERROR"),
        (SerializationError, "SERIALIZATION_ERROR"),
        (JsonParseError, "JSON_PARSE_ERROR"),
        (ResponseParseError, "PARSE_ERROR"),
        (EmptyResponseError, "EMPTY_RESPONSE"),
    ],
)
def test_codes(error_class: type[ProviderError], code: str) -> None:
    error = error_class("boom")

    assert isinstance(error, ProviderError)
    assert error.code == code
    assert error.to_dict() == {"message": "boom", "code": code}
    assert str(error) == "boom"


def test_cause_is_chained() -> None:
    cause = ValueError("bad value")

    error = JsonParseError("Failed to parse messages JSON", cause=cause)

    assert error.cause is cause
    assert error.__cause__ is cause


def test_without_cause() -> None:
    error = EmptyResponseError("No choices in response")

    assert error.cause is None
    assert error.__cause__ is None


def test_serialization_error_keeps_data() -> None:
    body = {"temperature": float("nan")}

    error = SerializationError("Failed to serialize request", data=body)

    assert error.data is body
    assert error.code == "SERIALIZATION_ERROR"
