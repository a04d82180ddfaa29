"""Tests for decoding response bodies and the client settings."""

import pytest

from currencyapi.errors import ResponseParsingError
from currencyapi.models import Response, Settings


def test_decodes_data_and_meta():
    response = Response.from_json('{"data": {"USD": 1}, "meta": {"last_updated_at": "x"}}')
    assert response.data == {"USD": 1}
    assert response.meta == {"last_updated_at": "x"}


def test_meta_is_optional():
    response = Response.from_json('{"data": {}}')
    assert response.data == {}
    assert response.meta is None


def test_nested_values_are_not_validated():
    # the API sometimes sends false where a number is expected
    response = Response.from_json('{"data": {"EUR": {"code": "EUR", "value": false}}}')
    assert response.data["EUR"]["value"] is False


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "",
        "[1, 2]",
        '{"message": "Invalid authentication credentials"}',
        '{"data": [1]}',
        '{"data": {}, "meta": "x"}',
        pytest.param("[" * 200000, id="deeply-nested"),
    ],
)
def test_unexpected_bodies_raise_with_raw_text(body):
    with pytest.raises(ResponseParsingError) as exc_info:
        Response.from_json(body)
    assert exc_info.value.body == body


def test_settings_hide_api_key():
    settings = Settings(api_key="secret", user_agent="ua")
    assert "secret" not in repr(settings)
    with pytest.raises(AttributeError):
        settings.api_key = "other"
