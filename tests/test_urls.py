"""Tests for request URL construction.

These cover how the path is joined onto the versioned base address and the
order in which query parameters end up in the final URL.
"""

from urllib.parse import parse_qsl, urlsplit

import pytest

from currencyapi.errors import UrlConstructionError
from currencyapi.urls import BASE_URL, append_query_params, construct_base_url


def test_base_url_without_path_keeps_v3_prefix():
    url = urlsplit(construct_base_url("abc"))
    assert url.path == "/v3/"
    assert url.query == "apikey=abc"


@pytest.mark.parametrize("path", ["test/path", "/test/path"])
def test_base_url_with_path(path):
    url = urlsplit(construct_base_url("abc", path))
    assert url.path == "/v3/test/path"
    assert url.query == "apikey=abc"


def test_single_segment_path():
    assert construct_base_url("k", "status") == "https://api.currencyapi.com/v3/status?apikey=k"


def test_url_survives_reparsing():
    built = construct_base_url("k", "p")
    parsed = urlsplit(built)
    assert parsed.path == "/v3/p"
    assert parse_qsl(parsed.query) == [("apikey", "k")]
    assert urlsplit(parsed.geturl()) == parsed


def test_base_url_without_trailing_slash():
    url = construct_base_url("k", "latest", base_url="https://example.com/v3")
    assert url == "https://example.com/v3/latest?apikey=k"


@pytest.mark.parametrize("base_url", ["not a url", "/v3/", "ftp://example.com/v3/", "http://[::1/"])
def test_invalid_base_url(base_url):
    with pytest.raises(UrlConstructionError):
        construct_base_url("k", "status", base_url=base_url)


def test_query_params_keep_call_order_after_apikey():
    url = construct_base_url("abc", "range")
    url = append_query_params(
        url,
        [
            ("base_currency", "USD"),
            ("datetime_start", "a"),
            ("datetime_end", "b"),
            ("accuracy", "day"),
        ],
    )
    url = append_query_params(url, [("currencies", "EUR")])
    names = [name for name, _ in parse_qsl(urlsplit(url).query)]
    assert names == [
        "apikey",
        "base_currency",
        "datetime_start",
        "datetime_end",
        "accuracy",
        "currencies",
    ]


def test_query_values_are_percent_encoded():
    url = append_query_params(construct_base_url("abc", "latest"), [("currencies", "EUR,GBP")])
    assert url.endswith("apikey=abc&currencies=EUR%2CGBP")


def test_empty_params_leave_url_untouched():
    url = construct_base_url("abc", "status")
    assert append_query_params(url, []) == url


def test_default_base():
    assert BASE_URL == "https://api.currencyapi.com/v3/"
