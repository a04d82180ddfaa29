"""Request URL construction for the currencyapi v3 endpoints."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

from .errors import UrlConstructionError

BASE_URL = "https://api.currencyapi.com/v3/"


def construct_base_url(
    api_key: str,
    path: Optional[str] = None,
    base_url: str = BASE_URL,
) -> str:
    """Return ``base_url`` extended by ``path`` with the ``apikey`` attached.

    The ``/v3/`` prefix of the base is always kept; ``path`` is appended after
    it with exactly one slash in between, so ``"status"`` and ``"/status"``
    give the same result.  Any query already present on ``base_url`` is
    dropped and replaced by ``apikey=<api_key>``.

    >>> construct_base_url("abc", "status")
    'https://api.currencyapi.com/v3/status?apikey=abc'
    """
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        raise UrlConstructionError(f"Invalid base URL {base_url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlConstructionError(f"Invalid base URL {base_url!r}")

    url_path = parts.path or "/"
    if path is not None:
        url_path = f"{url_path.rstrip('/')}/{path.lstrip('/')}"

    query = urlencode([("apikey", api_key)])
    return urlunsplit((parts.scheme, parts.netloc, url_path, query, ""))


def append_query_params(url: str, params: Iterable[Tuple[str, Any]]) -> str:
    """Append ``params`` to the query of ``url`` in the order given."""
    parts = urlsplit(url)
    extra = urlencode([(name, str(value)) for name, value in params])
    if not extra:
        return url
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
