"""Client for the currencyapi.com v3 REST API.

This module exposes the :class:`Currencyapi` class, a thin wrapper over the
`currencyapi <https://currencyapi.com>`_ service.  A personal API key is
required; it is passed once when the client is created and attached to every
request as the ``apikey`` query parameter.

The following endpoints are available:

* ``status`` - quota and account information.
* ``currencies`` - the list of supported currencies.
* ``latest`` - the most recent exchange rates.
* ``historical`` - exchange rates for a given day.
* ``convert`` - convert a value into one or more currencies.
* ``range`` - exchange rates over a period of time.

Every method returns a :class:`~currencyapi.models.Response` whose ``data``
and ``meta`` attributes hold the decoded JSON exactly as the service sent it.
Input values are not validated locally; if the service rejects them the
error payload does not carry a ``data`` object and a
:class:`~currencyapi.errors.ResponseParsingError` is raised with the raw body
attached.

>>> from currencyapi import Currencyapi
>>> api = Currencyapi("YOUR-API-KEY")
>>> api.latest("USD", "EUR,GBP").data["EUR"]["value"]  # doctest: +SKIP
0.92
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

import requests
from requests.exceptions import InvalidHeader, RequestException
from requests.utils import check_header_validity

from .__version__ import __title__, __version__
from .errors import ClientConstructionError, RequestError, ResponseParsingError
from .models import Response, Settings, Timeout
from .urls import BASE_URL, append_query_params, construct_base_url

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"{__title__}-python/{__version__}"
API_KEY_ENV_VAR = "CURRENCYAPI_KEY"


class Currencyapi:
    """Entry point to the currencyapi service.

    Parameters
    ----------
    api_key : str
        Your currencyapi API key.  Must not be empty.
    user_agent : str, optional
        Value of the ``User-Agent`` header.  Defaults to
        ``"currencyapi-python/<version>"``.
    timeout : float or tuple, optional
        Timeout passed directly to :meth:`requests.Session.get`.  ``None``
        (the default) leaves the transport's behaviour unchanged.
    session : requests.Session, optional
        Session to send requests through.  A new one is created when omitted.
        A session supplied by the caller is not closed by :meth:`close`.
    base_url : str, optional
        Root of the API.  Defaults to ``"https://api.currencyapi.com/v3/"``.

    Raises
    ------
    ClientConstructionError
        If the API key is empty or a header value is not valid.

    Notes
    -----
    Each request method performs exactly one HTTP round trip.  Nothing is
    cached and failed requests are not retried.

    :class:`requests.Session` is not guaranteed to be thread safe, so use
    one client per thread when issuing requests concurrently.
    """

    def __init__(
        self,
        api_key: str,
        *,
        user_agent: Optional[str] = None,
        timeout: Optional[Timeout] = None,
        session: Optional[requests.Session] = None,
        base_url: str = BASE_URL,
    ) -> None:
        if not api_key:
            raise ClientConstructionError("An API key is required")
        self.settings = Settings(
            api_key=api_key,
            user_agent=user_agent or DEFAULT_USER_AGENT,
            timeout=timeout,
        )
        self.base_url = base_url
        self._headers = self._build_headers(self.settings)
        self._owns_session = session is None
        self._session = session or requests.Session()

    @classmethod
    def from_env(cls, var: str = API_KEY_ENV_VAR, **kwargs: Any) -> "Currencyapi":
        """Create a client using the API key stored in the environment.

        Parameters
        ----------
        var : str, optional
            Name of the environment variable.  Defaults to
            ``"CURRENCYAPI_KEY"``.
        **kwargs
            Forwarded to :class:`Currencyapi`.
        """
        api_key = os.environ.get(var)
        if not api_key:
            raise ClientConstructionError(f"Environment variable {var} is not set")
        return cls(api_key, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self.settings!r})"

    def __enter__(self) -> "Currencyapi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the connection pool of the session created by this client."""
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def status(self) -> Response:
        """Return quota and account information for the API key."""
        return self._get("status")

    def currencies(self) -> Response:
        """Return every currency supported by the service."""
        return self._get("currencies")

    def latest(self, base_currency: str, currencies: str) -> Response:
        """Fetch the latest exchange rates.

        Parameters
        ----------
        base_currency : str
            Currency code the rates are expressed against, e.g. ``"USD"``.
        currencies : str
            Comma separated list of target currency codes, e.g. ``"EUR,GBP"``.
        """
        return self._get(
            "latest",
            [("base_currency", base_currency), ("currencies", currencies)],
        )

    def historical(self, base_currency: str, date: str, currencies: str) -> Response:
        """Fetch the exchange rates of a past day.

        Parameters
        ----------
        base_currency : str
            Currency code the rates are expressed against.
        date : str
            Day to look up in ``YYYY-MM-DD`` format.
        currencies : str
            Comma separated list of target currency codes.
        """
        return self._get(
            "historical",
            [("base_currency", base_currency), ("date", date), ("currencies", currencies)],
        )

    def convert(
        self,
        base_currency: str,
        date: str,
        value: Union[int, float, Decimal],
        currencies: str,
    ) -> Response:
        """Convert ``value`` from ``base_currency`` into ``currencies``.

        Parameters
        ----------
        base_currency : str
            Currency code of ``value``.
        date : str
            Day whose rates are used for the conversion, ``YYYY-MM-DD``.
        value : int, float or Decimal
            Amount to convert.  It is sent as ``str(value)``.
        currencies : str
            Comma separated list of target currency codes.
        """
        return self._get(
            "convert",
            [
                ("base_currency", base_currency),
                ("date", date),
                ("value", value),
                ("currencies", currencies),
            ],
        )

    def range(
        self,
        base_currency: str,
        datetime_start: str,
        datetime_end: str,
        currencies: str,
        accuracy: str,
    ) -> Response:
        """Fetch exchange rates over a period of time.

        Parameters
        ----------
        base_currency : str
            Currency code the rates are expressed against.
        datetime_start : str
            Start of the period as an ISO 8601 datetime.
        datetime_end : str
            End of the period as an ISO 8601 datetime.
        currencies : str
            Comma separated list of target currency codes.
        accuracy : str
            Granularity of the returned series (``"day"``, ``"hour"``, ...).
            Passed through verbatim.
        """
        return self._get(
            "range",
            [
                ("base_currency", base_currency),
                ("datetime_start", datetime_start),
                ("datetime_end", datetime_end),
                ("accuracy", accuracy),
                ("currencies", currencies),
            ],
        )

    # ------------------------------------------------------------------
    # Internal helper methods
    # ------------------------------------------------------------------
    @staticmethod
    def _build_headers(settings: Settings) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": settings.user_agent,
        }
        for header in headers.items():
            try:
                check_header_validity(header)
            except InvalidHeader as exc:
                raise ClientConstructionError(f"Invalid header {header[0]}: {exc}") from exc
        return headers

    def _redact(self, text: str) -> str:
        # Transport messages can echo the full URL, key included.
        api_key = self.settings.api_key
        for form in (quote_plus(api_key), api_key):
            text = text.replace(form, "***")
        return text

    def _get(self, path: str, params: Sequence[Tuple[str, Any]] = ()) -> Response:
        """Send a GET request to ``path`` and decode the body.

        Raises
        ------
        UrlConstructionError
            If the base URL is not a valid absolute URL.
        RequestError
            If the request fails at the transport level.
        ResponseParsingError
            If the body is not a JSON object with a ``data`` object.
        """
        url = construct_base_url(self.settings.api_key, path, base_url=self.base_url)
        url = append_query_params(url, params)
        logger.debug("GET /%s params=%s", path, list(params))

        try:
            response = self._session.get(
                url, headers=self._headers, timeout=self.settings.timeout
            )
            body = response.text
        except RequestException as exc:
            reason = self._redact(str(exc))
            logger.warning("Request to currencyapi /%s failed: %s", path, reason)
            raise RequestError(f"Request to /{path} failed: {reason}", source=exc) from exc

        try:
            return Response.from_json(body)
        except ResponseParsingError:
            logger.warning(
                "Unexpected response from currencyapi /%s (HTTP %s): %s",
                path,
                response.status_code,
                body[:200],
            )
            raise
