"""Top level package for the currencyapi client.

Importing from this module exposes the :class:`Currencyapi` class and the
exceptions it raises directly for convenience:

>>> from currencyapi import Currencyapi
>>> api = Currencyapi("YOUR-API-KEY")
>>> rates = api.latest("USD", "EUR,GBP")  # doctest: +SKIP

The client is implemented in :mod:`.api`.
"""

import logging

from .__version__ import __version__  # noqa: F401
from .api import Currencyapi  # noqa: F401
from .errors import (  # noqa: F401
    ClientConstructionError,
    CurrencyapiError,
    RequestError,
    ResponseParsingError,
    UrlConstructionError,
)
from .models import Response, Settings  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Currencyapi",
    "CurrencyapiError",
    "ClientConstructionError",
    "UrlConstructionError",
    "RequestError",
    "ResponseParsingError",
    "Response",
    "Settings",
]
