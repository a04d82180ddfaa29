"""Plain data containers shared by the client."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .errors import ResponseParsingError

Timeout = Union[float, Tuple[float, float]]


@dataclass(frozen=True)
class Settings:
    """Immutable per-client settings.

    The API key is excluded from ``repr`` so it does not leak into logs or
    tracebacks.
    """

    api_key: str = field(repr=False)
    user_agent: str
    timeout: Optional[Timeout] = None


@dataclass
class Response:
    """Decoded body of a currencyapi response.

    Only the two top level keys are interpreted.  Everything below ``data``
    and ``meta`` is kept exactly as the API returned it, because the service
    is known to send inconsistent types for some fields (e.g. ``false`` where
    a number is expected).
    """

    data: Dict[str, Any]
    meta: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, body: str) -> "Response":
        """Decode ``body`` into a :class:`Response`.

        Raises
        ------
        ResponseParsingError
            If ``body`` is not valid JSON, is not an object, lacks an object
            ``data`` key, or carries a ``meta`` value that is not an object.
        """
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as exc:
            raise ResponseParsingError(body, f"invalid JSON ({exc})") from exc

        if not isinstance(payload, dict):
            raise ResponseParsingError(body, "top level value is not an object")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise ResponseParsingError(body, "missing or non-object 'data'")
        meta = payload.get("meta")
        if meta is not None and not isinstance(meta, dict):
            raise ResponseParsingError(body, "'meta' is not an object")
        return cls(data=data, meta=meta)
