# =============================================================================
# core/api.py  —  Poligraph REST API Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs GET requests against the Poligraph API and returns parsed JSON.
#   Every tool goes through PoligraphClient.get(); nothing else in the
#   codebase talks HTTP.
#
# CONTRACT:
#   - Query params set to None or "" are dropped.  An explicit False is sent
#     as "false" (the upstream treats "absent" and "false" differently).
#   - Non-2xx responses raise ApiError carrying the status and body text.
#   - No retries, no timeout, no caching.  A failed call fails the tool call.
#
# ONE CLIENT PER CALL:
#   Each get() opens its own httpx.AsyncClient inside "async with".  If the
#   caller's task is cancelled (the MCP transport hung up), the connection
#   is closed on the way out.
# =============================================================================

import logging
from enum import Enum
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx

from core.config import get_settings

logger = logging.getLogger(__name__)

ParamValue = Union[str, int, float, bool, None]


class ApiError(Exception):
    """The upstream API answered with a non-success HTTP status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def encode_slug(slug: str) -> str:
    """Percent-encode a slug for use as a single path segment."""
    return quote(slug, safe="")


def clean_params(params: Optional[Mapping[str, ParamValue]]) -> dict[str, str]:
    """Drop absent values and stringify the rest the way the API expects."""
    cleaned: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            cleaned[key] = str(value.value)
        else:
            cleaned[key] = str(value)
    return cleaned


class PoligraphClient:
    """Async read-only client for the Poligraph API.

    Holds configuration only (base URL, headers, optional transport), so a
    single instance is safe to share between concurrent tool calls.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.transport = transport
        self.headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or settings.user_agent,
        }

    async def get(self, path: str, params: Optional[Mapping[str, ParamValue]] = None) -> Any:
        """GET ``path`` (relative to the base URL) and return the JSON body.

        Args:
            path: API path, e.g. "/api/politiques".  Slugs must already be
                  encoded with encode_slug().
            params: Query parameters; None and "" values are omitted.

        Raises:
            ApiError: the API answered with a non-2xx status.
            httpx.HTTPError: the request itself failed (DNS, connection...).
        """
        query = clean_params(params)
        logger.debug("GET %s%s params=%s", self.base_url, path, query)

        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            transport=self.transport,
            timeout=None,
        ) as client:
            response = await client.get(path, params=query)

        if not response.is_success:
            try:
                body = response.text
            except (UnicodeDecodeError, LookupError):
                body = "Unknown error"
            logger.warning("Upstream %s returned HTTP %s", path, response.status_code)
            raise ApiError(response.status_code, f"API {response.status_code}: {body}")

        return response.json()
