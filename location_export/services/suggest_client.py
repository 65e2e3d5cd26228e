"""Fetch location suggestions from the remote web service."""

from __future__ import annotations

import http.client
import logging
from typing import Optional
from urllib import error as urllib_error
from urllib import parse as urllib_parse
from urllib import request as urllib_request

from ..config import SERVICE_CONFIG
from ..core import FetchError, SuggestQuery
from ..utils import decode_body

logger = logging.getLogger(__name__)

_ASCII = "".join(chr(code) for code in range(128))


def wire_url(url: str) -> str:
    """Percent-encode the UTF-8 bytes of non-ASCII characters only."""

    return urllib_parse.quote(url, safe=_ASCII)


class _HTTPClient:
    """Small wrapper around :func:`urllib.request.urlopen` with headers."""

    _DEFAULT_HEADERS = {
        "User-Agent": "LocationExport/1.0",
        "Accept": "application/json",
    }

    def get_bytes(self, url: str, timeout: Optional[float]) -> bytes:
        request = urllib_request.Request(wire_url(url), headers=self._DEFAULT_HEADERS)
        if timeout is None:
            response = urllib_request.urlopen(request)
        else:
            response = urllib_request.urlopen(request, timeout=timeout)
        with response:
            return response.read()


class SuggestClient:
    """Download the raw suggestion payload for a :class:`SuggestQuery`."""

    def __init__(
        self,
        http_client: Optional[_HTTPClient] = None,
        *,
        timeout: Optional[float] = SERVICE_CONFIG.timeout,
        encoding: str = SERVICE_CONFIG.encoding,
    ):
        self.http_client = http_client or _HTTPClient()
        self.timeout = timeout
        self.encoding = encoding

    def fetch(self, query: SuggestQuery) -> str:
        """Return the response body for ``query`` as text.

        Raises :class:`~location_export.core.FetchError` when the connection
        cannot be established, times out, answers with an HTTP error status or
        the body cannot be read to completion, or when the configured encoding
        is unknown. Nothing is retried. Non-ASCII characters in the city name
        are sent as percent-encoded UTF-8; everything else goes out verbatim.
        """

        url = query.url
        logger.debug("Requesting %s", url)
        try:
            raw = self.http_client.get_bytes(url, self.timeout)
        except urllib_error.HTTPError as exc:
            raise FetchError(
                f"{url} answered with HTTP {exc.code}",
                details={"url": url, "status": exc.code},
            ) from exc
        except urllib_error.URLError as exc:
            raise FetchError(
                f"cannot reach {url}: {exc.reason}", details={"url": url}
            ) from exc
        except (OSError, http.client.HTTPException, ValueError) as exc:
            raise FetchError(f"cannot read {url}: {exc}", details={"url": url}) from exc

        logger.debug("Received %s bytes from %s", len(raw), url)
        try:
            return decode_body(raw, self.encoding)
        except LookupError as exc:
            raise FetchError(
                f"cannot decode response from {url}: {exc}",
                details={"url": url, "encoding": self.encoding},
            ) from exc
