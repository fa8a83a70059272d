"""Thin httpx wrapper: base URL, fixed headers, bounded timeout, one round trip per call."""

import logging
import time

import httpx

from .errors import MalformedResponseError, TransportFailure
from .models import ApiResponse
from .settings import ClientConfig

logger = logging.getLogger(__name__)


class Transport:
    """Issues GET requests against the configured API root.

    Never interprets status codes and never retries. Any HTTP response comes
    back as an ApiResponse; no response at all raises TransportFailure, and a
    body whose content encoding cannot be decoded raises MalformedResponseError.
    """

    def __init__(self, config: ClientConfig, transport: httpx.BaseTransport | None = None):
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            headers=config.headers(),
            timeout=config.timeout_ms / 1000,
            transport=transport,
        )

    def get(self, path: str, query: dict[str, str] | None = None) -> ApiResponse:
        path = path if path.startswith("/") else f"/{path}"
        t0 = time.time()
        try:
            resp = self._client.get(path, params=query)
        except httpx.TimeoutException as e:
            raise TransportFailure(f"timed out after {self.config.timeout_ms}ms") from e
        except httpx.DecodingError as e:
            # A response arrived but its content encoding could not be decoded
            raise MalformedResponseError(f"undecodable body for {path}: {e}") from e
        except httpx.RequestError as e:
            raise TransportFailure(f"{type(e).__name__}: {e}") from e

        logger.debug("GET %s -> %s (%.0fms)", path, resp.status_code, (time.time() - t0) * 1000)

        try:
            body = resp.json() if resp.content else None
        except ValueError:
            body = None
        return ApiResponse(status=resp.status_code, body=body, headers=dict(resp.headers))

    def close(self):
        self._client.close()
