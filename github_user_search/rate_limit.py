"""Rate-limit state from the /rate_limit endpoint and from response headers."""

from collections.abc import Mapping
from datetime import datetime, timezone

from .errors import MalformedResponseError
from .models import RateLimitStatus

RATE_LIMIT_PATH = "/rate_limit"


def _reset_time(epoch_seconds: int) -> datetime:
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)


def _status(limit, remaining, reset) -> RateLimitStatus:
    for name, value in (("limit", limit), ("remaining", remaining), ("reset", reset)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise MalformedResponseError(f"rate limit field {name!r} is not a non-negative integer: {value!r}")
    if remaining > limit:
        raise MalformedResponseError(f"rate limit remaining ({remaining}) exceeds limit ({limit})")
    return RateLimitStatus(limit=limit, remaining=remaining, reset_at=_reset_time(reset))


def parse_rate_limit(body) -> RateLimitStatus:
    """Read resources.core from a /rate_limit response body."""
    if not isinstance(body, dict):
        raise MalformedResponseError("rate limit response is not an object")
    resources = body.get("resources")
    core = resources.get("core") if isinstance(resources, dict) else None
    if not isinstance(core, dict):
        raise MalformedResponseError("rate limit response has no resources.core")
    return _status(core.get("limit"), core.get("remaining"), core.get("reset"))


def rate_limit_from_headers(headers: Mapping[str, str]) -> RateLimitStatus | None:
    """Best-effort extraction of x-ratelimit-* headers. None if absent or unparsable."""
    lowered = {k.lower(): v for k, v in headers.items()}
    try:
        limit = int(lowered["x-ratelimit-limit"])
        remaining = int(lowered["x-ratelimit-remaining"])
        reset = int(lowered["x-ratelimit-reset"])
        return _status(limit, remaining, reset)
    except (KeyError, ValueError, TypeError, MalformedResponseError):
        return None
