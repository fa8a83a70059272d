"""Closed error taxonomy surfaced to callers, plus the internal failures behind it."""

from dataclasses import dataclass
from enum import Enum

from .models import RateLimitStatus


class ErrorKind(str, Enum):
    EMPTY_QUERY = "EmptyQuery"
    INVALID_ARGUMENT = "InvalidArgument"
    NETWORK_UNREACHABLE = "NetworkUnreachable"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    RATE_LIMIT_EXCEEDED = "RateLimitExceeded"
    NOT_FOUND = "NotFound"
    INVALID_QUERY = "InvalidQuery"
    PROVIDER_ERROR = "ProviderError"
    MALFORMED_RESPONSE = "MalformedResponse"


@dataclass(frozen=True)
class ClientError:
    """A typed failure returned to the caller.

    ``status`` is set for errors derived from an HTTP response. ``rate_limit``
    is optional diagnostic data attached to RATE_LIMIT_EXCEEDED when the
    response headers carried quota information.
    """

    kind: ErrorKind
    message: str
    status: int | None = None
    rate_limit: RateLimitStatus | None = None

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value, "message": self.message}
        if self.status is not None:
            data["status"] = self.status
        if self.rate_limit is not None:
            data["rate_limit"] = {
                "limit": self.rate_limit.limit,
                "remaining": self.rate_limit.remaining,
                "reset_at": self.rate_limit.reset_at.isoformat(),
            }
        return data


class TransportFailure(Exception):
    """No HTTP response was received (timeout, DNS, refused connection)."""


class MalformedResponseError(Exception):
    """A response body did not have the expected shape."""


class InvalidArgumentError(ValueError):
    """Caller-supplied input rejected before any network call."""


DEFAULT_MESSAGES = {
    ErrorKind.EMPTY_QUERY: "At least one of login, location or minimum repositories is required",
    ErrorKind.INVALID_ARGUMENT: "Invalid argument",
    ErrorKind.NETWORK_UNREACHABLE: "Could not reach the GitHub API",
    ErrorKind.AUTHENTICATION_FAILED: "Authentication failed",
    ErrorKind.RATE_LIMIT_EXCEEDED: "API rate limit exceeded",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.INVALID_QUERY: "The search query was rejected",
    ErrorKind.PROVIDER_ERROR: "GitHub API error",
    ErrorKind.MALFORMED_RESPONSE: "Unexpected response from the GitHub API",
}


def error(kind: ErrorKind, message: str | None = None, **kwargs) -> ClientError:
    """Build a ClientError, falling back to the stable default message for its kind."""
    return ClientError(kind=kind, message=message or DEFAULT_MESSAGES[kind], **kwargs)
