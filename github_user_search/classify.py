"""Map transport and HTTP failures onto ErrorKind.

Every public operation routes its failures through ``classify`` so the mapping
is identical for search, single-user lookup and rate-limit checks.
"""

from .errors import DEFAULT_MESSAGES, ClientError, ErrorKind, MalformedResponseError, TransportFailure, error
from .models import ApiResponse
from .rate_limit import rate_limit_from_headers

_STATUS_KINDS = {
    401: ErrorKind.AUTHENTICATION_FAILED,
    403: ErrorKind.RATE_LIMIT_EXCEEDED,
    404: ErrorKind.NOT_FOUND,
    422: ErrorKind.INVALID_QUERY,
}


def _provider_message(body) -> str | None:
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return None


def classify(failure) -> ClientError:
    """Classify a TransportFailure, MalformedResponseError or non-2xx ApiResponse."""
    if isinstance(failure, TransportFailure):
        return error(ErrorKind.NETWORK_UNREACHABLE, f"{DEFAULT_MESSAGES[ErrorKind.NETWORK_UNREACHABLE]}: {failure}")
    if isinstance(failure, MalformedResponseError):
        return error(ErrorKind.MALFORMED_RESPONSE, f"{DEFAULT_MESSAGES[ErrorKind.MALFORMED_RESPONSE]}: {failure}")
    if not isinstance(failure, ApiResponse):
        raise TypeError(f"cannot classify {type(failure).__name__}")

    status = failure.status
    message = _provider_message(failure.body)
    kind = _STATUS_KINDS.get(status)
    if kind is ErrorKind.RATE_LIMIT_EXCEEDED:
        return error(kind, message, status=status, rate_limit=rate_limit_from_headers(failure.headers))
    if kind is not None:
        return error(kind, message, status=status)
    return error(
        ErrorKind.PROVIDER_ERROR,
        f"{DEFAULT_MESSAGES[ErrorKind.PROVIDER_ERROR]} {status}" + (f": {message}" if message else ""),
        status=status,
    )
