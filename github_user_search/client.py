"""GitHub user search client.

Every public method returns a Result; failures are ClientError values routed
through ``classify``, never exceptions.
"""

import logging
import re
from collections.abc import Callable, Sequence
from urllib.parse import quote

import httpx

from . import bulk
from .classify import classify
from .errors import ErrorKind, MalformedResponseError, TransportFailure, error
from .models import ApiResponse, RateLimitStatus, Result, SearchCriteria, SearchResultPage, UserSummary
from .normalize import normalize_search_page, normalize_user
from .query import build_query
from .rate_limit import RATE_LIMIT_PATH, parse_rate_limit
from .settings import ClientConfig
from .transport import Transport

logger = logging.getLogger(__name__)

SEARCH_USERS_PATH = "/search/users"

# Alphanumerics and single inner hyphens, at most 39 characters
_LOGIN_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}")


class UserSearchClient:
    """Search GitHub users, look them up individually or in bulk, and check quota."""

    def __init__(self, config: ClientConfig | None = None, transport: httpx.BaseTransport | None = None):
        self.config = config or ClientConfig()
        self._transport = Transport(self.config, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self._transport.close()

    def _request(self, path: str, query: dict[str, str] | None, parse: Callable) -> Result:
        try:
            resp = self._transport.get(path, query)
        except TransportFailure as e:
            logger.warning("GET %s failed: %s", path, e)
            return Result.failure(classify(e))
        except MalformedResponseError as e:
            logger.warning("Malformed response from %s: %s", path, e)
            return Result.failure(classify(e))

        if not resp.is_success:
            err = classify(resp)
            if err.kind is ErrorKind.RATE_LIMIT_EXCEEDED:
                logger.warning("Rate limited on %s: %s", path, err.message)
            return Result.failure(err)

        try:
            return Result.success(parse(resp))
        except MalformedResponseError as e:
            logger.warning("Malformed response from %s: %s", path, e)
            return Result.failure(classify(e))

    def search_users(self, criteria: SearchCriteria) -> Result[SearchResultPage]:
        """Run one page of a user search."""
        built = build_query(criteria)
        if not built.ok:
            return Result.failure(built.error)
        query = built.value

        def parse(resp: ApiResponse) -> SearchResultPage:
            return normalize_search_page(resp.body, query.page, query.per_page)

        return self._request(SEARCH_USERS_PATH, query.params(), parse)

    def get_user(self, login: str) -> Result[UserSummary]:
        """Fetch one user's full profile."""
        if not isinstance(login, str) or not _LOGIN_RE.fullmatch(login):
            return Result.failure(error(ErrorKind.INVALID_ARGUMENT, f"Invalid GitHub login: {login!r}"))
        return self._request(f"/users/{quote(login, safe='')}", None, lambda resp: normalize_user(resp.body))

    def check_rate_limit(self) -> Result[RateLimitStatus]:
        """Report the core API quota. Does not count against it."""
        return self._request(RATE_LIMIT_PATH, None, lambda resp: parse_rate_limit(resp.body))

    def fetch_each(self, logins: Sequence[str]) -> list[Result[UserSummary]]:
        """Look up every login concurrently, keeping per-entry errors."""
        return bulk.fetch_each(self.get_user, logins, max_workers=self.config.max_workers)

    def fetch_many(self, logins: Sequence[str]) -> list[UserSummary | None]:
        """Look up every login concurrently; failed entries are None."""
        return bulk.fetch_many(self.get_user, logins, max_workers=self.config.max_workers)
