"""Concurrent per-login lookups that tolerate individual failures."""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from .models import Result, UserSummary
from .settings import MAX_WORKERS

logger = logging.getLogger(__name__)


def fetch_each(
    lookup: Callable[[str], Result[UserSummary]],
    logins: Sequence[str],
    max_workers: int = MAX_WORKERS,
) -> list[Result[UserSummary]]:
    """Run ``lookup`` for every login concurrently.

    Results are index-aligned with ``logins``. Waits for every lookup to settle;
    one failure never stops the others.
    """
    if not logins:
        return []

    def process_one(login: str) -> Result[UserSummary]:
        result = lookup(login)
        if not result.ok:
            logger.warning("Lookup failed for %r: %s (%s)", login, result.error.kind.value, result.error.message)
        return result

    with ThreadPoolExecutor(max_workers=min(max_workers, len(logins))) as executor:
        return list(executor.map(process_one, logins))


def fetch_many(
    lookup: Callable[[str], Result[UserSummary]],
    logins: Sequence[str],
    max_workers: int = MAX_WORKERS,
) -> list[UserSummary | None]:
    """Like fetch_each, but failed entries are None and the cause is dropped."""
    return [result.value if result.ok else None for result in fetch_each(lookup, logins, max_workers)]
