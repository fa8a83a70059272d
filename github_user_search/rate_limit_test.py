"""Unit tests for rate-limit parsing."""

import time
from datetime import datetime, timezone

import pytest

from .errors import MalformedResponseError
from .rate_limit import parse_rate_limit, rate_limit_from_headers


def _body(limit=5000, remaining=4999, reset=1700000000):
    return {
        "resources": {
            "core": {"limit": limit, "remaining": remaining, "reset": reset, "used": limit - remaining},
            "search": {"limit": 30, "remaining": 30, "reset": reset},
        },
        "rate": {"limit": limit, "remaining": remaining, "reset": reset},
    }


def describe_parse_rate_limit():
    def it_reads_core_resource():
        status = parse_rate_limit(_body())

        assert status.limit == 5000
        assert status.remaining == 4999

    def it_converts_reset_to_absolute_utc_time():
        status = parse_rate_limit(_body(reset=1700000000))

        assert status.reset_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def it_returns_future_reset_for_future_epoch():
        reset = int(time.time()) + 3600

        status = parse_rate_limit(_body(reset=reset))

        assert status.reset_at > datetime.now(timezone.utc)
        assert 3500 < status.seconds_until_reset() <= 3600

    def it_rejects_remaining_above_limit():
        with pytest.raises(MalformedResponseError, match="exceeds"):
            parse_rate_limit(_body(limit=60, remaining=61))

    @pytest.mark.parametrize("field", ["limit", "remaining", "reset"])
    def it_rejects_non_integer_fields(field):
        body = _body()
        body["resources"]["core"][field] = "lots"

        with pytest.raises(MalformedResponseError, match=field):
            parse_rate_limit(body)

    @pytest.mark.parametrize("body", [None, [], {}, {"resources": None}, {"resources": {"search": {}}}])
    def it_rejects_missing_core(body):
        with pytest.raises(MalformedResponseError):
            parse_rate_limit(body)


def describe_rate_limit_from_headers():
    def it_reads_headers_case_insensitively():
        status = rate_limit_from_headers(
            {"X-RateLimit-Limit": "60", "X-RateLimit-Remaining": "12", "X-RateLimit-Reset": "1700000000"}
        )

        assert status.limit == 60
        assert status.remaining == 12
        assert status.reset_at.tzinfo == timezone.utc

    def it_returns_none_when_absent():
        assert rate_limit_from_headers({"content-type": "application/json"}) is None

    def it_returns_none_when_partial():
        assert rate_limit_from_headers({"x-ratelimit-limit": "60"}) is None

    def it_returns_none_when_unparsable():
        headers = {"x-ratelimit-limit": "sixty", "x-ratelimit-remaining": "0", "x-ratelimit-reset": "1"}

        assert rate_limit_from_headers(headers) is None

    def it_returns_none_when_inconsistent():
        headers = {"x-ratelimit-limit": "10", "x-ratelimit-remaining": "20", "x-ratelimit-reset": "1"}

        assert rate_limit_from_headers(headers) is None
