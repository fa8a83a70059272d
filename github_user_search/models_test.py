"""Unit tests for data models."""

from datetime import datetime, timezone

import pytest

from .models import ApiResponse, RateLimitStatus, Result, SearchResultPage


def describe_SearchResultPage():
    @pytest.mark.parametrize(
        "total, page, per_page, expected",
        [
            (0, 1, 10, False),
            (10, 1, 10, False),
            (11, 1, 10, True),
            (25, 3, 10, False),
            (5000, 10, 100, False),
            (5000, 9, 100, True),
        ],
    )
    def it_knows_whether_a_next_page_exists(total, page, per_page, expected):
        result_page = SearchResultPage(items=(), total_count=total, page=page, per_page=per_page)

        assert result_page.has_next_page is expected


def describe_RateLimitStatus():
    def it_counts_seconds_until_reset():
        status = RateLimitStatus(limit=60, remaining=0, reset_at=datetime.fromtimestamp(1000, tz=timezone.utc))

        assert status.seconds_until_reset(now=940) == 60

    def it_never_goes_negative():
        status = RateLimitStatus(limit=60, remaining=60, reset_at=datetime.fromtimestamp(1000, tz=timezone.utc))

        assert status.seconds_until_reset(now=2000) == 0


def describe_ApiResponse():
    @pytest.mark.parametrize("status, expected", [(200, True), (204, True), (301, False), (404, False)])
    def it_reports_success(status, expected):
        assert ApiResponse(status=status, body=None).is_success is expected

    def it_defaults_headers_to_empty():
        assert ApiResponse(status=200, body={}).headers == {}


def describe_Result():
    def it_is_ok_with_value():
        result = Result.success(3)

        assert result.ok
        assert result.value == 3

    def it_is_not_ok_with_error():
        result = Result.failure(object())

        assert not result.ok
        assert result.value is None
