"""Unit tests for the error taxonomy."""

import pytest

from .errors import DEFAULT_MESSAGES, ErrorKind, error


def describe_error():
    @pytest.mark.parametrize("kind", list(ErrorKind))
    def it_has_a_default_message_for_every_kind(kind):
        assert error(kind).message == DEFAULT_MESSAGES[kind]

    def it_uses_default_message_for_kind():
        assert error(ErrorKind.EMPTY_QUERY).message.startswith("At least one of")

    def it_keeps_explicit_message():
        assert error(ErrorKind.INVALID_ARGUMENT, "page must be >= 1").message == "page must be >= 1"

    def it_passes_status_through():
        assert error(ErrorKind.NOT_FOUND, status=404).status == 404


def describe_ClientError():
    def describe_to_dict():
        def it_serializes_kind_and_message():
            data = error(ErrorKind.NOT_FOUND, "Not Found", status=404).to_dict()

            assert data == {"kind": "NotFound", "message": "Not Found", "status": 404}
