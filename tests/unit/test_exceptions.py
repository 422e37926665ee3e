r"""Unit tests for the SDK error taxonomy."""

from __future__ import annotations

import pytest

from cloudsdk.exceptions import (
    ErrorCategory,
    HTTPStatusError,
    NetworkError,
    RequestCanceledError,
    RequestTimeoutError,
    SDKError,
    TerminalStateError,
    WaiterError,
    WaitTimeoutError,
    errors_match,
)

##############################
#     Tests for SDKError     #
##############################


def test_sdk_error_default_values() -> None:
    error = SDKError()
    assert error.status_code == 0
    assert error.error_code == 0
    assert error.message == ""
    assert error.meta == {}
    assert error.cause is None


def test_sdk_error_str_local_error() -> None:
    assert str(SDKError(message="failed to marshal request body")) == (
        "SDK error: failed to marshal request body"
    )


def test_sdk_error_str_with_error_code() -> None:
    error = SDKError(status_code=400, error_code=1001, message="Invalid request")
    assert str(error) == "HTTP 400 (code 1001): Invalid request"


def test_sdk_error_str_without_error_code() -> None:
    assert str(SDKError(status_code=500, message="HTTP 500")) == "HTTP 500: HTTP 500"


def test_sdk_error_keeps_cause() -> None:
    cause = ValueError("boom")
    assert SDKError(message="x", cause=cause).cause is cause


def test_sdk_error_repr() -> None:
    assert repr(SDKError(404, 2001, "not found")) == (
        "SDKError(status_code=404, error_code=2001, message='not found')"
    )


def test_sdk_error_category_none() -> None:
    assert SDKError(status_code=400).category is None


def test_sdk_error_category_unknown_value() -> None:
    assert SDKError(status_code=400, meta={"category": "quota"}).category is None


def test_sdk_error_category_from_meta() -> None:
    assert SDKError(meta={"category": "timeout"}).category == ErrorCategory.TIMEOUT


def test_sdk_error_same_kind() -> None:
    assert SDKError(404, 2001, "a").same_kind(SDKError(404, 2001, "b"))
    assert not SDKError(404, 2001).same_kind(SDKError(404, 2002))
    assert not SDKError(404).same_kind(ValueError("404"))


##############################
#     Tests for variants     #
##############################


def test_network_error() -> None:
    cause = OSError("connection refused")
    error = NetworkError("connection refused", cause=cause)
    assert isinstance(error, SDKError)
    assert error.status_code == 0
    assert error.category == ErrorCategory.NETWORK
    assert error.message == "network error: connection refused"
    assert error.cause is cause
    assert str(error) == "SDK error: network error: connection refused"


def test_request_timeout_error() -> None:
    error = RequestTimeoutError()
    assert error.status_code == 0
    assert error.category == ErrorCategory.TIMEOUT
    assert error.message == "request timeout"


def test_request_canceled_error() -> None:
    error = RequestCanceledError()
    assert error.status_code == 0
    assert error.category == ErrorCategory.CANCELED
    assert error.message == "request canceled"


def test_http_status_error() -> None:
    error = HTTPStatusError(500, "Internal Server Error")
    assert error.status_code == 500
    assert error.error_code == 0
    assert error.message == "HTTP 500"
    assert error.meta == {"raw": "Internal Server Error"}
    assert error.raw_body == "Internal Server Error"
    assert error.category is None
    assert str(error) == "HTTP 500: HTTP 500"


##################################
#     Tests for errors_match     #
##################################


def test_errors_match_ignores_message_and_meta() -> None:
    assert errors_match(
        SDKError(400, 1001, "Invalid request", meta={"field": "name"}),
        SDKError(400, 1001, "Bad input"),
    )


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (SDKError(400, 1001), SDKError(400, 1002)),
        (SDKError(400, 1001), SDKError(409, 1001)),
    ],
)
def test_errors_match_different_codes(first: SDKError, second: SDKError) -> None:
    assert not errors_match(first, second)


def test_errors_match_variants() -> None:
    assert errors_match(RequestTimeoutError(), RequestCanceledError())
    assert errors_match(HTTPStatusError(503, "a"), SDKError(503))


def test_errors_match_non_sdk_errors() -> None:
    assert not errors_match(SDKError(), ValueError())
    assert not errors_match(ValueError(), SDKError())
    assert not errors_match(None, None)


#################################
#     Tests for WaiterError     #
#################################


def test_wait_timeout_error() -> None:
    error = WaitTimeoutError(300.0)
    assert isinstance(error, WaiterError)
    assert error.max_wait == 300.0
    assert str(error) == "wait timeout: maximum wait duration exceeded (300.0s)"


def test_terminal_state_error() -> None:
    error = TerminalStateError("tag", "tag-1", "error", "active")
    assert isinstance(error, WaiterError)
    assert error.resource == "tag"
    assert error.resource_id == "tag-1"
    assert error.status == "error"
    assert error.target == "active"
    assert str(error) == "tag tag-1 entered error state while waiting for active"
