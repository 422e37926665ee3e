r"""Unit tests for retry eligibility rules."""

from __future__ import annotations

import pytest

from cloudsdk.backoff import is_retryable_method, is_retryable_status

#########################################
#     Tests for is_retryable_status     #
#########################################


@pytest.mark.parametrize("status_code", [429, 502, 503, 504])
def test_is_retryable_status_true(status_code: int) -> None:
    assert is_retryable_status(status_code)


@pytest.mark.parametrize("status_code", [0, 200, 400, 401, 404, 409, 500, 501, 505])
def test_is_retryable_status_false(status_code: int) -> None:
    assert not is_retryable_status(status_code)


#########################################
#     Tests for is_retryable_method     #
#########################################


@pytest.mark.parametrize("method", ["GET", "HEAD"])
def test_is_retryable_method_true(method: str) -> None:
    assert is_retryable_method(method)


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "get"])
def test_is_retryable_method_false(method: str) -> None:
    assert not is_retryable_method(method)
