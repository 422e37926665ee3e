r"""Unit tests for the backoff strategy base class."""

from __future__ import annotations

import pytest

from cloudsdk.backoff import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    def __init__(self, delay: float, max_retries: int) -> None:
        self.delay = delay
        self.max_retries = max_retries

    def duration(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_retries


#########################################
#     Tests for BaseBackoffStrategy     #
#########################################


def test_base_backoff_strategy_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseBackoffStrategy()


def test_base_backoff_strategy_custom_subclass() -> None:
    backoff = ConstantBackoff(delay=1.5, max_retries=2)
    assert backoff.duration(0) == 1.5
    assert backoff.duration(7) == 1.5
    assert backoff.should_retry(1)
    assert not backoff.should_retry(2)
