from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from cloudsdk.backoff import ExponentialBackoff
from cloudsdk.utils.structured_logging import NullLogger

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def no_jitter_backoff() -> ExponentialBackoff:
    """Create the default backoff without jitter, for exact delays."""
    return ExponentialBackoff(jitter=False)


@pytest.fixture
def mock_logger() -> Mock:
    """Create a mock logger collaborator recording every call."""
    return Mock(spec=NullLogger)
