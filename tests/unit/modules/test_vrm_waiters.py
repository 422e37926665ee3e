r"""Unit tests for the tag waiters."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import call

import pytest

from cloudsdk.exceptions import SDKError, TerminalStateError, WaitTimeoutError
from cloudsdk.models.vrm import TagStatus
from cloudsdk.modules.vrm import TagsClient, VRMClient
from cloudsdk.modules.vrm.waiters import (
    DEFAULT_TAG_WAITER_CONFIG,
    wait_for_tag_active,
    wait_for_tag_available,
    wait_for_tag_status,
)
from cloudsdk.waiter import WaiterConfig
from tests.helpers import NO_RETRY, ScriptedHandler, json_response, make_executor

if TYPE_CHECKING:
    from unittest.mock import Mock


def tag_response(status: str) -> object:
    return json_response(200, {"id": "tag-1", "status": status})


def make_tags(handler: ScriptedHandler) -> TagsClient:
    return VRMClient(make_executor(handler, "vrm", backoff=NO_RETRY), "p-1").tags()


def test_default_tag_waiter_config() -> None:
    assert DEFAULT_TAG_WAITER_CONFIG == WaiterConfig(
        interval=5.0, max_wait=600.0, backoff_multiplier=1.2, backoff_cap=30.0
    )


@pytest.mark.asyncio
async def test_wait_for_tag_active(mock_asleep: Mock) -> None:
    handler = ScriptedHandler(
        tag_response("creating"), tag_response("creating"), tag_response("active")
    )

    await wait_for_tag_active(make_tags(handler), "tag-1")

    assert handler.call_count == 3
    assert mock_asleep.call_args_list == [call(5.0), call(6.0)]


@pytest.mark.asyncio
async def test_wait_for_tag_available(mock_asleep: Mock) -> None:
    handler = ScriptedHandler(tag_response("saving"), tag_response("available"))

    await wait_for_tag_available(make_tags(handler), "tag-1")

    assert handler.call_count == 2
    mock_asleep.assert_called_once_with(5.0)


@pytest.mark.asyncio
async def test_wait_for_tag_status_error_is_terminal(mock_asleep: Mock) -> None:
    handler = ScriptedHandler(tag_response("creating"), tag_response("error"))

    with pytest.raises(TerminalStateError) as exc_info:
        await wait_for_tag_active(make_tags(handler), "tag-1")

    error = exc_info.value
    assert error.resource == "tag"
    assert error.resource_id == "tag-1"
    assert error.status == "error"
    assert error.target == "active"
    assert handler.call_count == 2
    mock_asleep.assert_called_once()


@pytest.mark.asyncio
async def test_wait_for_tag_status_error_target(mock_asleep: Mock) -> None:
    handler = ScriptedHandler(tag_response("error"))
    await wait_for_tag_status(make_tags(handler), "tag-1", TagStatus.ERROR)
    assert handler.call_count == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_wait_for_tag_status_accepts_string_target(mock_asleep: Mock) -> None:  # noqa: ARG001
    handler = ScriptedHandler(tag_response("deactivated"))
    await wait_for_tag_status(make_tags(handler), "tag-1", "deactivated")
    assert handler.call_count == 1


@pytest.mark.asyncio
async def test_wait_for_tag_status_read_error(mock_asleep: Mock) -> None:  # noqa: ARG001
    handler = ScriptedHandler(json_response(404, {"errorCode": 4004, "message": "tag not found"}))
    with pytest.raises(SDKError, match=r"tag not found"):
        await wait_for_tag_active(make_tags(handler), "tag-1")
    assert handler.call_count == 1


@pytest.mark.asyncio
async def test_wait_for_tag_status_timeout() -> None:
    handler = ScriptedHandler(tag_response("creating"))
    config = WaiterConfig(interval=0.01, max_wait=0.05)

    with pytest.raises(WaitTimeoutError):
        await wait_for_tag_active(make_tags(handler), "tag-1", config=config)
    assert handler.call_count >= 1


@pytest.mark.asyncio
async def test_wait_for_tag_status_empty_id() -> None:
    handler = ScriptedHandler(tag_response("active"))
    with pytest.raises(ValueError, match=r"tag ID is required"):
        await wait_for_tag_active(make_tags(handler), "")
    assert handler.call_count == 0
