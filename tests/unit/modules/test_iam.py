r"""Unit tests for the IAM service client."""

from __future__ import annotations

from urllib.parse import parse_qsl

import pytest

from cloudsdk.exceptions import SDKError
from cloudsdk.modules.iam import IAMClient, ProjectsClient
from tests.helpers import BASE_URL, ScriptedHandler, json_response, make_executor

PROJECT = {"projectId": "p-123", "displayName": "Demo"}


def make_projects(handler: ScriptedHandler) -> ProjectsClient:
    return IAMClient(make_executor(handler, "iam")).projects()


####################################
#     Tests for ProjectsClient     #
####################################


def test_iam_client_projects() -> None:
    assert isinstance(IAMClient(make_executor(ScriptedHandler(), "iam")).projects(), ProjectsClient)


@pytest.mark.asyncio
async def test_projects_list() -> None:
    handler = ScriptedHandler(
        json_response(200, {"projects": [{"project": PROJECT, "tenantRole": "owner"}], "total": 1})
    )

    memberships = await make_projects(handler).list()

    assert len(memberships) == 1
    assert memberships[0].project.project_id == "p-123"
    assert memberships[0].tenant_role == "owner"
    request = handler.requests[0]
    assert request.method == "GET"
    assert str(request.url) == f"{BASE_URL}/iam/api/v1/projects"


@pytest.mark.asyncio
async def test_projects_list_query() -> None:
    handler = ScriptedHandler(json_response(200, {"projects": []}))

    assert await make_projects(handler).list(offset=10, limit=5, order="name") == []

    request = handler.requests[0]
    assert request.url.path == "/iam/api/v1/projects"
    assert parse_qsl(request.url.query.decode()) == [
        ("offset", "10"),
        ("limit", "5"),
        ("order", "name"),
    ]


@pytest.mark.asyncio
async def test_projects_list_empty_body() -> None:
    assert await make_projects(ScriptedHandler(json_response(200))).list() == []


@pytest.mark.asyncio
async def test_projects_get() -> None:
    handler = ScriptedHandler(json_response(200, PROJECT))

    project = await make_projects(handler).get("p-123")

    assert project.project_id == "p-123"
    assert project.display_name == "Demo"
    assert str(handler.requests[0].url) == f"{BASE_URL}/iam/api/v1/project/p-123"


@pytest.mark.asyncio
async def test_projects_get_not_found() -> None:
    handler = ScriptedHandler(json_response(404, {"errorCode": 2001, "message": "not found"}))

    with pytest.raises(SDKError) as exc_info:
        await make_projects(handler).get("p-missing")
    assert exc_info.value.status_code == 404
    assert exc_info.value.error_code == 2001


@pytest.mark.asyncio
async def test_projects_get_empty_id() -> None:
    handler = ScriptedHandler(json_response(200, PROJECT))
    with pytest.raises(ValueError, match=r"project ID cannot be empty"):
        await make_projects(handler).get("")
    assert handler.call_count == 0
