r"""Unit tests for IAM models."""

from __future__ import annotations

from coola.equality import objects_are_equal

from cloudsdk.models.iam import ListProjectsResponse, Project, ProjectMembership

PROJECT_PAYLOAD = {
    "projectId": "p-123",
    "displayName": "Demo",
    "description": "demo project",
    "namespace": "team-a",
    "frozen": False,
    "extra": {"iservice": {"projectSysCode": "demo-code"}},
    "createdAt": "2024-01-01T00:00:00Z",
    "updatedAt": "2024-01-02T00:00:00Z",
}


#############################
#     Tests for Project     #
#############################


def test_project_from_dict() -> None:
    assert objects_are_equal(
        Project.from_dict(PROJECT_PAYLOAD),
        Project(
            project_id="p-123",
            display_name="Demo",
            description="demo project",
            namespace="team-a",
            frozen=False,
            extra={"iservice": {"projectSysCode": "demo-code"}},
            created_at="2024-01-01T00:00:00Z",
            updated_at="2024-01-02T00:00:00Z",
        ),
    )


def test_project_from_dict_missing_fields() -> None:
    project = Project.from_dict({"projectId": "p-1"})
    assert project.project_id == "p-1"
    assert project.extra == {}
    assert project.sys_code is None


def test_project_sys_code() -> None:
    assert Project.from_dict(PROJECT_PAYLOAD).sys_code == "demo-code"


def test_project_sys_code_wrong_types() -> None:
    assert Project("p-1", extra={"iservice": "demo-code"}).sys_code is None
    assert Project("p-1", extra={"iservice": {"projectSysCode": 42}}).sys_code is None


##########################################
#     Tests for ListProjectsResponse     #
##########################################


def test_list_projects_response_from_dict() -> None:
    response = ListProjectsResponse.from_dict(
        {
            "projects": [
                {"project": PROJECT_PAYLOAD, "tenantRole": "owner"},
                {"project": None, "tenantRole": "member", "frozen": True},
            ],
            "total": 2,
        }
    )
    assert response.total == 2
    assert response.projects[0].project.project_id == "p-123"
    assert response.projects[0].tenant_role == "owner"
    assert objects_are_equal(
        response.projects[1], ProjectMembership(project=None, tenant_role="member", frozen=True)
    )


def test_list_projects_response_empty() -> None:
    response = ListProjectsResponse.from_dict({"projects": None})
    assert response.projects == []
    assert response.total == 0
