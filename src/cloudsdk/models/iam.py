r"""IAM project models."""

from __future__ import annotations

__all__ = ["ListProjectsResponse", "Project", "ProjectMembership"]

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Project:
    """A project as returned by the IAM API."""

    project_id: str
    display_name: str = ""
    description: str = ""
    namespace: str = ""
    frozen: bool = False
    extra: dict[str, Any] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        return cls(
            project_id=data.get("projectId", ""),
            display_name=data.get("displayName", ""),
            description=data.get("description", ""),
            namespace=data.get("namespace", ""),
            frozen=data.get("frozen", False),
            extra=data.get("extra") or {},
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )

    @property
    def sys_code(self) -> str | None:
        """The ``extra.iservice.projectSysCode`` value, if any."""
        iservice = self.extra.get("iservice")
        if not isinstance(iservice, dict):
            return None
        code = iservice.get("projectSysCode")
        return code if isinstance(code, str) else None


@dataclass
class ProjectMembership:
    """A project together with the caller's membership details."""

    project: Project | None
    tenant_role: str = ""
    frozen: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectMembership:
        project = data.get("project")
        return cls(
            project=Project.from_dict(project) if project else None,
            tenant_role=data.get("tenantRole", ""),
            frozen=data.get("frozen", False),
            extra=data.get("extra") or {},
        )


@dataclass
class ListProjectsResponse:
    projects: list[ProjectMembership]
    total: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListProjectsResponse:
        return cls(
            projects=[ProjectMembership.from_dict(item) for item in data.get("projects") or []],
            total=data.get("total", 0),
        )
