r"""VRM tag models."""

from __future__ import annotations

__all__ = ["ListTagsOptions", "Tag", "TagStatus", "UpdateTagRequest"]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TagStatus(str, Enum):
    r"""Lifecycle status of a tag."""

    QUEUED = "queued"
    SAVING = "saving"
    IMPORTING = "importing"
    CREATING = "creating"
    RESTORING = "restoring"
    ACTIVE = "active"
    KILLED = "killed"
    PENDING_DELETE = "pending_delete"
    DEACTIVATED = "deactivated"
    AVAILABLE = "available"
    BACKING_UP = "backing-up"
    DELETING = "deleting"
    ERROR = "error"
    UNMANAGING = "unmanaging"
    ERROR_DELETING = "error_deleting"
    DELETED = "deleted"


@dataclass
class Tag:
    """An image tag inside a VRM repository.

    ``status`` is kept as the raw string sent by the API so unknown
    statuses do not break decoding.
    """

    id: str
    name: str = ""
    repository_id: str = ""
    type: str = ""
    size: int = 0
    status: str = ""
    extra: dict[str, Any] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tag:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            repository_id=data.get("repositoryID", ""),
            type=data.get("type", ""),
            size=data.get("size", 0),
            status=data.get("status", ""),
            extra=data.get("extra") or {},
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class UpdateTagRequest:
    """Body of a tag update."""

    name: str = ""

    def validate(self) -> None:
        if not self.name.strip():
            msg = "name cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass
class ListTagsOptions:
    """Pagination and filtering of a tag listing.

    Args:
        limit: Maximum number of tags, -1 for all, 0 for the server default.
        offset: Number of tags to skip.
        where: Filter expressions, sent as repeated ``where`` parameters.
        namespace: Optional namespace sent in the ``X-Namespace`` header.
    """

    limit: int = 0
    offset: int = 0
    where: list[str] = field(default_factory=list)
    namespace: str = ""

    def validate(self) -> None:
        if self.limit < -1:
            msg = f"limit must be >= -1 (where -1 means all), got {self.limit}"
            raise ValueError(msg)
        if self.offset < 0:
            msg = f"offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    def query(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.limit != 0:
            params.append(("limit", str(self.limit)))
        if self.offset > 0:
            params.append(("offset", str(self.offset)))
        params.extend(("where", condition) for condition in self.where)
        return params
