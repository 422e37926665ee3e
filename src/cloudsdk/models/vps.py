r"""VPS server models."""

from __future__ import annotations

__all__ = ["Server", "ServerStatus"]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ServerStatus(str, Enum):
    r"""Lifecycle status of a server."""

    BUILD = "BUILD"
    ACTIVE = "ACTIVE"
    SHUTOFF = "SHUTOFF"
    ERROR = "ERROR"
    DELETED = "DELETED"
    REBOOT = "REBOOT"
    RESIZE = "RESIZE"


@dataclass
class Server:
    """A virtual server."""

    id: str
    name: str = ""
    description: str = ""
    status: str = ""
    status_reason: str = ""
    flavor_id: str = ""
    image_id: str = ""
    project_id: str = ""
    private_ips: list[str] = field(default_factory=list)
    public_ips: list[str] = field(default_factory=list)
    metadatas: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Server:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            description=data.get("description", ""),
            status=data.get("status", ""),
            status_reason=data.get("status_reason", ""),
            flavor_id=data.get("flavor_id", ""),
            image_id=data.get("image_id", ""),
            project_id=data.get("project_id", ""),
            private_ips=data.get("private_ips") or [],
            public_ips=data.get("public_ips") or [],
            metadatas=data.get("metadatas") or {},
        )
