r"""Unit tests for VPS models."""

from __future__ import annotations

from cloudsdk.models.vps import Server, ServerStatus


def test_server_from_dict() -> None:
    server = Server.from_dict(
        {
            "id": "svr-1",
            "name": "web",
            "status": "ACTIVE",
            "flavor_id": "f-1",
            "image_id": "img-1",
            "project_id": "p-1",
            "private_ips": ["10.0.0.2"],
            "public_ips": None,
            "metadatas": {"role": "web"},
        }
    )
    assert server.id == "svr-1"
    assert server.status == ServerStatus.ACTIVE
    assert server.private_ips == ["10.0.0.2"]
    assert server.public_ips == []
    assert server.metadatas == {"role": "web"}
    assert server.description == ""


def test_server_status_values() -> None:
    assert [status.value for status in ServerStatus] == [
        "BUILD",
        "ACTIVE",
        "SHUTOFF",
        "ERROR",
        "DELETED",
        "REBOOT",
        "RESIZE",
    ]
