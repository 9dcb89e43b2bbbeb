"""Small types and Enums used by ghclone."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RepositoryType(str, Enum):
    """`type` filter of the authenticated-user listing."""

    all = "all"
    member = "member"
    owner = "owner"


class SortType(str, Enum):
    """`sort` key accepted by the repository listings."""

    created = "created"
    updated = "updated"
    pushed = "pushed"
    full_name = "full_name"


class CloneOutcome(str, Enum):
    """What happened to one repository."""

    cloned = "cloned"
    skipped = "skipped"


class RepositoryDescriptor(BaseModel):
    """One repository as returned by the listing, reduced to what cloning needs."""

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str  # owner/name
    clone_url: str
    ssh_url: str | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> RepositoryDescriptor:
        return cls(
            name=record["name"],
            full_name=record["full_name"],
            clone_url=record["clone_url"],
            ssh_url=record.get("ssh_url"),
        )
