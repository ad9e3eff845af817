"""Project DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class SideType(StrEnum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


class ProjectType(StrEnum):
    MOD = "mod"
    MODPACK = "modpack"
    RESOURCEPACK = "resourcepack"
    SHADER = "shader"


class ProjectStatus(StrEnum):
    APPROVED = "approved"
    ARCHIVED = "archived"
    REJECTED = "rejected"
    DRAFT = "draft"
    UNLISTED = "unlisted"
    PROCESSING = "processing"
    WITHHELD = "withheld"
    SCHEDULED = "scheduled"
    PRIVATE = "private"
    UNKNOWN = "unknown"


@dataclass
class ProjectLicense:
    id: str
    name: str
    url: str | None = None


@dataclass
class Project:
    """A mod, modpack, resource pack or shader as returned by the API."""

    id: str
    slug: str
    title: str
    description: str
    categories: list[str]
    client_side: SideType
    server_side: SideType
    body: str
    status: ProjectStatus
    project_type: ProjectType
    downloads: int
    team: str
    published: datetime
    updated: datetime
    followers: int
    additional_categories: list[str] = field(default_factory=list)
    issues_url: str | None = None
    source_url: str | None = None
    wiki_url: str | None = None
    discord_url: str | None = None
    icon_url: str | None = None
    color: int | None = None
    approved: datetime | None = None
    license: ProjectLicense | None = None
    versions: list[str] = field(default_factory=list)
    game_versions: list[str] = field(default_factory=list)
    loaders: list[str] = field(default_factory=list)


@dataclass
class ProjectIdentifier:
    """Result of a slug/ID validity check."""

    id: str


@dataclass
class EditableProject:
    """Fields of a project that can be changed with ``modify_project``.

    Only the fields that are set are sent.
    """

    slug: str | None = None
    title: str | None = None
    description: str | None = None
    categories: list[str] | None = None
    client_side: SideType | None = None
    server_side: SideType | None = None
    body: str | None = None
    status: ProjectStatus | None = None
    requested_status: ProjectStatus | None = None
    additional_categories: list[str] | None = None
    issues_url: str | None = None
    source_url: str | None = None
    wiki_url: str | None = None
    discord_url: str | None = None
    license_id: str | None = None
    license_url: str | None = None
