"""Version DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class VersionType(StrEnum):
    RELEASE = "release"
    BETA = "beta"
    ALPHA = "alpha"


class DependencyType(StrEnum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    INCOMPATIBLE = "incompatible"
    EMBEDDED = "embedded"


@dataclass
class VersionDependency:
    dependency_type: DependencyType
    version_id: str | None = None
    project_id: str | None = None
    file_name: str | None = None


@dataclass
class VersionFileHashes:
    sha512: str
    sha1: str


@dataclass
class VersionFile:
    hashes: VersionFileHashes
    url: str
    filename: str
    primary: bool
    size: int
    file_type: str | None = None


@dataclass
class Version:
    id: str
    project_id: str
    author_id: str
    name: str
    version_number: str
    version_type: VersionType
    date_published: datetime
    downloads: int
    game_versions: list[str]
    loaders: list[str]
    featured: bool
    files: list[VersionFile] = field(default_factory=list)
    dependencies: list[VersionDependency] = field(default_factory=list)
    changelog: str | None = None
    status: str | None = None
