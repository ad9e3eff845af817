"""Pytest configuration and shared fixtures for labrinth-client tests."""

import os

import pytest

from labrinth_client import Configuration
from labrinth_client.testing import RecordingHandler, create_test_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: clear Labrinth environment variables before each test.

    Keeps a developer's real token or .env values out of the tests.
    """
    for key in list(os.environ.keys()):
        if key.startswith("LABRINTH_"):
            monkeypatch.delenv(key, raising=False)

    yield

    # .env loading writes to os.environ directly; monkeypatch restores the originals afterwards
    for key in list(os.environ.keys()):
        if key.startswith("LABRINTH_"):
            del os.environ[key]


@pytest.fixture
def config():
    config = Configuration(user_agent="labrinth-client-tests/1.0")
    config.set_api_key("Authorization", "mrp_test_token")
    return config


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(handler, config):
    client = create_test_client(handler, config)
    yield client
    client.close()


@pytest.fixture
def notification_json():
    return {
        "id": "UwwJ73vb",
        "user_id": "EEFFGGHH",
        "type": "project_update",
        "title": "**My Project** has been updated!",
        "text": "The project, My Project, has released a new version: 1.0.0",
        "link": "mod/AABBCCDD/version/IIJJKKLL",
        "read": False,
        "created": "2023-03-20T12:00:00Z",
        "actions": [
            {"title": "Mark as read", "action_route": ["PATCH", "notification/UwwJ73vb"]},
        ],
    }


@pytest.fixture
def user_json():
    return {
        "id": "EEFFGGHH",
        "username": "my_user",
        "name": "My User",
        "email": None,
        "bio": "Making mods",
        "avatar_url": "https://cdn.modrinth.com/user/EEFFGGHH/icon.png",
        "created": "2020-11-03T18:32:05Z",
        "role": "developer",
        "badges": 0,
    }


@pytest.fixture
def project_json():
    return {
        "id": "AABBCCDD",
        "slug": "my_project",
        "title": "My Project",
        "description": "A short description",
        "categories": ["technology", "adventure"],
        "client_side": "required",
        "server_side": "optional",
        "body": "A long body describing my project in detail",
        "status": "approved",
        "project_type": "mod",
        "downloads": 1234,
        "team": "MMNNOOPP",
        "published": "2021-01-01T00:00:00Z",
        "updated": "2023-03-20T12:00:00Z",
        "followers": 42,
        "license": {"id": "LGPL-3.0-or-later", "name": "GNU Lesser General Public License v3 or later"},
        "versions": ["IIJJKKLL"],
        "game_versions": ["1.19.4"],
        "loaders": ["fabric"],
    }


@pytest.fixture
def version_json():
    return {
        "id": "IIJJKKLL",
        "project_id": "AABBCCDD",
        "author_id": "EEFFGGHH",
        "name": "Version 1.0.0",
        "version_number": "1.0.0",
        "changelog": "List of changes in this version",
        "dependencies": [{"version_id": None, "project_id": "P7dR8mSH", "dependency_type": "required"}],
        "game_versions": ["1.19.4"],
        "version_type": "release",
        "loaders": ["fabric"],
        "featured": True,
        "status": "listed",
        "date_published": "2023-03-20T12:00:00Z",
        "downloads": 100,
        "files": [
            {
                "hashes": {"sha512": "93ecf5fe02914fb53d94aa3d28c1fb562e23985f", "sha1": "c84dd4b3580c02b79958a0590afd5783d80ef504"},
                "url": "https://cdn.modrinth.com/data/AABBCCDD/versions/1.0.0/my_file.jar",
                "filename": "my_file.jar",
                "primary": True,
                "size": 1097270,
                "file_type": None,
            }
        ],
    }
