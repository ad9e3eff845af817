"""Tests for request building from Operation descriptors."""

import json

import httpx
import pytest

from labrinth_client import Configuration
from labrinth_client.api.notifications import GET_NOTIFICATION, GET_NOTIFICATIONS, GET_USER_NOTIFICATIONS
from labrinth_client.api.projects import MODIFY_PROJECT
from labrinth_client.api.versions import GET_PROJECT_VERSIONS
from labrinth_client.errors import InvalidArgumentError
from labrinth_client.models import EditableProject
from labrinth_client.operation import Operation, form_param, header_param, path_param, query_param
from labrinth_client.request import bind_arguments, build_request, parse_request

UPLOAD_ICON = Operation(
    operation_id="uploadIcon",
    method="POST",
    path="/project/{id}/icon",
    parameters=(path_param("id"), form_param("file", required=True), form_param("ext")),
    content_types=("multipart/form-data", "application/x-www-form-urlencoded", "application/json"),
)

TAGGED = Operation(
    operation_id="tagProject",
    method="POST",
    path="/project/{id}/tags",
    parameters=(path_param("id"), form_param("title"), form_param("tags")),
    content_types=("application/x-www-form-urlencoded", "application/json"),
)

WITH_HEADERS = Operation(
    operation_id="withHeaders",
    method="GET",
    path="/user",
    parameters=(
        header_param("user_agent", "User-Agent"),
        header_param("accept", "Accept"),
        header_param("authorization", "Authorization"),
    ),
)

PAGED_ICONS = Operation(
    operation_id="getIcons",
    method="GET",
    path="/icons/{page}",
    parameters=(
        path_param("page", type=int),
        query_param("sizes", array=True, style="pipeDelimited", explode=False, type=int),
    ),
)


@pytest.fixture
def config():
    config = Configuration(user_agent="tests/1.0")
    config.set_api_key("Authorization", "mrp_secret")
    return config


@pytest.mark.unit
class TestBindArguments:
    def test_positional_and_keyword(self):
        params = bind_arguments(GET_PROJECT_VERSIONS, ("my_mod",), {"featured": True})

        assert params == {"id_slug": "my_mod", "featured": True}

    def test_too_many_positional(self):
        with pytest.raises(InvalidArgumentError, match="positional"):
            bind_arguments(GET_NOTIFICATION, ("a", "b"), {})

    def test_duplicate_value(self):
        with pytest.raises(InvalidArgumentError, match="multiple values"):
            bind_arguments(GET_NOTIFICATION, ("a",), {"id": "b"})


@pytest.mark.unit
class TestPathAndQuery:
    def test_placeholders_are_substituted(self, config):
        request = build_request(config, GET_USER_NOTIFICATIONS, {"id_username": "my_user"})

        assert request.url == "https://api.modrinth.com/v2/user/my_user/notifications"
        assert "{" not in request.url.raw_path.decode()

    def test_path_values_are_percent_encoded(self, config):
        request = build_request(config, GET_NOTIFICATION, {"id": "a/b c"})

        assert request.url.raw_path == b"/v2/notification/a%2Fb%20c"

    def test_collection_in_path_is_rejected(self, config):
        with pytest.raises(InvalidArgumentError, match="must be a scalar"):
            build_request(config, GET_NOTIFICATION, {"id": ["a", "b"]})

    def test_array_query_is_exploded(self, config):
        request = build_request(config, GET_NOTIFICATIONS, {"ids": ["a", "b"]})

        assert str(request.url) == "https://api.modrinth.com/v2/notifications?ids=a&ids=b"

    def test_optional_query_parameters_are_omitted(self, config):
        request = build_request(config, GET_PROJECT_VERSIONS, {"id_slug": "my_mod", "featured": False})

        assert request.url.params.multi_items() == [("featured", "false")]

    @pytest.mark.parametrize("ids", [None, [], ""])
    def test_required_parameter_missing_or_empty(self, config, ids):
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_request(config, GET_NOTIFICATIONS, {"ids": ids})

        assert exc_info.value.parameter == "ids"
        assert exc_info.value.operation_id == "getNotifications"

    def test_host_trailing_slash(self, config):
        config.host = "http://localhost:8000/v2/"

        request = build_request(config, GET_NOTIFICATION, {"id": "abc"})

        assert request.url == "http://localhost:8000/v2/notification/abc"


@pytest.mark.unit
class TestHeaders:
    def test_default_headers(self, config):
        request = build_request(config, GET_NOTIFICATION, {"id": "abc"})

        assert request.headers["User-Agent"] == "tests/1.0"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "mrp_secret"

    def test_token_prefix(self, config):
        config.set_api_key_prefix("Authorization", "Bearer")

        request = build_request(config, GET_NOTIFICATION, {"id": "abc"})

        assert request.headers["Authorization"] == "Bearer mrp_secret"

    def test_no_token_no_header(self):
        request = build_request(Configuration(), GET_NOTIFICATION, {"id": "abc"})

        assert "Authorization" not in request.headers

    def test_precedence(self, config):
        request = build_request(
            config,
            WITH_HEADERS,
            {"user_agent": "custom/2.0", "accept": "text/plain", "authorization": "mrp_other"},
        )

        # Header parameters beat the default user agent
        assert request.headers["User-Agent"] == "custom/2.0"
        # Negotiated headers beat header parameters
        assert request.headers["Accept"] == "application/json"
        # The configured token beats everything
        assert request.headers["Authorization"] == "mrp_secret"
        assert len(request.headers.get_list("Authorization")) == 1

    def test_timeout_extension(self, config):
        config.timeout = 5.0

        request = build_request(config, GET_NOTIFICATION, {"id": "abc"})

        assert request.extensions["timeout"] == httpx.Timeout(5.0).as_dict()


@pytest.mark.unit
class TestBodies:
    def test_model_body_sends_only_set_fields(self, config):
        request = build_request(
            config, MODIFY_PROJECT, {"id_slug": "my_mod", "editable_project": EditableProject(title="Renamed")}
        )

        assert request.method == "PATCH"
        assert json.loads(request.content) == {"title": "Renamed"}

    def test_optional_body_omitted(self, config):
        request = build_request(config, MODIFY_PROJECT, {"id_slug": "my_mod"})

        assert request.content == b""

    def test_multipart_when_a_file_is_present(self, config):
        request = build_request(config, UPLOAD_ICON, {"id": "abc", "file": b"\x89PNG", "ext": "png"})

        content_type = request.headers["Content-Type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        body = request.read()
        assert b'name="file"' in body
        assert b'name="ext"' in body
        assert b"\x89PNG" in body

    def test_urlencoded_form(self, config):
        request = build_request(config, TAGGED, {"id": "abc", "title": "My Mod", "tags": ["a", "b"]})

        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.content == b"title=My+Mod&tags=a&tags=b"

    def test_json_form(self, config):
        request = build_request(
            config, TAGGED, {"id": "abc", "title": "My Mod"}, content_type="application/json"
        )

        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"title": "My Mod"}


@pytest.mark.unit
class TestParseRequest:
    def test_round_trip(self, config):
        params = {"id_slug": "my mod/1", "loaders": ["fabric", "quilt"], "featured": True}

        request = build_request(config, GET_PROJECT_VERSIONS, params)

        assert parse_request(GET_PROJECT_VERSIONS, request) == {
            "id_slug": "my mod/1",
            "loaders": ["fabric", "quilt"],
            "featured": True,
        }

    @pytest.mark.parametrize("featured", [True, False])
    def test_round_trip_keeps_bool_query_value(self, config, featured):
        params = {"id_slug": "abc", "loaders": ["fabric"], "featured": featured}

        request = build_request(config, GET_PROJECT_VERSIONS, params)

        assert parse_request(GET_PROJECT_VERSIONS, request) == params

    def test_round_trip_typed_path_and_array(self, config):
        params = {"page": 3, "sizes": [16, 32]}

        request = build_request(config, PAGED_ICONS, params)

        assert request.url.path == "/v2/icons/3"
        assert parse_request(PAGED_ICONS, request) == params

    def test_wrong_operation(self, config):
        request = build_request(config, GET_NOTIFICATIONS, {"ids": ["a"]})

        with pytest.raises(ValueError, match="does not match"):
            parse_request(GET_NOTIFICATION, request)
