"""Version operations."""

from labrinth_client.api.base import Endpoint, ResourceApi
from labrinth_client.errors.models import AuthError
from labrinth_client.models import Version
from labrinth_client.operation import Operation, path_param, query_param, raises, returns

GET_PROJECT_VERSIONS = Operation(
    operation_id="getProjectVersions",
    method="GET",
    path="/project/{id|slug}/version",
    parameters=(
        path_param("id_slug", wire_name="id|slug"),
        query_param("loaders", array=True),
        query_param("game_versions", array=True),
        query_param("featured", type=bool),
    ),
    return_type=list[Version],
    responses={200: returns(list[Version])},
)

GET_VERSION = Operation(
    operation_id="getVersion",
    method="GET",
    path="/version/{id}",
    parameters=(path_param("id"),),
    return_type=Version,
    responses={200: returns(Version)},
)

GET_VERSIONS = Operation(
    operation_id="getVersions",
    method="GET",
    path="/versions",
    parameters=(query_param("ids", required=True, array=True),),
    return_type=list[Version],
    responses={200: returns(list[Version])},
)

DELETE_VERSION = Operation(
    operation_id="deleteVersion",
    method="DELETE",
    path="/version/{id}",
    parameters=(path_param("id"),),
    responses={401: raises(AuthError)},
)


class VersionsApi(ResourceApi):
    get_project_versions = Endpoint(GET_PROJECT_VERSIONS, "List a project's versions, optionally filtered.")
    get_version = Endpoint(GET_VERSION, "Get a version from its ID.")
    get_versions = Endpoint(GET_VERSIONS, "Get multiple versions.")
    delete_version = Endpoint(DELETE_VERSION, "Delete a version.")
