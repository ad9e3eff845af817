"""Project operations."""

from labrinth_client.api.base import Endpoint, ResourceApi
from labrinth_client.errors.models import AuthError
from labrinth_client.models import EditableProject, Project, ProjectIdentifier
from labrinth_client.operation import Operation, body_param, path_param, query_param, raises, returns

GET_PROJECT = Operation(
    operation_id="getProject",
    method="GET",
    path="/project/{id|slug}",
    parameters=(path_param("id_slug", wire_name="id|slug"),),
    return_type=Project,
    responses={200: returns(Project)},
)

GET_PROJECTS = Operation(
    operation_id="getProjects",
    method="GET",
    path="/projects",
    parameters=(query_param("ids", required=True, array=True),),
    return_type=list[Project],
    responses={200: returns(list[Project])},
)

CHECK_PROJECT_VALIDITY = Operation(
    operation_id="checkProjectValidity",
    method="GET",
    path="/project/{id|slug}/check",
    parameters=(path_param("id_slug", wire_name="id|slug"),),
    return_type=ProjectIdentifier,
    responses={200: returns(ProjectIdentifier)},
)

MODIFY_PROJECT = Operation(
    operation_id="modifyProject",
    method="PATCH",
    path="/project/{id|slug}",
    parameters=(
        path_param("id_slug", wire_name="id|slug"),
        body_param("editable_project", required=False),
    ),
    responses={401: raises(AuthError)},
)

DELETE_PROJECT = Operation(
    operation_id="deleteProject",
    method="DELETE",
    path="/project/{id|slug}",
    parameters=(path_param("id_slug", wire_name="id|slug"),),
    responses={401: raises(AuthError)},
)


class ProjectsApi(ResourceApi):
    get_project = Endpoint(GET_PROJECT, "Get a project from its ID or slug.")
    get_projects = Endpoint(GET_PROJECTS, "Get multiple projects.")
    check_project_validity = Endpoint(CHECK_PROJECT_VALIDITY, "Check that a project ID or slug exists.")
    modify_project = Endpoint(MODIFY_PROJECT, "Modify a project with the fields set on an EditableProject.")
    delete_project = Endpoint(DELETE_PROJECT, "Delete a project.")
