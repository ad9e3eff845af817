"""User operations."""

from labrinth_client.api.base import Endpoint, ResourceApi
from labrinth_client.errors.models import AuthError
from labrinth_client.models import Project, User
from labrinth_client.operation import Operation, path_param, query_param, raises, returns

GET_USER = Operation(
    operation_id="getUser",
    method="GET",
    path="/user/{id|username}",
    parameters=(path_param("id_username", wire_name="id|username"),),
    return_type=User,
    responses={200: returns(User)},
)

GET_USER_FROM_AUTH = Operation(
    operation_id="getUserFromAuth",
    method="GET",
    path="/user",
    return_type=User,
    responses={200: returns(User), 401: raises(AuthError)},
)

GET_USERS = Operation(
    operation_id="getUsers",
    method="GET",
    path="/users",
    parameters=(query_param("ids", required=True, array=True),),
    return_type=list[User],
    responses={200: returns(list[User])},
)

GET_USER_PROJECTS = Operation(
    operation_id="getUserProjects",
    method="GET",
    path="/user/{id|username}/projects",
    parameters=(path_param("id_username", wire_name="id|username"),),
    return_type=list[Project],
    responses={200: returns(list[Project])},
)


class UsersApi(ResourceApi):
    get_user = Endpoint(GET_USER, "Get a user from their ID or username.")
    get_user_from_auth = Endpoint(GET_USER_FROM_AUTH, "Get the user the token belongs to.")
    get_users = Endpoint(GET_USERS, "Get multiple users.")
    get_user_projects = Endpoint(GET_USER_PROJECTS, "Get a user's projects.")
