"""Notification operations.

All of them need a token with the matching ``NOTIFICATION_*`` scope and
answer 401 with an ``AuthError`` body otherwise.
"""

from labrinth_client.api.base import Endpoint, ResourceApi
from labrinth_client.errors.models import AuthError
from labrinth_client.models import Notification
from labrinth_client.operation import Operation, path_param, query_param, raises, returns

GET_USER_NOTIFICATIONS = Operation(
    operation_id="getUserNotifications",
    method="GET",
    path="/user/{id|username}/notifications",
    parameters=(path_param("id_username", wire_name="id|username"),),
    return_type=list[Notification],
    responses={200: returns(list[Notification]), 401: raises(AuthError)},
)

GET_NOTIFICATION = Operation(
    operation_id="getNotification",
    method="GET",
    path="/notification/{id}",
    parameters=(path_param("id"),),
    return_type=Notification,
    responses={200: returns(Notification), 401: raises(AuthError)},
)

READ_NOTIFICATION = Operation(
    operation_id="readNotification",
    method="PATCH",
    path="/notification/{id}",
    parameters=(path_param("id"),),
    responses={401: raises(AuthError)},
)

DELETE_NOTIFICATION = Operation(
    operation_id="deleteNotification",
    method="DELETE",
    path="/notification/{id}",
    parameters=(path_param("id"),),
    responses={401: raises(AuthError)},
)

GET_NOTIFICATIONS = Operation(
    operation_id="getNotifications",
    method="GET",
    path="/notifications",
    parameters=(query_param("ids", required=True, array=True),),
    return_type=list[Notification],
    responses={200: returns(list[Notification]), 401: raises(AuthError)},
)

READ_NOTIFICATIONS = Operation(
    operation_id="readNotifications",
    method="PATCH",
    path="/notifications",
    parameters=(query_param("ids", required=True, array=True),),
    responses={401: raises(AuthError)},
)

DELETE_NOTIFICATIONS = Operation(
    operation_id="deleteNotifications",
    method="DELETE",
    path="/notifications",
    parameters=(query_param("ids", required=True, array=True),),
    responses={401: raises(AuthError)},
)


class NotificationsApi(ResourceApi):
    get_user_notifications = Endpoint(GET_USER_NOTIFICATIONS, "Get a user's notifications.")
    get_notification = Endpoint(GET_NOTIFICATION, "Get a notification from its ID.")
    read_notification = Endpoint(READ_NOTIFICATION, "Mark a notification as read.")
    delete_notification = Endpoint(DELETE_NOTIFICATION, "Delete a notification.")
    get_notifications = Endpoint(GET_NOTIFICATIONS, "Get multiple notifications.")
    read_notifications = Endpoint(READ_NOTIFICATIONS, "Mark multiple notifications as read.")
    delete_notifications = Endpoint(DELETE_NOTIFICATIONS, "Delete multiple notifications.")
