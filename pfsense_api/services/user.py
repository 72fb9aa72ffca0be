from typing import List, Optional

from ..logging import get_logger
from ..models.user import User, UserGroup, UserGroupRequest, UserRequest
from .base import BaseService

logger = get_logger(__name__)

USER_ENDPOINT = "api/v2/user"
USERS_ENDPOINT = "api/v2/users"
USER_GROUP_ENDPOINT = "api/v2/user/group"
USER_GROUPS_ENDPOINT = "api/v2/user/groups"


class UserService(BaseService):
    """Local users and groups (v2 API)."""

    def list_users(self) -> List[User]:
        return self._list_models(USERS_ENDPOINT, User)

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get_model(USER_ENDPOINT, User, params={"id": str(user_id)})

    def create_user(self, request: UserRequest) -> Optional[User]:
        logger.info(f"Creating user {request.name}")
        return self._write_model("POST", USER_ENDPOINT, User, payload=self._payload(request))

    def update_user(self, user_id: int, request: UserRequest) -> Optional[User]:
        logger.info(f"Updating user {user_id}")
        return self._write_model(
            "PATCH", USER_ENDPOINT, User, payload=self._payload(request, id=user_id))

    def delete_user(self, user_id: int) -> Optional[User]:
        """Delete a user and return the record as it was before deletion."""
        logger.info(f"Deleting user {user_id}")
        return self._write_model("DELETE", USER_ENDPOINT, User, params={"id": str(user_id)})

    def list_user_groups(self) -> List[UserGroup]:
        return self._list_models(USER_GROUPS_ENDPOINT, UserGroup)

    def get_user_group(self, group_id: int) -> Optional[UserGroup]:
        return self._get_model(USER_GROUP_ENDPOINT, UserGroup, params={"id": str(group_id)})

    def create_user_group(self, request: UserGroupRequest) -> Optional[UserGroup]:
        logger.info(f"Creating user group {request.name}")
        return self._write_model(
            "POST", USER_GROUP_ENDPOINT, UserGroup, payload=self._payload(request))

    def update_user_group(self, group_id: int, request: UserGroupRequest) -> Optional[UserGroup]:
        logger.info(f"Updating user group {group_id}")
        return self._write_model(
            "PATCH", USER_GROUP_ENDPOINT, UserGroup, payload=self._payload(request, id=group_id))

    def delete_user_group(self, group_id: int) -> Optional[UserGroup]:
        """Delete a user group and return the record as it was before deletion."""
        logger.info(f"Deleting user group {group_id}")
        return self._write_model(
            "DELETE", USER_GROUP_ENDPOINT, UserGroup, params={"id": str(group_id)})

    def replace_user_groups(self, groups: List[UserGroupRequest]) -> List[UserGroup]:
        """Replace every user group with ``groups`` and return the resulting list."""
        logger.info(f"Replacing user groups with {len(groups)} group(s)")
        response = self.client.put(
            USER_GROUPS_ENDPOINT, json_payload=[group.to_dict() for group in groups])
        return UserGroup.from_api_list(self._data(response))
