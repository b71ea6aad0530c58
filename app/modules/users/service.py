from app.database.json_store import RecordStore
from app.database.records import utc_now
from app.core.exceptions import NotFoundError
from app.modules.communities.models import Community
from app.modules.events.models import Event
from app.modules.users.models import User
from app.modules.users.schemas import UserUpdate, UserResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

LIST_FIELDS = ("interests", "hobbies")


class UserService:
    def __init__(self, store: RecordStore):
        self.store = store

    def _get_user(self, user_id: str) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_user_by_id(self, user_id: str) -> UserResponse:
        """Get public user profile by ID"""
        return UserResponse.model_validate(self._get_user(user_id))

    def update_user(self, user_id: str, user_data: UserUpdate) -> UserResponse:
        """Apply the provided profile fields; null for a list field clears it"""
        changes = {field: getattr(user_data, field) for field in user_data.model_fields_set}
        if not changes.get("name"):
            changes.pop("name", None)
        for field in LIST_FIELDS:
            if field in changes and changes[field] is None:
                changes[field] = []
        with self.store.transaction(self.store.users):
            user = self._get_user(user_id)
            for field, value in changes.items():
                setattr(user, field, value)
            user.updated_at = utc_now()
        logger.info(f"Updated profile {user_id}: {sorted(changes)}")
        return UserResponse.model_validate(user)

    def get_user_events(self, user_id: str) -> List[Event]:
        """Events the user organizes or attends"""
        return [
            event for event in self.store.events
            if event.organizer_id == user_id or user_id in event.attendees
        ]

    def get_user_communities(self, user_id: str) -> List[Community]:
        return [c for c in self.store.communities if user_id in c.members]
