from app.database.json_store import RecordStore
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationFailedError
from app.modules.communities.models import Community
from app.modules.communities.schemas import CommunityCreate
from app.modules.events.models import Event
from typing import List
import logging

logger = logging.getLogger(__name__)


class CommunityService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_communities(self) -> List[Community]:
        return self.store.communities.all()

    def get_community_by_id(self, community_id: str) -> Community:
        community = self.store.communities.get(community_id)
        if community is None:
            raise NotFoundError("Community not found")
        return community

    def create_community(self, community_data: CommunityCreate, user_id: str) -> Community:
        """Create a community; the organizer is its first member"""
        name = community_data.name.strip()
        if not name:
            raise ValidationFailedError("Name is required")
        with self.store.transaction(self.store.communities):
            community = self.store.communities.add(Community(
                **community_data.model_dump(exclude={"name"}),
                name=name,
                organizer_id=user_id,
                members=[user_id]
            ))
        logger.info(f"Community {community.id} created by {user_id}")
        return community

    def join(self, community_id: str, user_id: str) -> Community:
        with self.store.transaction(self.store.communities):
            community = self.get_community_by_id(community_id)
            if user_id in community.members:
                raise ConflictError("Already a member of this community")
            community.members.append(user_id)
        logger.info(f"{user_id} joined community {community_id}")
        return community

    def leave(self, community_id: str, user_id: str) -> Community:
        """Remove a member; the organizer can never leave"""
        with self.store.transaction(self.store.communities):
            community = self.get_community_by_id(community_id)
            if community.organizer_id == user_id:
                raise ForbiddenError("Organizer cannot leave community")
            if user_id not in community.members:
                raise ConflictError("Not a member of this community")
            community.members.remove(user_id)
        logger.info(f"{user_id} left community {community_id}")
        return community

    def list_community_events(self, community_id: str) -> List[Event]:
        self.get_community_by_id(community_id)
        return [e for e in self.store.events if e.community_id == community_id]
