from app.config import settings
from app.database.json_store import RecordStore
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationFailedError
from app.modules.study_groups.models import GroupPost, Meeting, StudyGroup
from app.modules.study_groups.schemas import GroupPostCreate, LeaveResponse, MeetingCreate, StudyGroupCreate
from typing import List
import logging

logger = logging.getLogger(__name__)


class StudyGroupService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_groups(self) -> List[StudyGroup]:
        return self.store.study_groups.all()

    def get_group_by_id(self, group_id: str) -> StudyGroup:
        group = self.store.study_groups.get(group_id)
        if group is None:
            raise NotFoundError("Study group not found")
        return group

    def _get_member_group(self, group_id: str, user_id: str, detail: str) -> StudyGroup:
        group = self.get_group_by_id(group_id)
        if user_id not in group.members:
            raise ForbiddenError(detail)
        return group

    def create_group(self, group_data: StudyGroupCreate, user_id: str) -> StudyGroup:
        """Create a study group with the creator as its only member"""
        if not (group_data.name.strip() and group_data.description.strip() and group_data.subject.strip()):
            raise ValidationFailedError("Name, description, and subject are required")
        with self.store.transaction(self.store.study_groups):
            group = self.store.study_groups.add(StudyGroup(
                name=group_data.name.strip(),
                description=group_data.description.strip(),
                subject=group_data.subject.strip(),
                max_members=group_data.max_members or settings.study_group_default_max_members,
                schedule=group_data.schedule,
                created_by=user_id,
                members=[user_id]
            ))
        logger.info(f"Study group {group.id} created by {user_id}")
        return group

    def join(self, group_id: str, user_id: str) -> StudyGroup:
        with self.store.transaction(self.store.study_groups):
            group = self.get_group_by_id(group_id)
            if user_id in group.members:
                raise ConflictError("You are already a member of this group")
            if group.is_full:
                raise ConflictError("This study group is full")
            group.members.append(user_id)
        return group

    def leave(self, group_id: str, user_id: str) -> LeaveResponse:
        """
        Remove a member. A departing creator hands the group to the next
        member; the last member leaving deletes the group.
        """
        with self.store.transaction(self.store.study_groups):
            group = self.get_group_by_id(group_id)
            if user_id not in group.members:
                raise ConflictError("You are not a member of this group")
            group.members.remove(user_id)
            if group.created_by == user_id and group.members:
                group.created_by = group.members[0]
            deleted = not group.members
            if deleted:
                self.store.study_groups.remove(group)
        if deleted:
            logger.info(f"Study group {group_id} deleted after last member left")
        return LeaveResponse(message="Successfully left the study group", group_deleted=deleted)

    def add_post(self, group_id: str, post_data: GroupPostCreate, user_id: str) -> GroupPost:
        with self.store.transaction(self.store.study_groups):
            group = self._get_member_group(group_id, user_id, "You must be a member to post")
            post = GroupPost(user_id=user_id, content=post_data.content)
            group.posts.append(post)
        return post

    def list_posts(self, group_id: str) -> List[GroupPost]:
        return list(self.get_group_by_id(group_id).posts)

    def schedule_meeting(self, group_id: str, meeting_data: MeetingCreate, user_id: str) -> Meeting:
        with self.store.transaction(self.store.study_groups):
            group = self._get_member_group(group_id, user_id, "You must be a member to schedule meetings")
            meeting = Meeting(
                title=meeting_data.title,
                description=meeting_data.description,
                datetime=meeting_data.datetime,
                location=meeting_data.location or "Online",
                scheduled_by=user_id,
                attendees=[user_id]
            )
            group.meetings.append(meeting)
        return meeting

    def list_meetings(self, group_id: str) -> List[Meeting]:
        return list(self.get_group_by_id(group_id).meetings)
