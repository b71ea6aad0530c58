from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.study_groups.models import GroupPost, Meeting, StudyGroup
from app.modules.study_groups.schemas import GroupPostCreate, LeaveResponse, MeetingCreate, StudyGroupCreate
from app.modules.study_groups.service import StudyGroupService
from typing import List

router = APIRouter(prefix="/study-groups", tags=["study-groups"])


def get_study_group_service(store: RecordStore = Depends(get_store)) -> StudyGroupService:
    return StudyGroupService(store)


@router.get("", response_model=List[StudyGroup])
async def list_study_groups(
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    return service.list_groups()


@router.get("/{group_id}", response_model=StudyGroup)
async def get_study_group(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    return service.get_group_by_id(group_id)


@router.post("", response_model=StudyGroup, status_code=201)
async def create_study_group(
    group_data: StudyGroupCreate,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    """Create a study group"""
    return service.create_group(group_data, user_id)


@router.post("/{group_id}/join", response_model=StudyGroup)
async def join_study_group(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    """Join a study group if it has room"""
    return service.join(group_id, user_id)


@router.post("/{group_id}/leave", response_model=LeaveResponse)
async def leave_study_group(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    return service.leave(group_id, user_id)


@router.post("/{group_id}/posts", response_model=GroupPost, status_code=201)
async def add_group_post(
    group_id: str,
    post_data: GroupPostCreate,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    """Post to a study group (members only)"""
    return service.add_post(group_id, post_data, user_id)


@router.get("/{group_id}/posts", response_model=List[GroupPost])
async def list_group_posts(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    return service.list_posts(group_id)


@router.post("/{group_id}/meetings", response_model=Meeting, status_code=201)
async def schedule_meeting(
    group_id: str,
    meeting_data: MeetingCreate,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    """Schedule a meeting (members only)"""
    return service.schedule_meeting(group_id, meeting_data, user_id)


@router.get("/{group_id}/meetings", response_model=List[Meeting])
async def list_meetings(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    service: StudyGroupService = Depends(get_study_group_service)
):
    return service.list_meetings(group_id)
