"""
Activity endpoints. Reads are public, writes need a valid token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from meetx.db.session import get_db
from meetx.schemas.activity import ActivityCreate, ActivityResponse, ActivitySummary, ActivityUpdate
from meetx.schemas.booking import MessageResponse
from meetx.services.activity_service import (
    create_activity,
    delete_activity,
    get_activity,
    list_activities,
    update_activity,
)
from meetx.core.security import get_current_user_id

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("/", response_model=list[ActivitySummary])
async def list_activities_endpoint(db: AsyncSession = Depends(get_db)):
    """List all activities ordered by date and time."""
    return await list_activities(db)


@router.get("/{activity_id}", response_model=ActivityResponse)
async def get_activity_endpoint(activity_id: int, db: AsyncSession = Depends(get_db)):
    return await get_activity(db, activity_id)


@router.post("/", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity_endpoint(
    activity_data: ActivityCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a new activity. The caller is recorded as its creator."""
    return await create_activity(db, activity_data, user_id)


@router.put("/{activity_id}", response_model=ActivityResponse)
async def update_activity_endpoint(
    activity_id: int,
    update_data: ActivityUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await update_activity(db, activity_id, update_data)


@router.delete("/{activity_id}", response_model=MessageResponse)
async def delete_activity_endpoint(
    activity_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_activity(db, activity_id)
    return MessageResponse(message="Activity removed")
