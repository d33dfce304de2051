"""
Activity service handling CRUD operations.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from meetx.models.activity import Activity
from meetx.schemas.activity import ActivityCreate, ActivityUpdate
from meetx.core.exceptions import ActivityNotFoundError
from meetx.core.logging import get_logger

logger = get_logger(__name__)


async def create_activity(db: AsyncSession, activity_data: ActivityCreate, creator_id: int) -> Activity:
    activity = Activity(**activity_data.model_dump(), created_by=creator_id)
    db.add(activity)
    await db.flush()
    await db.refresh(activity)

    logger.info("activity_created", activity_id=activity.id, title=activity.title)
    return activity


async def get_activity(db: AsyncSession, activity_id: int) -> Activity:
    """Get a single activity by ID."""
    activity = await db.get(Activity, activity_id)
    if not activity:
        raise ActivityNotFoundError()
    return activity


async def list_activities(db: AsyncSession) -> list[Activity]:
    """All activities, soonest first. Uses the ix_activities_date_time index."""
    result = await db.execute(
        select(Activity).order_by(Activity.date.asc(), Activity.time.asc(), Activity.id.asc())
    )
    return list(result.scalars().all())


async def update_activity(db: AsyncSession, activity_id: int, update_data: ActivityUpdate) -> Activity:
    """Apply only the fields present in the request body."""
    activity = await get_activity(db, activity_id)

    changes = update_data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(activity, field, value)
    await db.flush()
    await db.refresh(activity)

    logger.info("activity_updated", activity_id=activity.id, fields=sorted(changes))
    return activity


async def delete_activity(db: AsyncSession, activity_id: int) -> None:
    """Delete an activity; its bookings go with it via the ORM cascade."""
    activity = await get_activity(db, activity_id)
    await db.delete(activity)
    await db.flush()

    logger.info("activity_deleted", activity_id=activity_id)
