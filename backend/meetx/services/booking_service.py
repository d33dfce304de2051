"""
Booking ledger: at most one booking per (user, activity), owner-only access.

UNIQUENESS STRATEGY: Constraint is authoritative, lookup is advisory
=====================================================================

Problem:
  Two requests from the same user book the same activity simultaneously.
  Both look for an existing booking, both find none, both insert.
  Result: Double booking.

Solution:
  The bookings table carries UNIQUE (user_id, activity_id)
  (uq_user_activity_booking). Whichever insert reaches the database second
  fails with an IntegrityError, which we translate to DuplicateBookingError.

  1. Look up an existing booking for the pair (cheap, gives a clean error
     in the common sequential case)
  2. INSERT the booking
  3. On IntegrityError, roll back and confirm the pair is now taken; only
     then report a duplicate. Any other integrity failure is re-raised.

  The lookup in step 1 never decides correctness on its own.

Ownership:
  Existence is checked before ownership, so a caller asking for somebody
  else's booking gets ForbiddenError (403) and a missing booking is
  BookingNotFoundError (404).

Status:
  pending / confirmed / cancelled, initial confirmed. The owner may set any
  of the three at any time; no transition rules are applied.
"""

import time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from meetx.models.activity import Activity
from meetx.models.booking import Booking, BookingStatus
from meetx.core.exceptions import (
    ActivityNotFoundError,
    BookingNotFoundError,
    DuplicateBookingError,
    ForbiddenError,
)
from meetx.core.metrics import booking_latency, record_booking_attempt
from meetx.core.logging import get_logger

logger = get_logger(__name__)


async def _find_existing_booking(db: AsyncSession, user_id: int, activity_id: int) -> Optional[Booking]:
    result = await db.execute(
        select(Booking).where(
            Booking.user_id == user_id,
            Booking.activity_id == activity_id,
        )
    )
    return result.scalar_one_or_none()


async def create_booking(db: AsyncSession, user_id: int, activity_id: int) -> Booking:
    """
    Book an activity for a user.
    Raises ActivityNotFoundError or DuplicateBookingError.
    """
    started = time.perf_counter()

    activity = await db.get(Activity, activity_id)
    if not activity:
        record_booking_attempt("not_found")
        raise ActivityNotFoundError()

    if await _find_existing_booking(db, user_id, activity_id):
        logger.info("booking_duplicate", user_id=user_id, activity_id=activity_id, detected_by="lookup")
        record_booking_attempt("duplicate")
        raise DuplicateBookingError()

    booking = Booking(
        user_id=user_id,
        activity_id=activity_id,
        status=BookingStatus.CONFIRMED.value,
    )
    booking.activity = activity
    db.add(booking)

    try:
        await db.flush()
    except IntegrityError:
        # Lost the race, or something else broke; the constraint tells us which
        await db.rollback()
        taken = await db.execute(
            select(Booking.id).where(
                Booking.user_id == user_id,
                Booking.activity_id == activity_id,
            )
        )
        if taken.scalar_one_or_none() is None:
            record_booking_attempt("error")
            raise
        logger.info("booking_duplicate", user_id=user_id, activity_id=activity_id, detected_by="constraint")
        record_booking_attempt("duplicate")
        raise DuplicateBookingError()

    booking_latency.observe(time.perf_counter() - started)
    record_booking_attempt("success")
    logger.info(
        "booking_created",
        booking_id=booking.id,
        user_id=user_id,
        activity_id=activity_id,
    )
    return booking


async def get_user_bookings(db: AsyncSession, user_id: int) -> list[Booking]:
    """All bookings owned by the user with their activity, newest first."""
    result = await db.execute(
        select(Booking)
        .options(selectinload(Booking.activity))
        .where(Booking.user_id == user_id)
        .order_by(Booking.created_at.desc(), Booking.id.desc())
    )
    return list(result.scalars().all())


async def get_booking(db: AsyncSession, booking_id: int, user_id: int) -> Booking:
    """
    Fetch a booking the caller owns.
    404 if it does not exist, 403 if it belongs to someone else.
    """
    result = await db.execute(
        select(Booking)
        .options(selectinload(Booking.activity))
        .where(Booking.id == booking_id)
    )
    booking = result.scalar_one_or_none()

    if not booking:
        raise BookingNotFoundError()

    if booking.user_id != user_id:
        logger.warning("booking_access_denied", booking_id=booking_id, owner_id=booking.user_id)
        raise ForbiddenError("Not authorized to access this booking")

    return booking


async def update_booking_status(
    db: AsyncSession,
    booking_id: int,
    user_id: int,
    new_status: BookingStatus,
) -> Booking:
    """Set the status unconditionally (re-confirming a cancelled booking is allowed)."""
    booking = await get_booking(db, booking_id, user_id)

    previous = booking.status
    booking.status = BookingStatus(new_status).value
    await db.flush()

    logger.info(
        "booking_status_updated",
        booking_id=booking.id,
        previous=previous,
        status=booking.status,
    )
    return booking


async def delete_booking(db: AsyncSession, booking_id: int, user_id: int) -> None:
    booking = await get_booking(db, booking_id, user_id)
    await db.delete(booking)
    await db.flush()

    logger.info("booking_deleted", booking_id=booking_id, activity_id=booking.activity_id)
