"""
Booking endpoints. Every route requires a token; all but create also
require the caller to own the booking.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from meetx.db.session import get_db
from meetx.schemas.booking import BookingCreate, BookingResponse, BookingUpdate, MessageResponse
from meetx.services.booking_service import (
    create_booking,
    delete_booking,
    get_booking,
    get_user_bookings,
    update_booking_status,
)
from meetx.core.security import get_current_user_id

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Book an activity.

    A user holds at most one booking per activity, whatever its status;
    a second attempt returns 409.
    """
    return await create_booking(db, user_id, booking_data.activity_id)


@router.get("/me", response_model=list[BookingResponse])
async def list_user_bookings(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get all bookings for the authenticated user, newest first."""
    return await get_user_bookings(db, user_id)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking_endpoint(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await get_booking(db, booking_id, user_id)


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking_endpoint(
    booking_id: int,
    update_data: BookingUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Change the booking status to pending, confirmed or cancelled."""
    return await update_booking_status(db, booking_id, user_id, update_data.status)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking_endpoint(
    booking_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await delete_booking(db, booking_id, user_id)
    return MessageResponse(message="Booking removed")
