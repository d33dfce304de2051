"""
Booking model representing a user's reservation of an activity.

Key design decisions:
- Unique constraint on (user_id, activity_id) is the authoritative guard against
  double-booking; the service-level lookup before insert is only a fast path
- The constraint covers every status, so a cancelled booking still occupies the pair
- Status is freely settable by the owner; no transition rules are enforced
"""

import enum

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from meetx.db.base import Base, TimestampMixin


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    activity_id = Column(Integer, ForeignKey("activities.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=BookingStatus.CONFIRMED.value)

    # Relationships
    user = relationship("User", back_populates="bookings")
    activity = relationship("Activity", back_populates="bookings")

    __table_args__ = (
        UniqueConstraint("user_id", "activity_id", name="uq_user_activity_booking"),
        CheckConstraint("status IN ('pending', 'confirmed', 'cancelled')", name="check_booking_status"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, activity={self.activity_id}, status={self.status})>"
