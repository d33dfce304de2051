"""
Activity model: something users can book.

Key design decisions:
- `date` and `time` are stored separately (time as "HH:MM") and listings sort on both
- Deleting an activity removes its bookings through the ORM cascade
- `created_by` is optional and survives the creator's removal (SET NULL)
"""

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship

from meetx.db.base import Base, TimestampMixin


class Activity(Base, TimestampMixin):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)
    capacity = Column(Integer, nullable=False, default=10)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    bookings = relationship(
        "Booking",
        back_populates="activity",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("capacity > 0", name="check_activity_capacity_positive"),
        # Listing order: date, then time of day
        Index("ix_activities_date_time", "date", "time"),
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, title={self.title}, date={self.date} {self.time})>"
