"""
User model: the credential store. Only the bcrypt digest of the password is kept.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from meetx.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(15), nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    bookings = relationship("Booking", back_populates="user")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
