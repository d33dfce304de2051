from meetx.models.user import User
from meetx.models.activity import Activity
from meetx.models.booking import Booking, BookingStatus

__all__ = ["User", "Activity", "Booking", "BookingStatus"]
