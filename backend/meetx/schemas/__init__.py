from meetx.schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse
from meetx.schemas.activity import ActivityCreate, ActivityUpdate, ActivitySummary, ActivityResponse
from meetx.schemas.booking import BookingCreate, BookingUpdate, BookingResponse, MessageResponse

__all__ = [
    "UserCreate", "UserLogin", "UserResponse", "AuthResponse",
    "ActivityCreate", "ActivityUpdate", "ActivitySummary", "ActivityResponse",
    "BookingCreate", "BookingUpdate", "BookingResponse", "MessageResponse",
]
