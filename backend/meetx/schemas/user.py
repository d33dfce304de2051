"""
Pydantic schemas for user-related request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


def normalize_email(value: str) -> str:
    # Accounts are keyed on the lowercased address
    return value.strip().lower()


class UserCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    phone: str = Field(..., pattern=r"^\d{7,15}$")
    # 72 is the bcrypt input limit
    password: str = Field(..., min_length=8, max_length=72, pattern=r"^[A-Za-z\d]+$")

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def password_mixes_letters_and_digits(cls, value: str) -> str:
        if not any(c.isalpha() for c in value) or not any(c.isdigit() for c in value):
            raise ValueError("Password must include at least one letter and one number")
        return value


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return normalize_email(value)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str

    model_config = {"from_attributes": True}


class AuthResponse(UserResponse):
    """Public profile plus a freshly issued session token."""

    access_token: str
    token_type: str = "bearer"
