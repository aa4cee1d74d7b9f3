from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Registration payload; ``email`` is the login name."""

    email: EmailStr
    username: str = Field(..., min_length=3, max_length=50)
    # bcrypt only reads the first 72 bytes
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    username: Optional[str] = None
