from typing import Literal

from pydantic import BaseModel, Field


class Token(BaseModel):
    """Response of ``POST /auth/token``."""

    access_token: str
    token_type: Literal["Bearer"] = "Bearer"
    expires_in: int = Field(..., description="Seconds until the token expires.")
