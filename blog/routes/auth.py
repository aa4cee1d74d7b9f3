from datetime import timedelta
import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from blog.auth import create_access_token
from blog.config import settings
from blog.database import get_db
from blog.schemas.token import Token
from blog.schemas.user import UserCreate, UserResponse
from blog.services.auth_service import authenticate_user, register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, db: AsyncSession = Depends(get_db)):
    return await register_user(data.email, data.username, data.password, db)


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Exchange email (as ``username``) and password for a bearer token."""
    user = await authenticate_user(form_data.username, form_data.password, db)

    expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(data={"sub": user.email}, expires_delta=expires)
    logger.info("Access token created for user id=%d", user.id)

    return {
        "access_token": access_token,
        "token_type": "Bearer",
        "expires_in": int(expires.total_seconds()),
    }
