import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.auth import hash_password, verify_password
from blog.exceptions import AuthenticationError, ConflictError
from blog.models.user import User

logger = logging.getLogger(__name__)


async def authenticate_user(email: str, password: str, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalars().first()
    if user and verify_password(password, user.hashed_password):
        return user
    logger.warning("Login failed for email: %s", email)
    raise AuthenticationError("Invalid email or password")


async def register_user(email: str, username: str, password: str, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.email == email))
    if result.scalars().first():
        raise ConflictError("Email already registered", details={"field": "email"})

    new_user = User(
        email=email,
        username=username,
        hashed_password=hash_password(password),
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    logger.info("User registered: id=%d", new_user.id)
    return new_user
