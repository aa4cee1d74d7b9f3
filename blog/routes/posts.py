"""
Post & Translation Routes

    POST   /posts                                  → create draft (authenticated)
    GET    /posts/id/{post_id}                     → post with all relations
    GET    /posts/published/{locale}               → published translations in a locale
    PUT    /posts/{post_id}/publish                → publish (idempotent)
    PUT    /posts/{post_id}                        → partial update
    DELETE /posts/{post_id}                        → delete with translations and SEO
    GET    /posts/{post_id}/translations           → all translations of a post
    POST   /posts/{post_id}/translation            → create translation
    PUT    /posts/{post_id}/translation/{locale}   → update translation
    DELETE /posts/{post_id}/translation/{locale}   → delete translation and SEO
    GET    /posts/{slug}/{locale}                  → translation by slug + locale

Numeric routes use the ``int`` path convertor so that a slug never
matches them; ``/{slug}/{locale}`` is registered last.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog.auth import get_current_user
from blog.database import get_db
from blog.models.user import User
from blog.schemas.post import PostCreate, PostDetailResponse, PostUpdate
from blog.schemas.translation import (
    PublishedTranslationResponse,
    TranslationCreate,
    TranslationResponse,
    TranslationUpdate,
    TranslationWithPostResponse,
)
from blog.services.post_service import PostService

router = APIRouter(prefix="/posts")


@router.post("", response_model=PostDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a new draft authored by the current user."""
    service = PostService(db)
    return await service.create_draft(current_user.id, data)


@router.get("/id/{post_id:int}", response_model=PostDetailResponse)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    return await service.get_post_by_id(post_id)


@router.get("/published/{locale}", response_model=list[PublishedTranslationResponse])
async def list_published(locale: str, db: AsyncSession = Depends(get_db)):
    """Published posts in one locale, newest first (public)."""
    service = PostService(db)
    return await service.list_published_posts(locale)


@router.put("/{post_id:int}/publish", response_model=PostDetailResponse)
async def publish_post(post_id: int, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    return await service.publish_post(post_id)


@router.put("/{post_id:int}", response_model=PostDetailResponse)
async def update_post(post_id: int, data: PostUpdate, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    return await service.update_post(post_id, data)


@router.delete("/{post_id:int}")
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    await service.delete_post(post_id)
    return {"success": True}


@router.get("/{post_id:int}/translations", response_model=list[TranslationResponse])
async def list_translations(post_id: int, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    return await service.list_translations(post_id)


@router.post(
    "/{post_id:int}/translation",
    response_model=TranslationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_translation(post_id: int, data: TranslationCreate, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    return await service.create_translation(post_id, data)


@router.put("/{post_id:int}/translation/{locale}", response_model=TranslationResponse)
async def update_translation(
    post_id: int,
    locale: str,
    data: TranslationUpdate,
    db: AsyncSession = Depends(get_db),
):
    service = PostService(db)
    return await service.update_translation(post_id, locale, data)


@router.delete("/{post_id:int}/translation/{locale}")
async def delete_translation(post_id: int, locale: str, db: AsyncSession = Depends(get_db)):
    service = PostService(db)
    await service.delete_translation(post_id, locale)
    return {"success": True}


@router.get("/{slug}/{locale}", response_model=TranslationWithPostResponse)
async def get_by_slug(slug: str, locale: str, db: AsyncSession = Depends(get_db)):
    """A single translation with its SEO data and parent post (public)."""
    service = PostService(db)
    return await service.find_by_slug_and_locale(slug, locale)
