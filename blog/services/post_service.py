"""
Post Service

Owns the Post aggregate: categories, tags, lifecycle status and the
per-locale translations with their SEO records.

Rules enforced here:
    - post slugs are unique among posts
    - translation slugs are unique among translations
    - at most one translation per (post, locale)
    - publishing is idempotent and allowed from any status
    - deletes cascade explicitly: SEO -> translations -> associations -> post

Every public write runs its checks and its writes in the session's single
transaction and commits once. Unique constraints remain the final guard:
an IntegrityError raised on commit is rolled back and reported as a
conflict.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog.exceptions import (
    CategoryNotFoundError,
    ConflictError,
    LocaleConflictError,
    PostNotFoundError,
    ResourceNotFoundError,
    SlugConflictError,
    TranslationNotFoundError,
)
from blog.models import (
    Category,
    Media,
    Post,
    PostStatus,
    PostTranslation,
    Seo,
    Tag,
    post_categories,
    post_tags,
)
from blog.schemas.post import PostCreate, PostUpdate
from blog.schemas.translation import TranslationCreate, TranslationUpdate
from blog.utils.slugify import tag_slug

logger = logging.getLogger(__name__)

POST_FIELDS = ("title", "slug", "content", "excerpt", "status", "featured_image_id")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostService:
    """Service for posts and their translations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ============== Posts ==============

    async def create_draft(self, author_id: int, data: PostCreate) -> Post:
        """Create a post in DRAFT status.

        Raises:
            SlugConflictError: if another post already uses ``data.slug``.
            CategoryNotFoundError: if a category id does not exist.
        """
        await self._ensure_post_slug_free(data.slug)
        categories = await self._resolve_categories(data.category_ids)
        tags = await self._resolve_tags(data.tag_names)
        if data.featured_image_id is not None:
            await self._require_media(data.featured_image_id)

        post = Post(
            author_id=author_id,
            title=data.title,
            slug=data.slug,
            content=data.content,
            excerpt=data.excerpt,
            status=PostStatus.DRAFT,
            featured_image_id=data.featured_image_id,
            categories=categories,
            tags=tags,
        )
        self.db.add(post)
        await self._commit("Post")
        logger.info("Post created: id=%d slug=%s author_id=%d", post.id, post.slug, author_id)
        return await self.get_post_by_id(post.id)

    async def get_post_by_id(self, post_id: int) -> Post:
        """Return a post with categories, tags, featured image and translations."""
        result = await self.db.execute(
            select(Post)
            .options(
                selectinload(Post.categories),
                selectinload(Post.tags),
                selectinload(Post.featured_image),
                selectinload(Post.translations),
            )
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        post = result.scalar_one_or_none()
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def update_post(self, post_id: int, data: PostUpdate) -> Post:
        """Apply the fields present in ``data``.

        ``category_ids`` and ``tag_names`` replace the current sets. Moving
        the post to PUBLISHED here stamps ``published_at`` if it is unset.
        """
        post = await self.get_post_by_id(post_id)
        changes = data.model_dump(exclude_unset=True)

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != post.slug:
            await self._ensure_post_slug_free(new_slug)

        if "category_ids" in changes:
            post.categories = await self._resolve_categories(changes["category_ids"])
        if "tag_names" in changes:
            post.tags = await self._resolve_tags(changes["tag_names"])
        if changes.get("featured_image_id") is not None:
            await self._require_media(changes["featured_image_id"])

        if (
            changes.get("status") == PostStatus.PUBLISHED
            and post.status != PostStatus.PUBLISHED
            and post.published_at is None
        ):
            post.published_at = _utcnow()

        for field in POST_FIELDS:
            if field in changes:
                setattr(post, field, changes[field])

        await self._commit("Post")
        logger.info("Post updated: id=%d fields=%s", post_id, sorted(changes))
        return await self.get_post_by_id(post_id)

    async def publish_post(self, post_id: int) -> Post:
        """Publish a post. Publishing an already published post is a no-op."""
        post = await self.get_post_by_id(post_id)
        if post.status == PostStatus.PUBLISHED:
            return post

        previous = post.status
        post.status = PostStatus.PUBLISHED
        post.published_at = _utcnow()
        await self._commit("Post")
        logger.info("Post published: id=%d previous_status=%s", post_id, previous.value)
        return await self.get_post_by_id(post_id)

    async def delete_post(self, post_id: int) -> None:
        """Delete a post together with its translations and their SEO records."""
        post = await self.db.get(Post, post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        result = await self.db.execute(select(PostTranslation.id).where(PostTranslation.post_id == post_id))
        translation_ids = list(result.scalars().all())

        if translation_ids:
            await self.db.execute(delete(Seo).where(Seo.translation_id.in_(translation_ids)))
            await self.db.execute(delete(PostTranslation).where(PostTranslation.id.in_(translation_ids)))
        await self.db.execute(delete(post_categories).where(post_categories.c.post_id == post_id))
        await self.db.execute(delete(post_tags).where(post_tags.c.post_id == post_id))
        await self.db.execute(delete(Post).where(Post.id == post_id))

        await self._commit("Post")
        logger.info("Post deleted: id=%d translations=%d", post_id, len(translation_ids))

    # ============== Translations ==============

    async def list_published_posts(self, locale: str) -> list[PostTranslation]:
        """Translations in ``locale`` whose post is PUBLISHED, newest first."""
        result = await self.db.execute(
            select(PostTranslation)
            .join(PostTranslation.post)
            .options(
                selectinload(PostTranslation.seo),
                selectinload(PostTranslation.post).options(
                    selectinload(Post.categories),
                    selectinload(Post.tags),
                    selectinload(Post.featured_image),
                ),
            )
            .where(PostTranslation.locale == locale, Post.status == PostStatus.PUBLISHED)
            .order_by(Post.published_at.desc().nulls_last(), PostTranslation.id.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def find_by_slug_and_locale(self, slug: str, locale: str) -> PostTranslation:
        """Return the translation matching both ``slug`` and ``locale``, with SEO and full post."""
        result = await self.db.execute(
            select(PostTranslation)
            .options(
                selectinload(PostTranslation.seo),
                selectinload(PostTranslation.post).options(
                    selectinload(Post.categories),
                    selectinload(Post.tags),
                    selectinload(Post.featured_image),
                ),
            )
            .where(PostTranslation.slug == slug, PostTranslation.locale == locale)
            .execution_options(populate_existing=True)
        )
        translation = result.scalar_one_or_none()
        if translation is None:
            raise TranslationNotFoundError(locale, slug=slug)
        return translation

    async def list_translations(self, post_id: int) -> list[PostTranslation]:
        """Return every translation of a post ordered by locale."""
        if await self.db.get(Post, post_id) is None:
            raise PostNotFoundError(post_id)
        result = await self.db.execute(
            select(PostTranslation)
            .options(selectinload(PostTranslation.seo))
            .where(PostTranslation.post_id == post_id)
            .order_by(PostTranslation.locale)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def create_translation(self, post_id: int, data: TranslationCreate) -> PostTranslation:
        """Add a translation, and optionally its SEO record, to an existing post.

        Raises:
            PostNotFoundError: if the post does not exist.
            LocaleConflictError: if the post already has a translation for the locale.
            SlugConflictError: if another translation already uses ``data.slug``.
        """
        if await self.db.get(Post, post_id) is None:
            raise PostNotFoundError(post_id)
        if await self._find_translation(post_id, data.locale) is not None:
            raise LocaleConflictError(post_id, data.locale)
        await self._ensure_translation_slug_free(data.slug)

        translation = PostTranslation(
            post_id=post_id,
            locale=data.locale,
            title=data.title,
            content=data.content,
            excerpt=data.excerpt,
            slug=data.slug,
        )
        if data.seo_data is not None:
            translation.seo = Seo(**data.seo_data.model_dump())
        self.db.add(translation)

        await self._commit("Translation")
        logger.info(
            "Translation created: post_id=%d locale=%s seo=%s",
            post_id,
            data.locale,
            data.seo_data is not None,
        )
        return await self._require_translation(post_id, data.locale)

    async def update_translation(self, post_id: int, locale: str, data: TranslationUpdate) -> PostTranslation:
        """Apply the fields present in ``data``; SEO fields are merged in place."""
        translation = await self._require_translation(post_id, locale)
        changes = data.model_dump(exclude_unset=True, exclude={"seo_data"})

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != translation.slug:
            await self._ensure_translation_slug_free(new_slug)

        for field, value in changes.items():
            setattr(translation, field, value)

        if data.seo_data is not None:
            seo_changes = data.seo_data.model_dump(exclude_unset=True)
            if translation.seo is None:
                translation.seo = Seo(**seo_changes)
            else:
                for field, value in seo_changes.items():
                    setattr(translation.seo, field, value)

        await self._commit("Translation")
        logger.info("Translation updated: post_id=%d locale=%s", post_id, locale)
        return await self._require_translation(post_id, locale)

    async def delete_translation(self, post_id: int, locale: str) -> None:
        """Delete a translation, removing its SEO record first."""
        translation = await self._require_translation(post_id, locale)

        await self.db.execute(delete(Seo).where(Seo.translation_id == translation.id))
        await self.db.execute(delete(PostTranslation).where(PostTranslation.id == translation.id))

        await self._commit("Translation")
        logger.info("Translation deleted: post_id=%d locale=%s", post_id, locale)

    # ============== Helpers ==============

    async def _commit(self, resource_type: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning("%s write rejected by a constraint: %s", resource_type, e.orig)
            raise ConflictError(f"{resource_type} conflicts with an existing record") from e

    async def _ensure_post_slug_free(self, slug: str) -> None:
        result = await self.db.execute(select(Post.id).where(Post.slug == slug))
        if result.scalar_one_or_none() is not None:
            raise SlugConflictError("Post", slug)

    async def _ensure_translation_slug_free(self, slug: str) -> None:
        result = await self.db.execute(select(PostTranslation.id).where(PostTranslation.slug == slug))
        if result.scalar_one_or_none() is not None:
            raise SlugConflictError("Translation", slug)

    async def _find_translation(self, post_id: int, locale: str) -> PostTranslation | None:
        result = await self.db.execute(
            select(PostTranslation)
            .options(selectinload(PostTranslation.seo))
            .where(PostTranslation.post_id == post_id, PostTranslation.locale == locale)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _require_translation(self, post_id: int, locale: str) -> PostTranslation:
        translation = await self._find_translation(post_id, locale)
        if translation is None:
            raise TranslationNotFoundError(locale, post_id=post_id)
        return translation

    async def _require_media(self, media_id: int) -> Media:
        media = await self.db.get(Media, media_id)
        if media is None:
            raise ResourceNotFoundError("Media", media_id)
        return media

    async def _resolve_categories(self, category_ids: Iterable[int]) -> list[Category]:
        ids = list(dict.fromkeys(category_ids))
        result = await self.db.execute(select(Category).where(Category.id.in_(ids)))
        found = {category.id: category for category in result.scalars().all()}
        for category_id in ids:
            if category_id not in found:
                raise CategoryNotFoundError(category_id)
        return [found[category_id] for category_id in ids]

    async def _resolve_tags(self, names: Iterable[str]) -> list[Tag]:
        """Connect-or-create tags by slug.

        An existing tag keeps its stored name even when referenced by a
        differently spelled name with the same slug.
        """
        wanted: dict[str, str] = {}
        for name in names:
            wanted.setdefault(tag_slug(name), name.strip())
        if not wanted:
            return []

        result = await self.db.execute(select(Tag).where(Tag.slug.in_(list(wanted))))
        existing = {tag.slug: tag for tag in result.scalars().all()}

        tags = []
        for slug, name in wanted.items():
            tag = existing.get(slug)
            if tag is None:
                tag = Tag(name=name, slug=slug)
                self.db.add(tag)
                logger.debug("Tag queued for creation: slug=%s", slug)
            tags.append(tag)
        return tags
