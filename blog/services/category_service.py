"""
Category Service

CRUD over the category tree. ``parent_id`` is stored as given: there is no
cycle detection, and a dangling parent is rejected only by the database.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.exceptions import CategoryNotFoundError, ConflictError, SlugConflictError
from blog.models import Category, post_categories
from blog.schemas.category import CategoryCreate, CategoryUpdate
from blog.utils.slugify import slugify

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: CategoryCreate) -> Category:
        slug = data.slug or slugify(data.name)
        await self._ensure_slug_free(slug)

        category = Category(
            name=data.name,
            slug=slug,
            description=data.description,
            parent_id=data.parent_id,
        )
        self.db.add(category)
        await self._commit()
        logger.info("Category created: id=%d slug=%s", category.id, slug)
        return category

    async def list_categories(self) -> list[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def get(self, category_id: int) -> Category:
        category = await self.db.get(Category, category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def update(self, category_id: int, data: CategoryUpdate) -> Category:
        category = await self.get(category_id)
        changes = data.model_dump(exclude_unset=True)

        if "slug" in changes and changes["slug"] != category.slug:
            await self._ensure_slug_free(changes["slug"])

        for field, value in changes.items():
            setattr(category, field, value)

        await self._commit()
        await self.db.refresh(category)
        logger.info("Category updated: id=%d fields=%s", category_id, sorted(changes))
        return category

    async def delete(self, category_id: int) -> Category:
        """Delete a category, detaching its children and posts first."""
        category = await self.get(category_id)

        await self.db.execute(
            update(Category)
            .where(Category.parent_id == category_id)
            .values(parent_id=None)
        )
        await self.db.execute(delete(post_categories).where(post_categories.c.category_id == category_id))
        await self.db.execute(delete(Category).where(Category.id == category_id))

        await self._commit()
        logger.info("Category deleted: id=%d", category_id)
        return category

    async def _ensure_slug_free(self, slug: str) -> None:
        result = await self.db.execute(select(Category.id).where(Category.slug == slug))
        if result.scalar_one_or_none() is not None:
            raise SlugConflictError("Category", slug)

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning("Category write rejected by a constraint: %s", e.orig)
            raise ConflictError("Category could not be saved: a constraint was violated") from e
