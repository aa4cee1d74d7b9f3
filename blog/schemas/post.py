from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.models.post import PostStatus
from blog.schemas.category import CategoryResponse
from blog.utils.sanitize import sanitize_plain_text, sanitize_rich_content


def plain_title(v: str, min_length: int) -> str:
    """Strip markup from a title and re-check its length."""
    cleaned = sanitize_plain_text(v)
    if len(cleaned) < min_length:
        raise ValueError(f"title must have at least {min_length} characters of text")
    return cleaned


def _unique_names(names: list[str]) -> list[str]:
    if len(set(names)) != len(names):
        raise ValueError("tag_names must not contain repeated values")
    if any(not name.strip() for name in names):
        raise ValueError("tag_names must not contain blank values")
    return names


class PostCreate(BaseModel):
    title: str = Field(..., min_length=3, description="Title cannot be shorter than 3 characters.")
    slug: str = Field(..., min_length=1)
    content: str
    excerpt: Optional[str] = None
    category_ids: list[int] = Field(..., min_length=1, description="Existing category ids; cannot be empty.")
    tag_names: list[str] = Field(..., description="Tags are created on first use.")
    featured_image_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str) -> str:
        return plain_title(v, 3)

    @field_validator("content")
    @classmethod
    def clean_content(cls, v: str) -> str:
        return sanitize_rich_content(v)

    @field_validator("tag_names")
    @classmethod
    def unique_tags(cls, v: list[str]) -> list[str]:
        return _unique_names(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hi There",
                "slug": "hi-there",
                "content": "<p>First post.</p>",
                "excerpt": "A short hello",
                "category_ids": [1],
                "tag_names": ["demo"],
            }
        }
    )


class PostUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""

    title: Optional[str] = Field(None, min_length=3)
    slug: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    status: Optional[PostStatus] = Field(None, description="One of DRAFT, PENDING, PUBLISHED, PRIVATE.")
    category_ids: Optional[list[int]] = Field(None, min_length=1, description="Replaces the current categories.")
    tag_names: Optional[list[str]] = Field(None, description="Replaces the current tags.")
    featured_image_id: Optional[int] = None

    @field_validator("title", "slug", "content", "status", "category_ids", "tag_names")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str) -> str:
        return plain_title(v, 3)

    @field_validator("content")
    @classmethod
    def clean_content(cls, v: str) -> str:
        return sanitize_rich_content(v)

    @field_validator("tag_names")
    @classmethod
    def unique_tags(cls, v: list[str]) -> list[str]:
        return _unique_names(v)


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str


class MediaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    alt_text: Optional[str]


class TranslationBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    locale: str
    slug: str
    title: str


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str]
    status: PostStatus
    published_at: Optional[datetime]
    author_id: int
    featured_image_id: Optional[int]
    created_at: datetime
    updated_at: datetime
    categories: list[CategoryResponse] = []
    tags: list[TagResponse] = []
    featured_image: Optional[MediaResponse] = None


class PostDetailResponse(PostResponse):
    translations: list[TranslationBrief] = []
