from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from blog.i18n.locale import is_rtl_locale, is_valid_locale
from blog.schemas.category import CategoryResponse
from blog.schemas.post import MediaResponse, PostResponse, TagResponse, plain_title
from blog.utils.sanitize import sanitize_rich_content, sanitize_url

SEO_URL_FIELDS = ("canonical_url", "og_url", "og_image_url", "event_url", "event_image_url")


class SeoData(BaseModel):
    """SEO payload attached to a translation. Every field is optional."""

    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    canonical_url: Optional[str] = None
    robots: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_type: Optional[str] = None
    og_url: Optional[str] = None
    og_image_url: Optional[str] = None
    og_image_alt: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_site: Optional[str] = None
    twitter_creator: Optional[str] = None
    event_name: Optional[str] = None
    event_description: Optional[str] = None
    event_start_date: Optional[datetime] = Field(None, description="ISO 8601 date-time")
    event_end_date: Optional[datetime] = Field(None, description="ISO 8601 date-time")
    event_url: Optional[str] = None
    event_image_url: Optional[str] = None
    event_location_name: Optional[str] = None
    event_location_street: Optional[str] = None
    event_location_city: Optional[str] = None
    event_location_region: Optional[str] = None
    event_location_postal: Optional[str] = None
    event_location_country: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator(*SEO_URL_FIELDS)
    @classmethod
    def safe_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        cleaned = sanitize_url(v)
        if cleaned is None:
            raise ValueError("URL scheme is not allowed")
        return cleaned


def _check_locale(v: str) -> str:
    if not is_valid_locale(v):
        raise ValueError("locale must be a language tag such as 'en' or 'pt-BR'")
    return v


class TranslationCreate(BaseModel):
    locale: str
    title: str = Field(..., min_length=1)
    content: str
    slug: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    seo_data: Optional[SeoData] = None

    @field_validator("locale")
    @classmethod
    def valid_locale(cls, v: str) -> str:
        return _check_locale(v)

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str) -> str:
        return plain_title(v, 1)

    @field_validator("content")
    @classmethod
    def clean_content(cls, v: str) -> str:
        return sanitize_rich_content(v)


class TranslationUpdate(BaseModel):
    """Partial update; ``seo_data`` is merged into the existing SEO record."""

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    slug: Optional[str] = Field(None, min_length=1)
    seo_data: Optional[SeoData] = None

    @field_validator("title", "content", "slug")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("title")
    @classmethod
    def clean_title(cls, v: str) -> str:
        return plain_title(v, 1)

    @field_validator("content")
    @classmethod
    def clean_content(cls, v: str) -> str:
        return sanitize_rich_content(v)


class SeoResponse(SeoData):
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int


class TranslationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    locale: str
    title: str
    content: str
    excerpt: Optional[str]
    slug: str
    created_at: datetime
    updated_at: datetime
    seo: Optional[SeoResponse] = None

    @computed_field
    @property
    def is_rtl(self) -> bool:
        return is_rtl_locale(self.locale)


class PublishedPostSummary(BaseModel):
    """Fields of the parent post shown in published listings."""

    model_config = ConfigDict(from_attributes=True)

    slug: str
    excerpt: Optional[str]
    published_at: Optional[datetime]
    categories: list[CategoryResponse] = []
    tags: list[TagResponse] = []
    featured_image: Optional[MediaResponse] = None


class PublishedTranslationResponse(TranslationResponse):
    post: PublishedPostSummary


class TranslationWithPostResponse(TranslationResponse):
    post: PostResponse
