from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog.utils.sanitize import sanitize_plain_text


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=100, description="Generated from the name when omitted.")
    description: Optional[str] = None
    parent_id: Optional[int] = Field(None, description="Parent category; not checked for cycles.")

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str) -> str:
        cleaned = sanitize_plain_text(v)
        if not cleaned:
            raise ValueError("may not be blank")
        return cleaned

    @field_validator("slug", "description")
    @classmethod
    def strip_html(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return sanitize_plain_text(v) or None


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    parent_id: Optional[int] = None

    @field_validator("name", "slug")
    @classmethod
    def not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        cleaned = sanitize_plain_text(v)
        if not cleaned:
            raise ValueError("may not be blank")
        return cleaned

    @field_validator("description")
    @classmethod
    def strip_html(cls, v: Optional[str]) -> Optional[str]:
        return sanitize_plain_text(v) if v is not None else None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: Optional[str]
    parent_id: Optional[int]
