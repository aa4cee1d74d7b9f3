from .category import CategoryCreate, CategoryResponse, CategoryUpdate
from .post import PostCreate, PostDetailResponse, PostResponse, PostUpdate, TagResponse
from .token import Token
from .translation import (
    PublishedTranslationResponse,
    SeoData,
    SeoResponse,
    TranslationCreate,
    TranslationResponse,
    TranslationUpdate,
    TranslationWithPostResponse,
)
from .user import UserCreate, UserResponse

# Define the public API of this module
__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "PostCreate",
    "PostDetailResponse",
    "PostResponse",
    "PostUpdate",
    "TagResponse",
    "Token",
    "PublishedTranslationResponse",
    "SeoData",
    "SeoResponse",
    "TranslationCreate",
    "TranslationResponse",
    "TranslationUpdate",
    "TranslationWithPostResponse",
    "UserCreate",
    "UserResponse",
]
