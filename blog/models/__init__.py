from .associations import post_categories, post_tags
from .category import Category
from .media import Media
from .post import Post, PostStatus
from .seo import Seo
from .tag import Tag
from .translation import PostTranslation
from .user import User

__all__ = [
    "Category",
    "Media",
    "Post",
    "PostStatus",
    "PostTranslation",
    "Seo",
    "Tag",
    "User",
    "post_categories",
    "post_tags",
]
