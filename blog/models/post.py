import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from blog.database import Base
from blog.models.associations import post_categories, post_tags


class PostStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PUBLISHED = "PUBLISHED"
    PRIVATE = "PRIVATE"


class Post(Base):
    """Locale-neutral post record; readable text lives in its translations."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    status = Column(Enum(PostStatus), default=PostStatus.DRAFT, nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    featured_image_id = Column(Integer, ForeignKey("media.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    author = relationship("User", back_populates="posts")
    featured_image = relationship("Media")
    categories = relationship("Category", secondary=post_categories, back_populates="posts", passive_deletes=True)
    tags = relationship("Tag", secondary=post_tags, back_populates="posts", passive_deletes=True)
    translations = relationship(
        "PostTranslation",
        back_populates="post",
        order_by="PostTranslation.locale",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_post_status_published_at", "status", "published_at"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, slug={self.slug!r}, status={self.status})>"
