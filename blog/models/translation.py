"""
PostTranslation model

One row per (post, locale) pair holding the readable text of a post in
that locale. Translation slugs are unique across all translations, so a
slug identifies a single translation on its own.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from blog.database import Base


class PostTranslation(Base):
    __tablename__ = "post_translations"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    locale = Column(String(16), nullable=False, index=True)  # e.g. "en", "pt-BR"

    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    slug = Column(String, nullable=False, unique=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    post = relationship("Post", back_populates="translations")
    seo = relationship("Seo", back_populates="translation", uselist=False, passive_deletes=True)

    __table_args__ = (
        UniqueConstraint("post_id", "locale", name="uq_post_translation_locale"),
        Index("idx_pt_locale_slug", "locale", "slug"),
    )

    def __repr__(self) -> str:
        return f"<PostTranslation(id={self.id}, post_id={self.post_id}, locale={self.locale!r})>"
