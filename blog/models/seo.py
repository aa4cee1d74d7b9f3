"""
Seo model

Search and social metadata for a single translation: meta tags, Open
Graph, Twitter Card and schema.org Event fields. Every field is optional.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from blog.database import Base


class Seo(Base):
    __tablename__ = "seo"

    id = Column(Integer, primary_key=True, index=True)
    # Unique: one record per translation, never shared
    translation_id = Column(
        Integer,
        ForeignKey("post_translations.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    # ── Meta tags ─────────────────────────────────────────────────────────────
    meta_title = Column(String, nullable=True)
    meta_description = Column(Text, nullable=True)
    canonical_url = Column(String, nullable=True)
    robots = Column(String, nullable=True)

    # ── Open Graph ────────────────────────────────────────────────────────────
    og_title = Column(String, nullable=True)
    og_description = Column(Text, nullable=True)
    og_type = Column(String, nullable=True)
    og_url = Column(String, nullable=True)
    og_image_url = Column(String, nullable=True)
    og_image_alt = Column(String, nullable=True)

    # ── Twitter Card ──────────────────────────────────────────────────────────
    twitter_card = Column(String, nullable=True)
    twitter_site = Column(String, nullable=True)
    twitter_creator = Column(String, nullable=True)

    # ── Event ─────────────────────────────────────────────────────────────────
    event_name = Column(String, nullable=True)
    event_description = Column(Text, nullable=True)
    event_start_date = Column(DateTime(timezone=True), nullable=True)
    event_end_date = Column(DateTime(timezone=True), nullable=True)
    event_url = Column(String, nullable=True)
    event_image_url = Column(String, nullable=True)
    event_location_name = Column(String, nullable=True)
    event_location_street = Column(String, nullable=True)
    event_location_city = Column(String, nullable=True)
    event_location_region = Column(String, nullable=True)
    event_location_postal = Column(String, nullable=True)
    event_location_country = Column(String, nullable=True)

    translation = relationship("PostTranslation", back_populates="seo")

    def __repr__(self) -> str:
        return f"<Seo(id={self.id}, translation_id={self.translation_id})>"
