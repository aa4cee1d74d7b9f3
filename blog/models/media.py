from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from blog.database import Base


class Media(Base):
    """Uploaded asset referenced as a post's featured image."""

    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String, nullable=False)
    alt_text = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<Media(id={self.id}, url={self.url!r})>"
