from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from blog.database import Base
from blog.models.associations import post_tags


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)

    posts = relationship("Post", secondary=post_tags, back_populates="tags", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, slug={self.slug!r})>"
