from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from blog.database import Base
from blog.models.associations import post_categories


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    # No cycle check: any category may be the parent of any other
    parent_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)

    parent = relationship("Category", remote_side=[id], back_populates="children")
    children = relationship("Category", back_populates="parent", passive_deletes=True)
    posts = relationship("Post", secondary=post_categories, back_populates="categories", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug={self.slug!r})>"
