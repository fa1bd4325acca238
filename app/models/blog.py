from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db import Base


class Blog(Base):
    __tablename__ = "blog"

    id = Column(Integer, primary_key=True, index=True)
    cover_image_url = Column(String(255), nullable=True)
    is_published = Column(Boolean, nullable=False, default=False)
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    translations = relationship(
        "BlogTranslation",
        back_populates="blog",
        cascade="all, delete-orphan",
    )


class BlogTranslation(Base):
    __tablename__ = "blog_tr"
    __table_args__ = (
        UniqueConstraint("slug", "language_code", name="uq_blog_tr_slug_lang"),
        UniqueConstraint("blog_id", "language_code", name="uq_blog_tr_blog_lang"),
    )

    id = Column(Integer, primary_key=True, index=True)
    blog_id = Column(Integer, ForeignKey("blog.id", ondelete="CASCADE"), nullable=False, index=True)
    language_code = Column(String(10), nullable=False, index=True)
    slug = Column(String(255), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    full_description = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    # [{"text": ..., "level": ..., "order": ...}]
    toc_items = Column(JSON, nullable=True)

    blog = relationship("Blog", back_populates="translations")
