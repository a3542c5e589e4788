# services/content_management/models/blog_posts.py
from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from shared.db import Base, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False)  # Public lookup key
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    featured_image_url = Column(String, nullable=True)
    is_published = Column(Boolean, nullable=False, default=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    author = relationship("User", back_populates="blog_posts")

    __table_args__ = (
        Index("idx_blog_post_published_created", "is_published", "created_at"),
        Index("idx_blog_post_author", "author_id"),
    )
