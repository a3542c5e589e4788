# services/content_management/schemas/blog_posts.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from shared.schemas import UrlStr


class BlogPostCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    featured_image_url: Optional[UrlStr] = None
    is_published: bool = False
    author_id: int


class BlogPostUpdate(BaseModel):
    title: str = Field(None, min_length=1)
    slug: str = Field(None, min_length=1)
    content: str = Field(None, min_length=1)
    excerpt: Optional[str] = None
    featured_image_url: Optional[UrlStr] = None
    is_published: bool = None


class BlogPostOut(BaseModel):
    id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str]
    featured_image_url: Optional[str]
    is_published: bool
    author_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
