from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from shared.db import get_db, utcnow
from shared.logger import get_logger
from shared.schemas import SuccessOut
from services.user_management.models.users import User, UserRole
from services.content_management.models.blog_posts import BlogPost
from services.content_management.schemas.blog_posts import BlogPostCreate, BlogPostUpdate, BlogPostOut

router = APIRouter(prefix="/blog", tags=["Blog"])
logger = get_logger("content_management")


async def _get_post_or_404(db: AsyncSession, post_id: int) -> BlogPost:
    post = await db.get(BlogPost, post_id)
    if not post:
        logger.warning("Blog post %s not found", post_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog post with id {post_id} not found"
        )
    return post


# --- CREATE BLOG POST (ADMIN AUTHORS ONLY) ---
@router.post("/posts", response_model=BlogPostOut, operation_id="createBlogPost")
async def create_blog_post(
    payload: BlogPostCreate,
    db: AsyncSession = Depends(get_db)
):
    # Author must exist and be an admin
    author = await db.get(User, payload.author_id)
    if not author:
        logger.warning("Blog post rejected: author %s not found", payload.author_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Author not found"
        )

    if author.role != UserRole.ADMIN:
        logger.warning("Blog post rejected: user %s is not an admin", author.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only admin users can create blog posts"
        )

    # Slug must be unique
    existing = await db.execute(select(BlogPost).where(BlogPost.slug == payload.slug))
    if existing.scalars().first():
        logger.warning("Blog post rejected: slug %r already taken", payload.slug)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Blog post with this slug already exists"
        )

    new_post = BlogPost(**payload.model_dump())

    db.add(new_post)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Blog post with this slug already exists"
        )

    await db.refresh(new_post)
    logger.info("Created blog post %s (%s)", new_post.id, new_post.slug)
    return new_post


# --- LIST BLOG POSTS ---
@router.get("/posts", response_model=List[BlogPostOut], operation_id="getBlogPosts")
async def get_blog_posts(
    published_only: bool = Query(True),
    limit: int = Query(10, gt=0),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db)
):
    stmt = select(BlogPost).join(User, BlogPost.author_id == User.id)
    if published_only:
        stmt = stmt.where(BlogPost.is_published == True)

    result = await db.execute(
        stmt.order_by(BlogPost.created_at.desc()).limit(limit).offset(offset)
    )
    return result.scalars().all()


# --- GET BLOG POST BY SLUG ---
# Drafts are returned too; only the listing filters on is_published
@router.get(
    "/posts/slug/{slug}",
    response_model=Optional[BlogPostOut],
    operation_id="getBlogPostBySlug",
)
async def get_blog_post_by_slug(
    slug: str,
    db: AsyncSession = Depends(get_db)
):
    result = await db.execute(select(BlogPost).where(BlogPost.slug == slug))
    return result.scalars().first()


# --- UPDATE BLOG POST ---
@router.put("/posts/{post_id}", response_model=BlogPostOut, operation_id="updateBlogPost")
async def update_blog_post(
    post_id: int,
    payload: BlogPostUpdate,
    db: AsyncSession = Depends(get_db)
):
    post = await _get_post_or_404(db, post_id)

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(post, field, value)
    post.updated_at = utcnow()

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Blog post with this slug already exists"
        )

    await db.refresh(post)
    logger.info("Updated blog post %s", post_id)
    return post


# --- DELETE BLOG POST ---
@router.delete("/posts/{post_id}", response_model=SuccessOut, operation_id="deleteBlogPost")
async def delete_blog_post(
    post_id: int,
    db: AsyncSession = Depends(get_db)
):
    post = await _get_post_or_404(db, post_id)

    await db.delete(post)
    await db.commit()

    logger.info("Deleted blog post %s", post_id)
    return SuccessOut(success=True)
