from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth.auth import get_session_context, require_admin
from ..auth.gate import SessionContext
from ..crud import common
from ..crud.content import get_blog_post_by_slug, get_blog_posts
from ..database.database import get_db
from ..models.blog import BlogPost
from ..schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate

router = APIRouter(prefix="/api/blogs", tags=["blogs"])
admin_router = APIRouter(prefix="/api/admin/blogs", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[BlogPostOut])
def list_blogs(db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    return get_blog_posts(db, published_only=not ctx.is_admin)


@router.get("/{slug}", response_model=BlogPostOut)
def get_blog(slug: str, db: Session = Depends(get_db), ctx: SessionContext = Depends(get_session_context)):
    blog = get_blog_post_by_slug(db, slug)
    # unpublished posts do not exist for the public
    if not blog or (not blog.published and not ctx.is_admin):
        raise HTTPException(status_code=404, detail="Blog post not found")
    return blog


@admin_router.post("", response_model=BlogPostOut, status_code=201)
def create_blog(payload: BlogPostCreate, db: Session = Depends(get_db)):
    return common.create(db, BlogPost, payload.model_dump(), "create blog post")


@admin_router.put("/{blog_id}", response_model=BlogPostOut)
def update_blog(blog_id: int, payload: BlogPostUpdate, db: Session = Depends(get_db)):
    blog = common.get_by_id(db, BlogPost, blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return common.update(db, blog, payload.model_dump(exclude_unset=True), "update blog post")


@admin_router.delete("/{blog_id}", status_code=204)
def delete_blog(blog_id: int, db: Session = Depends(get_db)):
    blog = common.get_by_id(db, BlogPost, blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog post not found")
    common.delete(db, blog, "delete blog post")
