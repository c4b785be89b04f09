"""Blog posts, partners, contact messages and services."""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.blog import BlogPost
from ..models.message import Message
from ..models.partner import Partner
from ..models.service import Service
from . import common


# Blog posts

def get_blog_posts(db: Session, published_only: bool = True) -> List[BlogPost]:
    query = db.query(BlogPost)
    if published_only:
        query = query.filter(BlogPost.published.is_(True))
    return query.order_by(BlogPost.created_at.desc(), BlogPost.id.desc()).all()


def get_blog_post_by_slug(db: Session, slug: str) -> Optional[BlogPost]:
    return db.query(BlogPost).filter(BlogPost.slug == slug).first()


# Partners

def get_partners(db: Session) -> List[Partner]:
    return db.query(Partner).order_by(Partner.id).all()


# Messages

def get_messages(db: Session) -> List[Message]:
    return db.query(Message).order_by(Message.created_at.desc(), Message.id.desc()).all()


def mark_message_as_read(db: Session, message: Message) -> Message:
    return common.update(db, message, {"read": True}, "mark message as read")


# Services

def get_services(db: Session, active_only: bool = True) -> List[Service]:
    query = db.query(Service)
    if active_only:
        query = query.filter(Service.active.is_(True))
    return query.order_by(Service.order.asc(), Service.id.asc()).all()


def get_service_by_slug(db: Session, slug: str) -> Optional[Service]:
    return db.query(Service).filter(Service.slug == slug).first()
