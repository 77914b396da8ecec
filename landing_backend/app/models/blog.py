"""
Blog models - post with an ordered list of typed sections
"""
from datetime import datetime
from enum import Enum

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.core.config import DEFAULT_AUTHOR_AVATAR, DEFAULT_AUTHOR_NAME, DEFAULT_AUTHOR_ROLE
from landing_backend.app.db.base import Base, generate_uuid


class BlogSectionType(str, Enum):
    PARAGRAPH = "paragraph"
    IMAGE = "image"
    HEADING = "heading"
    SUBHEADING = "subheading"
    LIST = "list"


class BlogSectionListStyle(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column("id_user", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    image = Column(String(512), nullable=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    short_description = Column(Text, nullable=False)
    categories = Column(JSON, default=list, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="blogs")
    sections = relationship(
        "BlogSection",
        back_populates="blog",
        cascade="all, delete-orphan",
        order_by="BlogSection.order",
    )

    @property
    def author(self) -> dict:
        user = self.user
        if user is None:
            return {"name": DEFAULT_AUTHOR_NAME, "avatar": DEFAULT_AUTHOR_AVATAR, "role": DEFAULT_AUTHOR_ROLE}
        return {
            "name": user.full_name or DEFAULT_AUTHOR_NAME,
            "avatar": user.image or DEFAULT_AUTHOR_AVATAR,
            "role": user.role or DEFAULT_AUTHOR_ROLE,
        }


class BlogSection(Base):
    __tablename__ = "blog_sections"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    blog_id = Column("id_blog", String(36), ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)
    order = Column(Integer, nullable=False, default=0)
    type = Column(String(20), nullable=False, default=BlogSectionType.PARAGRAPH.value)
    content = Column(Text, nullable=True)
    src = Column(String(1024), nullable=True)
    alt = Column(String(255), nullable=True)
    caption = Column(String(500), nullable=True)
    style = Column(String(20), nullable=True)  # ordered | unordered (list sections)
    items = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    blog = relationship("Blog", back_populates="sections")
