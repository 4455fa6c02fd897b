from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import func, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogstream.extensions import db
from blogstream.models import generate_hex_id


class PostDisplayType(str, enum.Enum):
    POST = "POST"
    LINK = "LINK"
    LINK_SUMMARY = "LINK_SUMMARY"
    LINK_FEATURE = "LINK_FEATURE"
    PHOTO = "PHOTO"
    SINGLEPHOTO_POST = "SINGLEPHOTO_POST"
    MULTIPHOTO_POST = "MULTIPHOTO_POST"


post_tags = db.Table(
    "post_tags",
    db.Column("post_id", db.ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    db.Column("tag_id", db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(db.Model):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    value: Mapped[str] = mapped_column(db.String(50), unique=True, nullable=False, index=True)

    posts: Mapped[list["Post"]] = relationship(secondary=post_tags, back_populates="tags")


class Post(db.Model):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    hex_id: Mapped[str] = mapped_column(db.String(32), unique=True, nullable=False, index=True, default=generate_hex_id)
    user_id: Mapped[int] = mapped_column(db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(db.String(250), nullable=False)
    slug: Mapped[str] = mapped_column(db.String(260), unique=True, nullable=False, index=True)
    link: Mapped[str | None] = mapped_column(db.String(500), nullable=True)
    content: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    display_type: Mapped[PostDisplayType] = mapped_column(
        db.Enum(PostDisplayType, native_enum=False, length=32),
        default=PostDisplayType.POST,
        nullable=False,
    )
    is_published: Mapped[bool] = mapped_column(db.Boolean, default=True, nullable=False)
    post_date: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    likes_count: Mapped[int] = mapped_column(db.Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(db.DateTime(timezone=True), onupdate=func.now())

    author: Mapped["User"] = relationship(back_populates="posts")
    tags: Mapped[list[Tag]] = relationship(secondary=post_tags, back_populates="posts", order_by="Tag.value")
    images: Mapped[list["PostImage"]] = relationship(
        back_populates="post", cascade="all, delete-orphan", order_by="PostImage.display_order"
    )
    likes: Mapped[list["PostLike"]] = relationship(back_populates="post", cascade="all, delete-orphan")

    __table_args__ = (
        Index("ix_posts_published_date", "is_published", "post_date"),
    )


class PostImage(db.Model):
    __tablename__ = "post_images"

    id: Mapped[int] = mapped_column(primary_key=True)
    post_id: Mapped[int] = mapped_column(db.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    url: Mapped[str] = mapped_column(db.String(500), nullable=False)
    caption: Mapped[str | None] = mapped_column(db.String(250), nullable=True)
    display_order: Mapped[int] = mapped_column(db.Integer, default=0, nullable=False)

    post: Mapped[Post] = relationship(back_populates="images")


class PostLike(db.Model):
    __tablename__ = "post_likes"

    # Surrogate key doubles as like recency for "liked posts" streams
    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id: Mapped[int] = mapped_column(db.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    user: Mapped["User"] = relationship(back_populates="likes")
    post: Mapped[Post] = relationship(back_populates="likes")

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_post_likes_user_post"),
    )
