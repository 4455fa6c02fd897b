from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from blogstream.extensions import db
from blogstream.models.post import Post, PostImage, PostLike, Tag, post_tags


def _page(stmt, page: int, per_page: int) -> list[Post]:
    # Stream pages are zero-based; Flask-SQLAlchemy pagination is one-based
    pag = db.paginate(stmt, page=page + 1, per_page=per_page, error_out=False, count=False)
    return list(pag.items)


# Post repositories
def get_post_by_id(post_id: int) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(id=post_id)).scalar_one_or_none()


def get_post_by_slug(slug: str) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(slug=slug)).scalar_one_or_none()


def list_published_posts(page: int = 0, per_page: int = 10) -> list[Post]:
    stmt = (
        db.select(Post)
        .filter_by(is_published=True)
        .order_by(Post.post_date.desc(), Post.id.desc())
    )
    return _page(stmt, page, per_page)


def list_published_posts_by_tag_id(tag_id: int, page: int = 0, per_page: int = 10) -> list[Post]:
    stmt = (
        db.select(Post)
        .join(post_tags, post_tags.c.post_id == Post.id)
        .where(post_tags.c.tag_id == tag_id, Post.is_published.is_(True))
        .order_by(Post.post_date.desc(), Post.id.desc())
    )
    return _page(stmt, page, per_page)


def list_liked_posts(user_id: int, page: int = 0, per_page: int = 10) -> list[Post]:
    stmt = (
        db.select(Post)
        .join(PostLike, PostLike.post_id == Post.id)
        .where(PostLike.user_id == user_id, Post.is_published.is_(True))
        .order_by(PostLike.id.desc())
    )
    return _page(stmt, page, per_page)


def create_post(
    *,
    user_id: int,
    title: str,
    slug: str,
    content: str | None = None,
    link: str | None = None,
    display_type=None,
    is_published: bool = True,
    tags: list[Tag] | None = None,
) -> Post:
    p = Post(
        user_id=user_id,
        title=title,
        slug=slug,
        content=content,
        link=link,
        is_published=is_published,
    )
    if display_type is not None:
        p.display_type = display_type
    if tags:
        p.tags = list(tags)
    db.session.add(p)
    db.session.commit()
    return p


def add_post_image(p: Post, *, url: str, caption: str | None = None, display_order: int = 0) -> PostImage:
    image = PostImage(post_id=p.id, url=url, caption=caption, display_order=display_order)
    db.session.add(image)
    db.session.commit()
    return image


def list_post_images(post_id: int) -> list[PostImage]:
    stmt = db.select(PostImage).filter_by(post_id=post_id).order_by(PostImage.display_order, PostImage.id)
    return list(db.session.execute(stmt).scalars())


# Like repositories
def get_post_like(user_id: int, post_id: int) -> Optional[PostLike]:
    return db.session.execute(
        db.select(PostLike).filter_by(user_id=user_id, post_id=post_id)
    ).scalar_one_or_none()


def toggle_post_like(p: Post, user_id: int) -> int:
    """Add or remove the user's like on a post.

    Returns the change applied to ``likes_count``: 1 for a new like, -1 when an
    existing like was withdrawn. The count moves in SQL so concurrent likes on
    the same post are not lost.
    """
    removed = db.session.execute(
        db.delete(PostLike).where(PostLike.user_id == user_id, PostLike.post_id == p.id)
    ).rowcount
    if removed:
        delta = -1
    else:
        db.session.add(PostLike(user_id=user_id, post_id=p.id))
        try:
            db.session.flush()
        except IntegrityError:
            # A concurrent request stored the same like first; its count change stands
            db.session.rollback()
            return 1
        delta = 1
    db.session.execute(
        db.update(Post).where(Post.id == p.id).values(likes_count=Post.likes_count + delta)
    )
    db.session.commit()
    return delta


# Tag repositories
def get_tag_by_value(value: str) -> Optional[Tag]:
    return db.session.execute(db.select(Tag).filter_by(value=value)).scalar_one_or_none()


def get_or_create_tag(value: str) -> Tag:
    tag = get_tag_by_value(value)
    if tag is None:
        tag = Tag(value=value)
        db.session.add(tag)
        db.session.commit()
    return tag


def list_tag_values() -> list[str]:
    return list(db.session.execute(db.select(Tag.value).order_by(Tag.value)).scalars())


def list_tag_counts() -> list[tuple[Tag, int]]:
    """Tags paired with their number of published posts; unused tags are left out."""
    stmt = (
        db.select(Tag, func.count(Post.id))
        .join(post_tags, post_tags.c.tag_id == Tag.id)
        .join(Post, Post.id == post_tags.c.post_id)
        .where(Post.is_published.is_(True))
        .group_by(Tag.id)
        .order_by(Tag.value)
    )
    return [(tag, count) for tag, count in db.session.execute(stmt).all()]
