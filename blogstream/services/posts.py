from __future__ import annotations

import structlog
from flask import current_app

from blogstream.extensions import cache
from blogstream.models.post import Post, PostImage
from blogstream.repositories.post import (
    get_post_by_id,
    list_liked_posts,
    list_post_images,
    list_published_posts,
    list_published_posts_by_tag_id,
    list_tag_counts,
    list_tag_values,
    toggle_post_like,
)
from blogstream.schemas.tags import TagDTO

logger = structlog.get_logger(__name__)

# Overridden per app from TAG_CACHE_SECONDS by configure_tag_cache
DEFAULT_TAG_CACHE_SECONDS = 300


class PostNotFoundError(LookupError):
    def __init__(self, post_id: int):
        super().__init__(f"post {post_id} not found")
        self.post_id = post_id


def get_published_posts(page: int, size: int) -> list[Post]:
    return list_published_posts(page=page, per_page=size)


def get_posts_by_tag_id(tag_id: int, page: int, size: int) -> list[Post]:
    return list_published_posts_by_tag_id(tag_id, page=page, per_page=size)


def get_paged_liked_posts(user_id: int, page: int, size: int) -> list[Post]:
    return list_liked_posts(user_id, page=page, per_page=size)


def get_post_images(post_id: int) -> list[PostImage]:
    return list_post_images(post_id)


def add_post_like(user_id: int, post_id: int) -> int:
    """Toggle ``user_id``'s like on a post.

    Returns 1 when the like was added and -1 when an existing like was removed.
    Raises PostNotFoundError for an unknown post.
    """
    post = get_post_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    delta = toggle_post_like(post, user_id)
    logger.info("post_like_toggled", user_id=user_id, post_id=post_id, delta=delta, likes=post.likes_count)
    return delta


@cache.memoize(timeout=DEFAULT_TAG_CACHE_SECONDS)
def get_tag_dtos() -> list[TagDTO]:
    return [
        TagDTO(tag_id=tag.id, tag_value=tag.value, tag_count=count)
        for tag, count in list_tag_counts()
    ]


@cache.memoize(timeout=DEFAULT_TAG_CACHE_SECONDS)
def get_tag_values() -> list[str]:
    return list_tag_values()


def get_tag_cloud() -> list[TagDTO]:
    """The most used tags, capped at TAG_CLOUD_COUNT and ordered alphabetically."""
    limit = current_app.config.get("TAG_CLOUD_COUNT", 50)
    by_usage = sorted(get_tag_dtos(), key=lambda t: t.tag_count, reverse=True)
    return sorted(by_usage[:limit], key=lambda t: t.tag_value)


def invalidate_tag_cache() -> None:
    cache.delete_memoized(get_tag_dtos)
    cache.delete_memoized(get_tag_values)


def configure_tag_cache(app) -> None:
    timeout = int(app.config.get("TAG_CACHE_SECONDS", DEFAULT_TAG_CACHE_SECONDS))
    get_tag_dtos.cache_timeout = timeout
    get_tag_values.cache_timeout = timeout
