from __future__ import annotations

from typing import Iterable

from flask import Blueprint, current_app, session
from flask_login import current_user

from blogstream.models.post import Post, PostDisplayType
from blogstream.services import posts as post_svc
from blogstream.services import templating
from blogstream.utils.posts import is_post_owner

bp = Blueprint("posts_json", __name__, url_prefix="/json/posts")

TITLE_TEMPLATE = "title"

# Session keys holding the post ids of the last page served by each stream
SESSION_ATTRIBUTE_POSTS = "posts"
SESSION_ATTRIBUTE_TAGPOSTTITLES = "tagposttitles"
SESSION_ATTRIBUTE_POSTTITLES = "posttitles"
SESSION_ATTRIBUTE_TAGGEDPOSTS = "taggedposts"
SESSION_ATTRIBUTE_LIKEDPOSTS = "likedposts"

# Path converters bounded to what the integer columns and LIMIT/OFFSET can hold
PAGE_NUMBER = "int(max=2147483647)"
ROW_ID = "int(max=9223372036854775807)"


def post_paging_size() -> int:
    return int(current_app.config["POST_PAGING_SIZE"])


def title_paging_size() -> int:
    return int(current_app.config["TITLE_PAGING_SIZE"])


def remember_page(attribute: str, posts: Iterable[Post]) -> None:
    session[attribute] = [p.id for p in posts]


def has_next(attribute: str, paging_size: int) -> str:
    """Return "true" unless the last page served for ``attribute`` came back short."""
    post_ids = session.get(attribute)
    if post_ids is None:
        return "true"
    return "true" if len(post_ids) >= paging_size else "false"


def populate_post_stream(posts: Iterable[Post], fmt: str | None = None) -> str:
    html = []
    for post in posts:
        images = None
        if post.display_type == PostDisplayType.MULTIPHOTO_POST:
            images = post_svc.get_post_images(post.id)
        html.append(
            templating.create_post_html(
                post,
                fmt,
                is_owner=is_post_owner(current_user, post.user_id),
                images=images,
            )
        )
    return "".join(html)


import blogstream.blueprints.view.posts  # noqa: E402,F401
