from __future__ import annotations

from blogstream.extensions import limiter
from blogstream.services import posts as post_svc

from blogstream.blueprints.posts import (
    bp,
    PAGE_NUMBER,
    ROW_ID,
    has_next,
    populate_post_stream,
    post_paging_size,
    remember_page,
    SESSION_ATTRIBUTE_POSTS,
    SESSION_ATTRIBUTE_TAGGEDPOSTS,
)


@bp.get(f"/page/<{PAGE_NUMBER}:page_number>")
@limiter.limit("120 per minute")
def posts_page(page_number: int):
    posts = post_svc.get_published_posts(page_number, post_paging_size())
    result = populate_post_stream(posts)
    remember_page(SESSION_ATTRIBUTE_POSTS, posts)
    return result


@bp.get("/more")
def posts_has_next():
    return has_next(SESSION_ATTRIBUTE_POSTS, post_paging_size())


@bp.get(f"/tag/<{ROW_ID}:tag_id>/page/<{PAGE_NUMBER}:page_number>")
@limiter.limit("120 per minute")
def posts_by_tag(tag_id: int, page_number: int):
    posts = post_svc.get_posts_by_tag_id(tag_id, page_number, post_paging_size())
    result = populate_post_stream(posts)
    remember_page(SESSION_ATTRIBUTE_TAGGEDPOSTS, posts)
    return result


@bp.get(f"/tag/<{ROW_ID}:tag_id>/more")
def tagged_posts_has_next(tag_id: int):
    return has_next(SESSION_ATTRIBUTE_TAGGEDPOSTS, post_paging_size())
