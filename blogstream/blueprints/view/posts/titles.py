from __future__ import annotations

from blogstream.extensions import limiter
from blogstream.services import posts as post_svc

from blogstream.blueprints.posts import (
    bp,
    PAGE_NUMBER,
    ROW_ID,
    has_next,
    populate_post_stream,
    remember_page,
    title_paging_size,
    SESSION_ATTRIBUTE_POSTTITLES,
    SESSION_ATTRIBUTE_TAGPOSTTITLES,
    TITLE_TEMPLATE,
)


@bp.get(f"/titles/page/<{PAGE_NUMBER}:page_number>")
@limiter.limit("120 per minute")
def post_titles(page_number: int):
    posts = post_svc.get_published_posts(page_number, title_paging_size())
    result = populate_post_stream(posts, TITLE_TEMPLATE)
    remember_page(SESSION_ATTRIBUTE_POSTTITLES, posts)
    return result


@bp.get("/titles/more")
def post_titles_has_next():
    return has_next(SESSION_ATTRIBUTE_POSTTITLES, title_paging_size())


@bp.get(f"/titles/tag/<{ROW_ID}:tag_id>/page/<{PAGE_NUMBER}:page_number>")
@limiter.limit("120 per minute")
def post_titles_by_tag(tag_id: int, page_number: int):
    posts = post_svc.get_posts_by_tag_id(tag_id, page_number, title_paging_size())
    result = populate_post_stream(posts, TITLE_TEMPLATE)
    remember_page(SESSION_ATTRIBUTE_TAGPOSTTITLES, posts)
    return result


@bp.get(f"/titles/tag/<{ROW_ID}:tag_id>/more")
def tag_titles_has_next(tag_id: int):
    return has_next(SESSION_ATTRIBUTE_TAGPOSTTITLES, title_paging_size())
