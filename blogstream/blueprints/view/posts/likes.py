from __future__ import annotations

from flask import abort, jsonify
from flask_login import current_user, login_required

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
    SESSION_ATTRIBUTE_LIKEDPOSTS,
)


@bp.route(f"/post/like/<{ROW_ID}:post_id>", methods=["GET", "POST"])
@limiter.limit("30 per minute")
@login_required
def like_post(post_id: int):
    """Toggle the current user's like; body is 1 (liked) or -1 (unliked)."""
    try:
        delta = post_svc.add_post_like(current_user.id, post_id)
    except post_svc.PostNotFoundError:
        abort(404)
    return jsonify(delta)


@bp.get(f"/likes/<{ROW_ID}:user_id>/page/<{PAGE_NUMBER}:page_number>")
@limiter.limit("120 per minute")
def liked_posts(user_id: int, page_number: int):
    posts = post_svc.get_paged_liked_posts(user_id, page_number, post_paging_size())
    result = populate_post_stream(posts)
    remember_page(SESSION_ATTRIBUTE_LIKEDPOSTS, posts)
    return result


@bp.get(f"/likes/<{ROW_ID}:user_id>/more")
def liked_posts_has_next(user_id: int):
    return has_next(SESSION_ATTRIBUTE_LIKEDPOSTS, post_paging_size())
