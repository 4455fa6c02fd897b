from __future__ import annotations

from typing import Iterable

from flask import current_app, render_template

from blogstream.models.post import Post, PostImage

# Post stream formats and the fragment template each renders with
POST_TEMPLATES = {
    None: "posts/post.html",
    "post": "posts/post.html",
    "title": "posts/title.html",
}


def create_post_html(
    post: Post,
    fmt: str | None = None,
    *,
    is_owner: bool = False,
    images: Iterable[PostImage] | None = None,
) -> str:
    """Render one post as an HTML fragment for a post stream."""
    template = POST_TEMPLATES.get(fmt)
    if template is None:
        raise ValueError(f"unknown post format: {fmt}")
    return render_template(
        template,
        post=post,
        is_owner=is_owner,
        images=list(images or []),
        base_url=current_app.config.get("BASE_URL", ""),
    )
