"""Sample content for local development (``flask seed-demo``)."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import structlog

from blogstream.extensions import db
from blogstream.models.post import PostDisplayType
from blogstream.repositories.post import (
    add_post_image,
    create_post,
    get_or_create_tag,
    get_post_by_slug,
)
from blogstream.repositories.user import create_user, get_user_by_username
from blogstream.utils.crypto import hash_password
from blogstream.utils.slug import slugify

logger = structlog.get_logger(__name__)

DEMO_USERNAME = "demo"

DEMO_TAGS = ["Python", "Flask", "SQLAlchemy", "Jinja", "Testing", "Caching"]

DEMO_POSTS = [
    ("Welcome to the Stream", "<p>The first post in the demo stream.</p>", ["Python"]),
    ("Blueprints in Practice", "<p>Splitting a Flask app into blueprints.</p>", ["Python", "Flask"]),
    ("Typed Mappings", "<p>SQLAlchemy 2.0 <code>Mapped</code> columns.</p>", ["Python", "SQLAlchemy"]),
    ("Fragments over Pages", "<p>Rendering partial templates for infinite scroll.</p>", ["Flask", "Jinja"]),
    ("Fixtures that Scale", "<p>Building pytest fixtures around an app factory.</p>", ["Python", "Testing"]),
    ("Memoized Lookups", "<p>Caching tag counts with Flask-Caching.</p>", ["Flask", "Caching"]),
]


def seed_demo_content(password: str = "demo-password") -> int:
    """
    Create a demo author, tags, text posts and one multi-photo post.

    Existing demo content is left in place; posts are only added once per title.

    Returns:
        Number of posts created
    """
    user = get_user_by_username(DEMO_USERNAME)
    if user is None:
        user = create_user(
            username=DEMO_USERNAME,
            email="demo@example.com",
            password_hash=hash_password(password),
        )

    tags = {value: get_or_create_tag(value) for value in DEMO_TAGS}
    now = datetime.now(timezone.utc)
    created = 0

    for offset, (title, content, tag_values) in enumerate(DEMO_POSTS):
        slug = slugify(title)
        if get_post_by_slug(slug) is not None:
            continue
        post = create_post(
            user_id=user.id,
            title=title,
            slug=slug,
            content=content,
            tags=[tags[v] for v in tag_values],
        )
        post.post_date = now - timedelta(days=len(DEMO_POSTS) - offset)
        created += 1

    gallery_slug = "demo-gallery"
    if get_post_by_slug(gallery_slug) is None:
        gallery = create_post(
            user_id=user.id,
            title="Demo Gallery",
            slug=gallery_slug,
            content="<p>A post with several photos.</p>",
            display_type=PostDisplayType.MULTIPHOTO_POST,
            tags=[tags["Jinja"]],
        )
        for order in range(3):
            add_post_image(gallery, url=f"/static/demo/photo-{order + 1}.jpg", display_order=order)
        created += 1

    db.session.commit()
    logger.info("demo_content_seeded", posts_created=created, username=DEMO_USERNAME)
    return created
