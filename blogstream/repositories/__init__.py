from blogstream.repositories.user import (
    get_user_by_username,
    create_user,
)
from blogstream.repositories.post import (
    get_post_by_id,
    get_post_by_slug,
    list_published_posts,
    list_published_posts_by_tag_id,
    list_liked_posts,
    list_post_images,
    toggle_post_like,
    list_tag_values,
    list_tag_counts,
)

__all__ = [
    # User repositories
    "get_user_by_username",
    "create_user",
    # Post repositories
    "get_post_by_id",
    "get_post_by_slug",
    "list_published_posts",
    "list_published_posts_by_tag_id",
    "list_liked_posts",
    "list_post_images",
    "toggle_post_like",
    # Tag repositories
    "list_tag_values",
    "list_tag_counts",
]
