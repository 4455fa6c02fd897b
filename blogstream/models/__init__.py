from __future__ import annotations

import secrets


def generate_hex_id(length: int = 32) -> str:
    """Generate a secure random hex string of specified length."""
    return secrets.token_hex(length // 2)


# Import all models so relationships resolve and migrations see every table
from blogstream.models.user import User
from blogstream.models.post import (
    Post,
    PostDisplayType,
    PostImage,
    PostLike,
    Tag,
    post_tags,
)

__all__ = [
    "generate_hex_id",
    "User",
    "Post",
    "PostDisplayType",
    "PostImage",
    "PostLike",
    "Tag",
    "post_tags",
]
