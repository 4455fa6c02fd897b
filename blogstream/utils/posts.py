"""Post ownership helpers."""
from __future__ import annotations

from typing import Any


def is_post_owner(user: Any, post_user_id: int | None) -> bool:
    """True when ``user`` is signed in and wrote the post."""
    if user is None or post_user_id is None:
        return False
    if not getattr(user, "is_authenticated", False):
        return False
    return getattr(user, "id", None) == post_user_id
