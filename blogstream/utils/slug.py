"""Slug generation utilities."""
from __future__ import annotations

import re
import unicodedata


def slugify(text: str) -> str:
    """
    Convert a string to a URL-friendly slug.

    Args:
        text: The text to convert to a slug

    Returns:
        A URL-friendly slug string
    """
    if not text:
        return ""

    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = text.lower()
    text = re.sub(r'[\s_]+', '-', text)
    text = re.sub(r'[^a-z0-9\-]', '', text)
    text = re.sub(r'-+', '-', text)
    return text.strip('-')
