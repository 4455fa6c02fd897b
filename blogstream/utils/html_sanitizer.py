"""
HTML sanitization for post bodies rendered into stream fragments.
"""
from __future__ import annotations

import bleach


# Allowed HTML tags for post content
ALLOWED_TAGS = [
    # Text formatting
    'strong', 'b', 'em', 'i', 'u', 's', 'mark', 'small', 'sup', 'sub',
    # Headings inside long-form posts
    'h3', 'h4', 'h5',
    # Links and inline images
    'a', 'img',
    # Lists
    'ul', 'ol', 'li',
    # Line breaks and paragraphs
    'br', 'p', 'hr',
    # Code
    'code', 'pre',
    # Quotes
    'blockquote', 'cite',
    'span', 'div',
]

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title', 'target', 'rel'],
    'img': ['src', 'alt', 'title', 'width', 'height'],
    'blockquote': ['cite'],
    '*': ['id', 'class'],
}

ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


def sanitize_html(html_content: str | None) -> str:
    """
    Strip scripts, event handlers and disallowed tags from post HTML.

    Args:
        html_content: Raw HTML content to sanitize

    Returns:
        Sanitized HTML content safe for rendering
    """
    if not html_content:
        return ""

    return bleach.clean(
        html_content,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
