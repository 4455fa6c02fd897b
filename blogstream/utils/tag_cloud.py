"""
Tag cloud rendering.

Each tag gets a CSS size class from where its post count falls between the
smallest and largest counts of the tags being shown.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from markupsafe import escape

from blogstream.schemas.tags import TagDTO

TAG_ITEM_PATTERN = "<li><a href='{base_url}/posts/tag/{slug}' class='{css}'>{value}</a></li>"


def css_class_for_count(tag_count: int, min_count: int, max_count: int) -> str:
    """
    Pick the CSS class for a tag.

    Args:
        tag_count: Number of posts carrying the tag
        min_count: Smallest count among the displayed tags
        max_count: Largest count among the displayed tags

    Returns:
        One of maxTag, minTag, largeTag, mediumTag or smallTag
    """
    distribution = (max_count - min_count) // 5

    if tag_count == max_count:
        return "maxTag"
    if tag_count == min_count:
        return "minTag"
    if tag_count > min_count + distribution * 1.75:
        return "largeTag"
    if tag_count > min_count + distribution:
        return "mediumTag"
    return "smallTag"


def count_bounds(tags: Sequence[TagDTO]) -> tuple[int, int]:
    """(min, max) tag count, (0, 0) for no tags."""
    counts = [t.tag_count for t in tags]
    if not counts:
        return 0, 0
    return min(counts), max(counts)


def render_tag_cloud(tags: Iterable[TagDTO], base_url: str) -> str:
    tags = list(tags)
    min_count, max_count = count_bounds(tags)

    html = ["<ul class='taglist'>"]
    for tag in tags:
        html.append(
            TAG_ITEM_PATTERN.format(
                base_url=base_url,
                slug=escape(tag.tag_value.lower()),
                css=css_class_for_count(tag.tag_count, min_count, max_count),
                value=escape(tag.tag_value),
            )
        )
    html.append("</ul>")
    return "".join(html)
