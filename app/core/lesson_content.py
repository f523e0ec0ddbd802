"""Write-side defaults for lesson content items."""

from typing import Any

from app.core.schemas_content import ContentFormat, ContentItemFields

DEFAULT_DURATION_MINUTES = 5
DEFAULT_DISPLAY_ORDER = 1


def build_content_row(fields: ContentItemFields, default_author: str) -> dict[str, Any]:
    """
    Turn submitted fields into a ``content_items`` row with defaults filled in.

    Falsy values fall back to defaults, except ``is_published`` which only
    defaults to True when absent.
    """
    content = fields.content.model_dump(by_alias=True) if fields.content else None

    return {
        "slug": fields.slug,
        "title": fields.title,
        "description": fields.description,
        "format": (fields.format or ContentFormat.LESSON).value,
        "content": content,
        "category_slug": fields.category_slug,
        "tags": fields.tags or [],
        "is_premium": bool(fields.is_premium),
        "is_published": True if fields.is_published is None else fields.is_published,
        "estimated_duration_minutes": fields.estimated_duration_minutes or DEFAULT_DURATION_MINUTES,
        "author": fields.author or default_author,
        "display_order": fields.display_order or DEFAULT_DISPLAY_ORDER,
    }
