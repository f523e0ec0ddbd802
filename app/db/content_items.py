"""Database access layer for lesson content items."""

import logging
from datetime import datetime, timezone

from postgrest.exceptions import APIError

from app.db.supabase_client import classify_api_error, get_supabase

logger = logging.getLogger(__name__)

TABLE = "content_items"


def list_content_items(published: bool | None = None) -> list[dict]:
    """List content items in display order."""
    client = get_supabase()
    query = client.table(TABLE).select("*")
    if published is not None:
        query = query.eq("is_published", published)

    result = query.order("display_order").execute()
    return result.data or []


def get_content_item(item_id: str) -> dict | None:
    client = get_supabase()
    result = client.table(TABLE).select("*").eq("id", item_id).execute()
    return result.data[0] if result.data else None


def slug_exists(slug: str, exclude_id: str | None = None) -> bool:
    """Whether another item already uses ``slug``."""
    client = get_supabase()
    query = client.table(TABLE).select("id").eq("slug", slug)
    if exclude_id:
        query = query.neq("id", exclude_id)

    result = query.execute()
    return bool(result.data)


def create_content_item(data: dict) -> dict:
    """Insert a content item. ``published_at`` is stamped when published."""
    client = get_supabase()
    row = dict(data)
    row["published_at"] = datetime.now(timezone.utc).isoformat() if row.get("is_published") else None

    try:
        result = client.table(TABLE).insert(row).execute()
    except APIError as e:
        logger.error(f"Error creating content: {e.message}")
        raise classify_api_error(e) from e
    return result.data[0] if result.data else {}


def update_content_item(item_id: str, data: dict) -> dict:
    client = get_supabase()
    row = dict(data)
    row["updated_at"] = datetime.now(timezone.utc).isoformat()

    try:
        result = client.table(TABLE).update(row).eq("id", item_id).execute()
    except APIError as e:
        logger.error(f"Error updating content {item_id}: {e.message}")
        raise classify_api_error(e) from e
    return result.data[0] if result.data else {}


def delete_content_item(item_id: str) -> None:
    client = get_supabase()
    try:
        client.table(TABLE).delete().eq("id", item_id).execute()
    except APIError as e:
        logger.error(f"Error deleting content {item_id}: {e.message}")
        raise classify_api_error(e) from e
