"""API endpoints for managing lesson content."""

import logging

from fastapi import APIRouter, HTTPException, Query

from app.core.config import get_settings
from app.core.lesson_content import build_content_row
from app.core.schemas_content import ContentItemCreate, ContentItemDelete, ContentItemUpdate
from app.db.content_items import (
    create_content_item,
    delete_content_item,
    get_content_item,
    list_content_items,
    slug_exists,
    update_content_item,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/content", tags=["content"])

MSG_DUPLICATE_SLUG = "A content item with this slug already exists"
MSG_INTERNAL_ERROR = "Internal server error"


@router.get("")
async def list_content(
    published: bool | None = Query(None, description="Only published (true) or drafts (false)"),
) -> list[dict]:
    try:
        return list_content_items(published=published)
    except Exception:
        logger.exception("Failed to list content items")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)


@router.get("/{item_id}")
async def get_content(item_id: str) -> dict:
    try:
        item = get_content_item(item_id)
    except Exception:
        logger.exception(f"Failed to get content item {item_id}")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)
    if not item:
        raise HTTPException(status_code=404, detail="Content item not found")
    return item


@router.post("", status_code=201)
async def create_content(data: ContentItemCreate) -> dict:
    """Create a content item; slug must be unique."""
    if not data.slug or not data.title:
        raise HTTPException(status_code=400, detail="Slug and title are required")

    try:
        if slug_exists(data.slug):
            raise HTTPException(status_code=400, detail=MSG_DUPLICATE_SLUG)

        row = build_content_row(data, get_settings().DEFAULT_CONTENT_AUTHOR)
        return {"data": create_content_item(row)}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error in POST /content")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)


@router.put("")
async def update_content(data: ContentItemUpdate) -> dict:
    """Replace a content item's editable fields."""
    if not data.id:
        raise HTTPException(status_code=400, detail="Content ID is required")
    if not data.slug or not data.title:
        raise HTTPException(status_code=400, detail="Slug and title are required")

    try:
        if slug_exists(data.slug, exclude_id=data.id):
            raise HTTPException(status_code=400, detail=MSG_DUPLICATE_SLUG)

        row = build_content_row(data, get_settings().DEFAULT_CONTENT_AUTHOR)
        return {"data": update_content_item(data.id, row)}
    except HTTPException:
        raise
    except Exception:
        logger.exception(f"Error in PUT /content for {data.id}")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)


@router.delete("")
async def delete_content(data: ContentItemDelete) -> dict:
    if not data.id:
        raise HTTPException(status_code=400, detail="Content ID is required")

    try:
        delete_content_item(data.id)
    except Exception:
        logger.exception(f"Error in DELETE /content for {data.id}")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)
    return {"success": True}
