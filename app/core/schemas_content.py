"""Pydantic schemas for lesson content items."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContentFormat(str, Enum):
    LESSON = "lesson"
    ARTICLE = "article"
    STORY = "story"
    DEBATE = "debate"
    CONVERSATION = "conversation"


class BreakdownPoint(BaseModel):
    title: str
    description: str


class RememberThis(BaseModel):
    title: str
    content: str


class LessonBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    intro: str = ""
    quick_breakdown: list[BreakdownPoint] = Field(default_factory=list, alias="quickBreakdown")
    remember_this: RememberThis | None = Field(None, alias="rememberThis")


class ContentItemFields(BaseModel):
    """Editable fields. Slug and title are checked in the endpoint for friendlier errors."""

    slug: str | None = None
    title: str | None = None
    description: str | None = None
    format: ContentFormat | None = None
    content: LessonBody | None = None
    category_slug: str | None = None
    tags: list[str] | None = None
    is_premium: bool | None = None
    is_published: bool | None = None
    estimated_duration_minutes: int | None = Field(None, ge=0)
    author: str | None = None
    display_order: int | None = None


class ContentItemCreate(ContentItemFields):
    pass


class ContentItemUpdate(ContentItemFields):
    id: str | None = None


class ContentItemDelete(BaseModel):
    id: str | None = None
