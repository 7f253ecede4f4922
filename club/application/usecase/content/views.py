"""Response models shared by content use cases."""

from datetime import datetime
from pydantic import BaseModel

from club.domain.model import Content, Tag
from club.domain.service import TagService
from club.domain.value import Page


class TagView(BaseModel):
    """Tag as shown to clients."""

    id: str
    name: str
    kind: str

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagView":
        return cls(id=str(tag.id), name=tag.name.root, kind=tag.kind.value)


class ContentView(BaseModel):
    """Post or project with its tags expanded."""

    id: str
    kind: str
    title: str
    body: str
    author_id: str
    author_username: str
    tags: list[TagView]
    main_tag: TagView | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime


class PaginationView(BaseModel):
    """Pagination block of list responses."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: Page, total: int) -> "PaginationView":
        return cls(
            page=page.page,
            limit=page.limit,
            total=total,
            total_pages=page.total_pages(total),
        )


class ContentListResponse(BaseModel):
    """Page of content."""

    items: list[ContentView]
    pagination: PaginationView


def to_view(content: Content, tags: dict) -> ContentView:
    """Build a view from content and a tag lookup keyed by tag ID."""
    main_tag = tags.get(content.main_tag_id)
    return ContentView(
        id=str(content.id),
        kind=content.kind.value,
        title=content.title,
        body=content.body,
        author_id=str(content.author_id),
        author_username=content.author_username,
        tags=[TagView.from_tag(tags[t]) for t in content.tag_ids if t in tags],
        main_tag=TagView.from_tag(main_tag) if main_tag else None,
        image_url=content.image_url,
        created_at=content.created_at,
        updated_at=content.updated_at,
    )


async def build_views(
    items: list[Content], tag_service: TagService
) -> list[ContentView]:
    """Expand tags for many items with a single tag lookup."""
    tag_ids = [tag_id for item in items for tag_id in item.tag_ids]
    tags = await tag_service.get_tags_by_ids(tag_ids)
    return [to_view(item, tags) for item in items]


async def build_view(content: Content, tag_service: TagService) -> ContentView:
    """Expand tags for one item."""
    views = await build_views([content], tag_service)
    return views[0]
