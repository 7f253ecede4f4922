"""In-memory implementation of the content repositories for testing."""

from typing import ClassVar, Optional

from club.domain.model import Content
from club.domain.repository import ContentRepository, PostRepository, ProjectRepository
from club.domain.value import ContentId, ContentKind, TagId

from .store import InMemoryStore


class InMemoryContentRepository(ContentRepository):
    """In-memory content repository for one kind."""

    kind: ClassVar[ContentKind]

    def __init__(self, store: InMemoryStore) -> None:
        self._items = store.content[self.kind]

    def _matching(
        self, tag_ids: Optional[list[TagId]], query: Optional[str]
    ) -> list[Content]:
        # Newest insertions first so equal timestamps still list newest first
        items = list(reversed(self._items.values()))
        if tag_ids is not None:
            wanted = set(tag_ids)
            items = [c for c in items if wanted.intersection(c.tag_ids)]
        if query:
            needle = query.lower()
            items = [
                c for c in items if needle in c.title.lower() or needle in c.body.lower()
            ]
        return items

    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        return self._items.get(content_id)

    async def find_all(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Content]:
        items = self._matching(tag_ids, query)
        items.sort(key=lambda c: c.created_at, reverse=True)
        return items[offset : offset + limit]

    async def count(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
    ) -> int:
        return len(self._matching(tag_ids, query))

    async def save(self, content: Content) -> Content:
        self._items[content.id] = content
        return content

    async def delete(self, content_id: ContentId) -> None:
        self._items.pop(content_id, None)


class InMemoryPostRepository(InMemoryContentRepository, PostRepository):
    """In-memory repository for posts."""

    kind = ContentKind.POST


class InMemoryProjectRepository(InMemoryContentRepository, ProjectRepository):
    """In-memory repository for projects."""

    kind = ContentKind.PROJECT
