"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from club.domain.error import TagConflictError
from club.domain.model.tag import Tag
from club.domain.repository.tag import TagRepository
from club.domain.value import TagId, TagKind, TagName

from .store import InMemoryStore


def _system_first(tag: Tag) -> int:
    return 0 if tag.kind == TagKind.SYSTEM else 1


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Enforces ``(name, kind)`` uniqueness like the database constraint.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._tags = store.tags

    async def save(self, tag: Tag) -> Tag:
        for other in self._tags.values():
            if other.id != tag.id and other.name == tag.name and other.kind == tag.kind:
                raise TagConflictError(tag.name.root, tag.kind.value)
        self._tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self._tags.get(tag_id)

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        return [self._tags[tag_id] for tag_id in tag_ids if tag_id in self._tags]

    async def find_by_name(
        self, name: TagName, kind: Optional[TagKind] = None
    ) -> Optional[Tag]:
        matches = [
            t
            for t in self._tags.values()
            if t.name == name and (kind is None or t.kind == kind)
        ]
        matches.sort(key=_system_first)
        return matches[0] if matches else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        wanted = {name.root for name in names}
        return [t for t in self._tags.values() if t.name.root in wanted]

    async def find_all(
        self,
        kind: Optional[TagKind] = None,
        limit: int = 100,
        order_by: str = "name",
    ) -> list[Tag]:
        tags = [t for t in self._tags.values() if kind is None or t.kind == kind]
        if order_by == "created_at":
            tags.sort(key=lambda t: t.created_at, reverse=True)
        else:
            tags.sort(key=lambda t: (t.name.root, _system_first(t)))
        return tags[:limit]

    async def count(self, kind: Optional[TagKind] = None) -> int:
        return sum(1 for t in self._tags.values() if kind is None or t.kind == kind)
