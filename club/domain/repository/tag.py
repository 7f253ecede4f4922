"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from club.domain.model.tag import Tag
from club.domain.value import TagId, TagKind, TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate.

    Implementations must enforce uniqueness of ``(name, kind)`` and signal a
    violation with ``TagConflictError``.
    """

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag

        Raises:
            TagConflictError: If another tag already has the same name and kind
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def find_by_name(
        self, name: TagName, kind: Optional[TagKind] = None
    ) -> Optional[Tag]:
        """Find tag by name, optionally restricted to one kind.

        When ``kind`` is None and both kinds exist, the SYSTEM tag is returned.

        Args:
            name: Normalized tag name
            kind: Restrict lookup to this kind

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find all tags (of any kind) matching the given names.

        Args:
            names: Normalized tag names

        Returns:
            Matching tags; a name may match one tag per kind
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        kind: Optional[TagKind] = None,
        limit: int = 100,
        order_by: str = "name",
    ) -> list[Tag]:
        """Find all tags.

        Args:
            kind: Restrict to this kind
            limit: Maximum number of tags to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def count(self, kind: Optional[TagKind] = None) -> int:
        """Count tags, optionally of one kind."""
        pass
