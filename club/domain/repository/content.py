"""Content repository interfaces.

Posts and projects share one contract. ``PostRepository`` and
``ProjectRepository`` exist so the container can tell the two collections
apart.
"""

from abc import ABC, abstractmethod
from typing import Optional

from club.domain.model.content import Content
from club.domain.value import ContentId, TagId


class ContentRepository(ABC):
    """Repository for one collection of taggable content."""

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find content by ID.

        Args:
            content_id: Content identifier

        Returns:
            Content if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Content]:
        """Find content, newest first.

        Args:
            tag_ids: Only return content carrying at least one of these tags
            query: Case-insensitive substring matched against title or body
            limit: Maximum number of items to return
            offset: Number of items to skip

        Returns:
            Matching content ordered by ``created_at`` descending
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag_ids: Optional[list[TagId]] = None,
        query: Optional[str] = None,
    ) -> int:
        """Count content matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def save(self, content: Content) -> Content:
        """Save content (create or update), replacing its tag links.

        Args:
            content: Content to save

        Returns:
            Saved content
        """
        pass

    @abstractmethod
    async def delete(self, content_id: ContentId) -> None:
        """Delete content and its tag links.

        Args:
            content_id: Content identifier
        """
        pass


class PostRepository(ContentRepository):
    """Repository for posts."""

    pass


class ProjectRepository(ContentRepository):
    """Repository for projects."""

    pass
