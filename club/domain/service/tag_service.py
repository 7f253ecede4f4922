"""Tag domain service.

Owns the mapping from free-form tag names supplied by clients to tag
identities, including lazy creation of USER tags.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from club.domain.error import (
    EmptyTagSetError,
    InvalidMainTagError,
    TagConflictError,
    ValidationError,
)
from club.domain.model.tag import Tag
from club.domain.repository.tag import TagRepository
from club.domain.value import TagId, TagKind, TagName, UserId
from club.domain.value.common import ValueObject

from .base import Service


class ResolvedTagSet(ValueObject):
    """Tags resolved for one piece of content.

    ``tags`` is de-duplicated, keeps the order names were requested in, and
    always contains ``main_tag``.
    """

    tags: list[Tag]
    main_tag: Tag

    @property
    def tag_ids(self) -> list[TagId]:
        return [tag.id for tag in self.tags]

    @property
    def main_tag_id(self) -> TagId:
        return self.main_tag.id


def parse_tag_name(raw: str) -> TagName:
    """Parse a raw name into a ``TagName``.

    Raises:
        ValidationError: If the name is blank or too long
    """
    try:
        return TagName(raw)
    except PydanticValidationError:
        raise ValidationError(f"Invalid tag name: {raw!r}")


def normalize_tag_names(raw_names: Iterable[str]) -> list[TagName]:
    """Normalize requested names.

    Names are trimmed and lowercased; blanks are dropped and duplicates
    collapse onto their first occurrence.
    """
    names: list[TagName] = []
    seen: set[str] = set()
    for raw in raw_names:
        if not raw or not raw.strip():
            continue
        name = parse_tag_name(raw)
        if name.root not in seen:
            seen.add(name.root)
            names.append(name)
    return names


def _prefer_system(tags: Iterable[Tag]) -> dict[str, Tag]:
    by_name: dict[str, Tag] = {}
    for tag in tags:
        current = by_name.get(tag.name.root)
        if current is None or (tag.is_system and not current.is_system):
            by_name[tag.name.root] = tag
    return by_name


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_tag_set(
        self,
        requested_names: Iterable[str],
        main_tag_name: str,
        requester_id: UserId,
    ) -> ResolvedTagSet:
        """Resolve requested names and a main tag into tag identities.

        Any existing tag, SYSTEM or USER, satisfies a requested name. Names
        nobody has used yet become USER tags owned by ``requester_id``. The
        main tag must already exist as a SYSTEM tag and is appended when the
        requested names do not include it. The main tag is checked before any
        USER tag is created, so a rejected request leaves no new tags behind.

        Resolution is idempotent: resolving the same input twice yields the
        same tag ids.

        Args:
            requested_names: Raw tag names from the client
            main_tag_name: Raw main tag name from the client
            requester_id: User creating any missing USER tags

        Returns:
            Resolved tag set

        Raises:
            EmptyTagSetError: If no usable names remain after normalization
            InvalidMainTagError: If the main tag is not an existing SYSTEM tag
            TagConflictError: If a concurrent creation cannot be reconciled
        """
        names = normalize_tag_names(requested_names)

        with logfire.span(
            "tag_service.resolve_tag_set",
            tags=[name.root for name in names],
            main_tag=main_tag_name,
            requester_id=str(requester_id),
        ):
            if not names:
                logfire.warn("Tag resolution rejected: no tags requested")
                raise EmptyTagSetError()

            main_tag = await self.get_system_tag(main_tag_name)

            existing = _prefer_system(await self.tag_repository.find_by_names(names))

            tags: list[Tag] = []
            for name in names:
                tag = existing.get(name.root)
                if tag is None:
                    tag = await self._create_user_tag(name, requester_id)
                tags.append(tag)

            if main_tag.id not in {tag.id for tag in tags}:
                tags.append(main_tag)

            logfire.info(
                "Tags resolved",
                count=len(tags),
                main_tag=main_tag.name.root,
            )
            return ResolvedTagSet(tags=tags, main_tag=main_tag)

    async def get_system_tag(self, name: str) -> Tag:
        """Look up a SYSTEM tag by raw name.

        Args:
            name: Raw tag name

        Returns:
            The SYSTEM tag

        Raises:
            InvalidMainTagError: If the name is blank or no SYSTEM tag has it
        """
        try:
            tag_name = TagName(name)
        except PydanticValidationError:
            raise InvalidMainTagError(name)

        tag = await self.tag_repository.find_by_name(tag_name, kind=TagKind.SYSTEM)
        if tag is None:
            logfire.warn("Main tag is not a SYSTEM tag", tag_name=tag_name.root)
            raise InvalidMainTagError(tag_name.root)
        return tag

    async def _create_user_tag(self, name: TagName, requester_id: UserId) -> Tag:
        now = datetime.now()
        tag = Tag(
            id=TagId(uuid4()),
            name=name,
            kind=TagKind.USER,
            created_by=requester_id,
            created_at=now,
            updated_at=now,
        )
        try:
            saved = await self.tag_repository.save(tag)
        except TagConflictError:
            # Lost a race with a concurrent request creating the same tag
            winner = await self.tag_repository.find_by_name(name, kind=TagKind.USER)
            if winner is None:
                logfire.error("USER tag conflict could not be reconciled", tag=name.root)
                raise
            logfire.info("USER tag created concurrently, reusing", tag=name.root)
            return winner

        logfire.info(
            "USER tag created", tag=saved.name.root, created_by=str(requester_id)
        )
        return saved

    async def create_system_tag(self, name: str) -> Tag:
        """Create a curated SYSTEM tag.

        Args:
            name: Raw tag name

        Returns:
            Created tag

        Raises:
            TagConflictError: If a SYSTEM tag with this name exists
        """
        tag_name = parse_tag_name(name)
        with logfire.span("tag_service.create_system_tag", tag=tag_name.root):
            existing = await self.tag_repository.find_by_name(
                tag_name, kind=TagKind.SYSTEM
            )
            if existing:
                raise TagConflictError(tag_name.root, TagKind.SYSTEM.value)

            now = datetime.now()
            tag = await self.tag_repository.save(
                Tag(
                    id=TagId(uuid4()),
                    name=tag_name,
                    kind=TagKind.SYSTEM,
                    created_at=now,
                    updated_at=now,
                )
            )
            logfire.info("SYSTEM tag created", tag=tag.name.root)
            return tag

    async def get_tag(self, tag_id: TagId) -> Optional[Tag]:
        """Get a tag by ID."""
        return await self.tag_repository.find_by_id(tag_id)

    async def get_tags_by_ids(self, tag_ids: Iterable[TagId]) -> dict[TagId, Tag]:
        """Batch fetch tags keyed by ID."""
        ids = list(dict.fromkeys(tag_ids))
        if not ids:
            return {}
        tags = await self.tag_repository.find_by_ids(ids)
        return {tag.id: tag for tag in tags}

    async def find_tag_ids_by_name(self, name: str) -> list[TagId]:
        """IDs of every tag, of either kind, called ``name``.

        Args:
            name: Raw tag name

        Returns:
            Matching tag IDs (empty if the name is unknown, blank or too
            long to be a tag)
        """
        if not name or not name.strip():
            return []
        try:
            tag_name = parse_tag_name(name)
        except ValidationError:
            return []
        tags = await self.tag_repository.find_by_names([tag_name])
        return [tag.id for tag in tags]

    async def get_all_tags(
        self,
        kind: Optional[TagKind] = None,
        limit: int = 100,
        order_by: str = "name",
    ) -> list[Tag]:
        """Get all available tags.

        Args:
            kind: Restrict to one namespace
            limit: Maximum number of tags to return
            order_by: Field to order by ('name' or 'created_at')

        Returns:
            List of tags
        """
        with logfire.span(
            "tag_service.get_all_tags",
            kind=kind.value if kind else None,
            limit=limit,
            order_by=order_by,
        ):
            tags = await self.tag_repository.find_all(
                kind=kind, limit=limit, order_by=order_by
            )
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def count_tags(self, kind: Optional[TagKind] = None) -> int:
        """Count tags, optionally of one kind."""
        return await self.tag_repository.count(kind=kind)
