"""Content domain service shared by posts and projects."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import ClassVar, Iterable, Optional
from urllib.parse import quote
from uuid import uuid4

import logfire

from club.config import ImageSettings
from club.domain.error import (
    EmptyTagSetError,
    InvalidMainTagError,
    NotFoundError,
    ValidationError,
)
from club.domain.model.content import Content
from club.domain.repository.content import (
    ContentRepository,
    PostRepository,
    ProjectRepository,
)
from club.domain.value import (
    ContentId,
    ContentKind,
    ImageUpload,
    Page,
    TagKind,
    UploadedImage,
    UserId,
)

from .authorization_service import POST_POLICY, PROJECT_POLICY, AccessPolicy
from .base import Service
from .tag_service import TagService


class ImageHost(ABC):
    """External image store.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def upload(self, image: ImageUpload, folder: str) -> UploadedImage:
        """Store an image.

        Args:
            image: Image bytes and metadata
            folder: Folder hint at the host

        Returns:
            Public URL and asset reference

        Raises:
            ImageHostError: If the host rejects or fails the upload
        """
        pass

    @abstractmethod
    async def delete(self, asset_ref: str) -> bool:
        """Delete a stored image.

        Args:
            asset_ref: Asset reference returned by ``upload``

        Returns:
            True if deleted, False if the host did not know the asset

        Raises:
            ImageHostError: If the host fails the request
        """
        pass


class ContentService(Service):
    """Domain service for one kind of taggable content.

    Subclasses bind the content kind and its access policy; all behavior is
    shared.
    """

    kind: ClassVar[ContentKind]
    policy: ClassVar[AccessPolicy]

    def __init__(
        self,
        content_repository: ContentRepository,
        tag_service: TagService,
        image_host: ImageHost,
        image_settings: ImageSettings,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Repository of this content kind
            tag_service: Tag domain service
            image_host: Image store
            image_settings: Upload limits and placeholder template
        """
        self.content_repository = content_repository
        self.tag_service = tag_service
        self.image_host = image_host
        self.image_settings = image_settings

    @property
    def _span_prefix(self) -> str:
        return f"{self.kind.value.lower()}_service"

    async def get_by_id(self, content_id: ContentId) -> Content:
        """Get content by ID.

        Raises:
            NotFoundError: If no content of this kind has the ID
        """
        with logfire.span(
            f"{self._span_prefix}.get_by_id", content_id=str(content_id)
        ):
            content = await self.content_repository.find_by_id(content_id)
            if content is None:
                logfire.warn(f"{self.kind.value} not found", content_id=str(content_id))
                raise NotFoundError(self.kind.value, str(content_id))
            return content

    async def list_content(
        self,
        page: Page,
        tag: Optional[str] = None,
        query: Optional[str] = None,
    ) -> tuple[list[Content], int]:
        """List content newest first.

        Args:
            page: Pagination window
            tag: Only content carrying a tag with this name (any kind)
            query: Case-insensitive substring of title or body

        Returns:
            Tuple of (items on the page, total matching items)
        """
        with logfire.span(
            f"{self._span_prefix}.list_content",
            page=page.page,
            limit=page.limit,
            tag=tag,
            query=query,
        ):
            tag_ids = None
            if tag is not None and tag.strip():
                tag_ids = await self.tag_service.find_tag_ids_by_name(tag)
                if not tag_ids:
                    logfire.info("Unknown tag filter, returning no content", tag=tag)
                    return [], 0

            search = query.strip() if query and query.strip() else None
            items = await self.content_repository.find_all(
                tag_ids=tag_ids, query=search, limit=page.limit, offset=page.offset
            )
            total = await self.content_repository.count(tag_ids=tag_ids, query=search)
            logfire.info(
                f"{self.kind.value} list retrieved", count=len(items), total=total
            )
            return items, total

    async def count(self) -> int:
        """Total number of items of this kind."""
        return await self.content_repository.count()

    async def create(
        self,
        author_id: UserId,
        author_username: str,
        title: str,
        body: str,
        tag_names: Iterable[str],
        main_tag_name: str,
        image: Optional[ImageUpload] = None,
    ) -> Content:
        """Create content.

        Tags are resolved first, then invariants are checked, then the image
        (if any) is uploaded, and only then is the content written. Without an
        image the content gets a placeholder seeded by the main tag name.

        Returns:
            Saved content

        Raises:
            EmptyTagSetError: If no tags were supplied
            InvalidMainTagError: If the main tag is not a SYSTEM tag
            ValidationError: If the image is not acceptable
            ImageHostError: If the upload fails
        """
        with logfire.span(
            f"{self._span_prefix}.create",
            author_id=str(author_id),
            title=title,
        ):
            resolved = await self.tag_service.resolve_tag_set(
                tag_names, main_tag_name, requester_id=author_id
            )

            now = datetime.now()
            content = Content(
                id=ContentId(uuid4()),
                kind=self.kind,
                title=title,
                body=body,
                author_id=author_id,
                author_username=author_username,
                tag_ids=resolved.tag_ids,
                main_tag_id=resolved.main_tag_id,
                created_at=now,
                updated_at=now,
            )
            await self.validate_invariants(content)

            if image is not None:
                uploaded = await self.upload_image(image, content.id)
                content = content.model_copy(
                    update={"image_url": uploaded.url, "image_ref": uploaded.asset_ref}
                )
            else:
                content = content.model_copy(
                    update={"image_url": self.placeholder_url(resolved.main_tag.name.root)}
                )

            saved = await self.content_repository.save(content)
            logfire.info(
                f"{self.kind.value} created",
                content_id=str(saved.id),
                tags=len(saved.tag_ids),
            )
            return saved

    async def update(
        self,
        content: Content,
        requester_id: UserId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        tag_names: Optional[list[str]] = None,
        main_tag_name: Optional[str] = None,
        image: Optional[ImageUpload] = None,
    ) -> Content:
        """Apply a partial update.

        Tags and main tag are replaced together or not at all. Fields left as
        None keep their current value.

        Args:
            content: Current content
            requester_id: User performing the update (owner of new USER tags)
            title: New title
            body: New body
            tag_names: Replacement tag names
            main_tag_name: Replacement main tag name
            image: Replacement image

        Returns:
            Saved content

        Raises:
            ValidationError: If only one of tags/main tag is supplied
            EmptyTagSetError: If the replacement tags are empty
            InvalidMainTagError: If the main tag is not a SYSTEM tag
            ImageHostError: If the upload fails
        """
        with logfire.span(
            f"{self._span_prefix}.update",
            content_id=str(content.id),
            tags_changed=tag_names is not None,
            image_changed=image is not None,
        ):
            if (tag_names is None) != (main_tag_name is None):
                raise ValidationError(
                    "Both tags and mainTag are required when updating tags"
                )

            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if body is not None:
                changes["body"] = body
            if tag_names is not None and main_tag_name is not None:
                resolved = await self.tag_service.resolve_tag_set(
                    tag_names, main_tag_name, requester_id=requester_id
                )
                changes["tag_ids"] = resolved.tag_ids
                changes["main_tag_id"] = resolved.main_tag_id

            updated = content.model_copy(update=changes)
            await self.validate_invariants(updated)

            if image is not None:
                uploaded = await self.upload_image(image, content.id)
                updated = updated.model_copy(
                    update={"image_url": uploaded.url, "image_ref": uploaded.asset_ref}
                )

            saved = await self.content_repository.save(updated)
            if image is not None:
                await self._discard_asset(content.image_ref)
            logfire.info(f"{self.kind.value} updated", content_id=str(saved.id))
            return saved

    async def delete(self, content: Content) -> None:
        """Delete content, then its hosted image."""
        with logfire.span(f"{self._span_prefix}.delete", content_id=str(content.id)):
            await self.content_repository.delete(content.id)
            await self._discard_asset(content.image_ref)
            logfire.info(f"{self.kind.value} deleted", content_id=str(content.id))

    async def replace_image(self, content: Content, image: ImageUpload) -> Content:
        """Upload a new image and drop the previous one."""
        with logfire.span(
            f"{self._span_prefix}.replace_image", content_id=str(content.id)
        ):
            uploaded = await self.upload_image(image, content.id)
            saved = await self.content_repository.save(
                content.model_copy(
                    update={
                        "image_url": uploaded.url,
                        "image_ref": uploaded.asset_ref,
                        "updated_at": datetime.now(),
                    }
                )
            )
            await self._discard_asset(content.image_ref)
            logfire.info("Image replaced", content_id=str(content.id))
            return saved

    async def remove_image(self, content: Content) -> Content:
        """Remove the hosted image.

        Raises:
            NotFoundError: If the content has no hosted image
        """
        with logfire.span(
            f"{self._span_prefix}.remove_image", content_id=str(content.id)
        ):
            if not content.image_ref:
                raise NotFoundError("Image", str(content.id))

            saved = await self.content_repository.save(
                content.model_copy(
                    update={
                        "image_url": None,
                        "image_ref": None,
                        "updated_at": datetime.now(),
                    }
                )
            )
            await self._discard_asset(content.image_ref)
            logfire.info("Image removed", content_id=str(content.id))
            return saved

    async def validate_invariants(self, content: Content) -> None:
        """Check tag invariants before a write.

        Checks run in order and the first failure aborts the write.

        Raises:
            EmptyTagSetError: If the content has no tags
            ValidationError: If the main tag is not among the tags
            InvalidMainTagError: If the main tag is missing or not SYSTEM
        """
        if not content.tag_ids:
            raise EmptyTagSetError()
        if content.main_tag_id not in content.tag_ids:
            raise ValidationError("mainTag must be included in tags")

        main_tag = await self.tag_service.get_tag(content.main_tag_id)
        if main_tag is None:
            raise InvalidMainTagError()
        if main_tag.kind != TagKind.SYSTEM:
            raise InvalidMainTagError(main_tag.name.root)

    def placeholder_url(self, main_tag_name: str) -> str:
        """Placeholder image URL seeded by the main tag name."""
        seed = quote(main_tag_name.strip(), safe="")
        return self.image_settings.placeholder_url_template.format(seed=seed)

    async def upload_image(
        self, image: ImageUpload, content_id: ContentId
    ) -> UploadedImage:
        """Validate and upload an image for this content.

        Raises:
            ValidationError: If the file is empty, not an image, or too large
            ImageHostError: If the upload fails
        """
        if not image.content_type or not image.content_type.startswith("image/"):
            raise ValidationError("Only image files are allowed")
        if image.size == 0:
            raise ValidationError("Image file is empty")
        if image.size > self.image_settings.max_bytes:
            limit_mb = self.image_settings.max_bytes // (1024 * 1024)
            raise ValidationError(f"Image must be at most {limit_mb} MB")

        folder = f"{self.kind.collection}/{content_id}"
        return await self.image_host.upload(image, folder=folder)

    async def _discard_asset(self, asset_ref: Optional[str]) -> None:
        """Drop an asset the stored content no longer references.

        Runs after the content write; host failures are only logged and
        leave an orphaned asset behind.
        """
        if not asset_ref:
            return
        try:
            deleted = await self.image_host.delete(asset_ref)
        except Exception as e:
            logfire.error(
                "Failed to delete image asset",
                asset_ref=asset_ref,
                error=str(e),
                error_type=type(e).__name__,
            )
            return
        if not deleted:
            logfire.warn("Image asset already gone", asset_ref=asset_ref)


class PostService(ContentService):
    """Posts: created and managed by admins."""

    kind = ContentKind.POST
    policy = POST_POLICY

    def __init__(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        image_host: ImageHost,
        image_settings: ImageSettings,
    ) -> None:
        super().__init__(post_repository, tag_service, image_host, image_settings)


class ProjectService(ContentService):
    """Projects: created by members, managed by their author or admins."""

    kind = ContentKind.PROJECT
    policy = PROJECT_POLICY

    def __init__(
        self,
        project_repository: ProjectRepository,
        tag_service: TagService,
        image_host: ImageHost,
        image_settings: ImageSettings,
    ) -> None:
        super().__init__(project_repository, tag_service, image_host, image_settings)
