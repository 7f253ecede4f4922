"""Post and project routes.

Both collections expose the same surface; ``build_content_router`` binds
one router per content kind.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Header, Query, UploadFile, status

from club.application.usecase.content import (
    ContentListResponse,
    ContentView,
    CreateContentRequest,
    CreateContentUseCase,
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
    GetContentRequest,
    GetContentUseCase,
    ListContentRequest,
    ListContentUseCase,
    RemoveContentImageRequest,
    RemoveContentImageUseCase,
    UpdateContentRequest,
    UpdateContentUseCase,
    UploadContentImageRequest,
    UploadContentImageUseCase,
)
from club.domain.service import JWTService
from club.domain.value import ContentKind, ImageUpload


async def read_upload(upload: UploadFile | None) -> ImageUpload | None:
    """Turn a multipart file into an image upload. Empty file fields count as absent."""
    if upload is None or not upload.filename:
        return None
    return ImageUpload(
        data=await upload.read(),
        filename=upload.filename,
        content_type=upload.content_type,
    )


def build_content_router(kind: ContentKind) -> APIRouter:
    """Build the router serving one content collection.

    Args:
        kind: Content kind served under ``/{kind.collection}``

    Returns:
        Router with list, create, read, update, delete and image routes
    """
    router = APIRouter(
        prefix=f"/{kind.collection}",
        tags=[kind.collection],
        route_class=DishkaRoute,
    )

    @router.get("", response_model=ContentListResponse)
    async def list_content(
        use_case: FromDishka[ListContentUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=10, ge=1, le=100),
        tag: str | None = None,
        q: str | None = None,
    ) -> ContentListResponse:
        """List newest first, optionally filtered by tag name or text.

        Example:
            GET /projects?page=1&limit=10&tag=robotics&q=arm
        """
        identity = jwt_service.authenticate(authorization)
        return await use_case.execute(
            ListContentRequest(
                kind=kind, identity=identity, page=page, limit=limit, tag=tag, q=q
            )
        )

    @router.post("", response_model=ContentView, status_code=status.HTTP_201_CREATED)
    async def create_content(
        use_case: FromDishka[CreateContentUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
        title: str = Form(...),
        body: str = Form(...),
        main_tag: str = Form(...),
        tags: list[str] = Form(default=[]),
        image: UploadFile | None = File(default=None),
    ) -> ContentView:
        """Create an item from a form body.

        Tags are repeated ``tags`` fields; ``main_tag`` must name a SYSTEM
        tag and is added to the tags when missing. Without an image a
        placeholder seeded by the main tag is used.
        """
        identity = jwt_service.authenticate(authorization)
        with logfire.span(f"api.create_{kind.value.lower()}", tags=tags, main_tag=main_tag):
            return await use_case.execute(
                CreateContentRequest(
                    kind=kind,
                    identity=identity,
                    title=title,
                    body=body,
                    tags=tags,
                    main_tag=main_tag,
                    image=await read_upload(image),
                )
            )

    @router.get("/{content_id}", response_model=ContentView)
    async def get_content(
        content_id: UUID,
        use_case: FromDishka[GetContentUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
    ) -> ContentView:
        """Read one item with its tags expanded."""
        identity = jwt_service.authenticate(authorization)
        return await use_case.execute(
            GetContentRequest(kind=kind, identity=identity, content_id=content_id)
        )

    @router.put("/{content_id}", response_model=ContentView)
    async def update_content(
        content_id: UUID,
        use_case: FromDishka[UpdateContentUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
        title: str | None = Form(default=None),
        body: str | None = Form(default=None),
        main_tag: str | None = Form(default=None),
        tags: list[str] | None = Form(default=None),
        image: UploadFile | None = File(default=None),
    ) -> ContentView:
        """Partially update an item.

        Omitted fields keep their value. ``tags`` and ``main_tag`` replace
        the tag set together; sending only one of them is a 400.
        """
        identity = jwt_service.authenticate(authorization)
        return await use_case.execute(
            UpdateContentRequest(
                kind=kind,
                identity=identity,
                content_id=content_id,
                title=title,
                body=body,
                tags=tags,
                main_tag=main_tag,
                image=await read_upload(image),
            )
        )

    @router.delete("/{content_id}", response_model=DeleteContentResponse)
    async def delete_content(
        content_id: UUID,
        use_case: FromDishka[DeleteContentUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
    ) -> DeleteContentResponse:
        """Delete an item, its comments and its hosted image."""
        identity = jwt_service.authenticate(authorization)
        return await use_case.execute(
            DeleteContentRequest(kind=kind, identity=identity, content_id=content_id)
        )

    @router.post("/{content_id}/image", response_model=ContentView)
    async def upload_image(
        content_id: UUID,
        use_case: FromDishka[UploadContentImageUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
        image: UploadFile = File(...),
    ) -> ContentView:
        """Upload a new image, replacing the current one."""
        identity = jwt_service.authenticate(authorization)
        upload = await read_upload(image)
        if upload is None:
            upload = ImageUpload(data=b"", filename=None, content_type=None)
        return await use_case.execute(
            UploadContentImageRequest(
                kind=kind, identity=identity, content_id=content_id, image=upload
            )
        )

    @router.delete("/{content_id}/image", response_model=ContentView)
    async def remove_image(
        content_id: UUID,
        use_case: FromDishka[RemoveContentImageUseCase],
        jwt_service: FromDishka[JWTService],
        authorization: str | None = Header(default=None),
    ) -> ContentView:
        """Remove the hosted image. 404 when there is none."""
        identity = jwt_service.authenticate(authorization)
        return await use_case.execute(
            RemoveContentImageRequest(kind=kind, identity=identity, content_id=content_id)
        )

    return router


posts_router = build_content_router(ContentKind.POST)
projects_router = build_content_router(ContentKind.PROJECT)
