"""Comment routes.

Comments hang off either collection: ``/{parent_type}/{parent_id}/comments``
where ``parent_type`` is ``posts`` or ``projects``.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from club.application.usecase.comment import (
    CommentView,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from club.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying comment text."""

    content: str


@router.get("/{parent_type}/{parent_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    parent_type: str,
    parent_id: UUID,
    use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListCommentsResponse:
    """List comments on a post or project, newest first."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        ListCommentsRequest(
            identity=identity, parent_type=parent_type, parent_id=parent_id
        )
    )


@router.post(
    "/{parent_type}/{parent_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    parent_type: str,
    parent_id: UUID,
    request: CommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentView:
    """Comment on a post or project. Members and admins only.

    Example:
        POST /projects/0b6c.../comments
        {"content": "Nice gearbox!"}
    """
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        CreateCommentRequest(
            identity=identity,
            parent_type=parent_type,
            parent_id=parent_id,
            content=request.content,
        )
    )


@router.patch(
    "/{parent_type}/{parent_id}/comments/{comment_id}", response_model=CommentView
)
async def update_comment(
    parent_type: str,
    parent_id: UUID,
    comment_id: UUID,
    request: CommentAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentView:
    """Edit a comment. Author or admin, through the comment's own parent."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        UpdateCommentRequest(
            identity=identity,
            parent_type=parent_type,
            parent_id=parent_id,
            comment_id=comment_id,
            content=request.content,
        )
    )


@router.delete(
    "/{parent_type}/{parent_id}/comments/{comment_id}",
    response_model=DeleteCommentResponse,
)
async def delete_comment(
    parent_type: str,
    parent_id: UUID,
    comment_id: UUID,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment. Author or admin, through the comment's own parent."""
    identity = jwt_service.authenticate(authorization)
    return await use_case.execute(
        DeleteCommentRequest(
            identity=identity,
            parent_type=parent_type,
            parent_id=parent_id,
            comment_id=comment_id,
        )
    )
