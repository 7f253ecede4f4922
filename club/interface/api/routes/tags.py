"""Tag routes."""

from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from club.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from club.domain.service import JWTService
from club.domain.value import TagKind

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List available tags",
    description="Get SYSTEM and USER tags for categorizing posts and projects.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    kind: TagKind | None = None,
    limit: int = Query(default=100, ge=1, le=500),
    order_by: Literal["name", "created_at"] = "name",
) -> ListTagsResponse:
    """List tags.

    Args:
        use_case: List tags use case (injected)
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        kind: Restrict to SYSTEM or USER tags
        limit: Maximum number of tags to return
        order_by: Sort order ('name' or 'created_at')

    Returns:
        List of tags

    Example:
        GET /tags?kind=SYSTEM&limit=10&order_by=name
    """
    jwt_service.authenticate(authorization)
    with logfire.span("api.list_tags", kind=kind, limit=limit, order_by=order_by):
        request = ListTagsRequest(kind=kind, limit=limit, order_by=order_by)
        return await use_case.execute(request)
