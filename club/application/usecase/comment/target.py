"""Resolution of the comment a route addresses."""

from typing import Optional
from uuid import UUID

from club.application.context import RequestContext
from club.domain.service import CommentService, ContentCatalog
from club.domain.value import CommentId, ContentId, Identity, ParentRef


async def load_comment_target(
    catalog: ContentCatalog,
    comment_service: CommentService,
    identity: Identity,
    parent_type: str,
    parent_id: UUID,
    comment_id: Optional[UUID] = None,
) -> tuple[RequestContext, ParentRef]:
    """Resolve ``/{parent_type}/{parent_id}/comments[/{comment_id}]``.

    Every comment operation goes through here so the parent named by the
    route and the parent stored on the comment are always compared.

    Args:
        catalog: Content services by kind
        comment_service: Comment domain service
        identity: Authenticated requester
        parent_type: Route token, "posts" or "projects"
        parent_id: Parent ID from the route
        comment_id: Comment ID from the route, if any

    Returns:
        Context carrying the parent (and comment), and the route's parent ref

    Raises:
        InvalidParentTypeError: If the token names no known collection
        NotFoundError: If the parent or the comment does not exist
        ParentMismatchError: If the comment belongs to another parent
    """
    collection = catalog.resolve_parent_collection(parent_type)
    parent = await collection.service.get_by_id(ContentId(parent_id))
    ref = collection.ref(parent.id)
    ctx = RequestContext(identity=identity).with_parent(parent)

    if comment_id is not None:
        comment = await comment_service.get_comment_by_id(CommentId(comment_id))
        comment_service.ensure_parent_matches(comment, ref, identity)
        ctx = ctx.with_resource(comment)

    return ctx, ref
