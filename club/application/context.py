"""Explicit per-request context handed between use case steps."""

from dataclasses import dataclass, replace
from typing import Optional, Union

from club.domain.model import Comment, Content
from club.domain.value import Identity


@dataclass(frozen=True)
class RequestContext:
    """What a request has established so far.

    Built step by step (identity, then parent, then the target resource)
    instead of mutating a shared request object.

    Attributes:
        identity: Authenticated requester
        parent: Content a comment route is scoped to
        resource: Entity the operation targets
    """

    identity: Identity
    parent: Optional[Content] = None
    resource: Optional[Union[Content, Comment]] = None

    def with_parent(self, parent: Content) -> "RequestContext":
        return replace(self, parent=parent)

    def with_resource(self, resource: Union[Content, Comment]) -> "RequestContext":
        return replace(self, resource=resource)
