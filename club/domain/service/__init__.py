"""Domain services for the club platform."""

from .authorization_service import (
    COMMENT_POLICY,
    POST_POLICY,
    PROJECT_POLICY,
    AccessPolicy,
    Action,
    AuthorizationDecision,
    AuthorizationService,
    is_owner_or_admin,
)
from .base import Service
from .comment_service import CommentService
from .content_catalog import ContentCatalog, ParentCollection
from .content_service import ContentService, ImageHost, PostService, ProjectService
from .jwt_service import JWTService
from .membership_service import Mailer, MembershipService
from .tag_service import ResolvedTagSet, TagService, normalize_tag_names
from .user_service import UserService

__all__ = [
    "Service",
    "AccessPolicy",
    "Action",
    "AuthorizationDecision",
    "AuthorizationService",
    "is_owner_or_admin",
    "POST_POLICY",
    "PROJECT_POLICY",
    "COMMENT_POLICY",
    "TagService",
    "ResolvedTagSet",
    "normalize_tag_names",
    "ContentService",
    "PostService",
    "ProjectService",
    "ImageHost",
    "ContentCatalog",
    "ParentCollection",
    "CommentService",
    "UserService",
    "MembershipService",
    "Mailer",
    "JWTService",
]
