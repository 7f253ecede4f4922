"""Tag use cases."""

from .create_system_tag import CreateSystemTagRequest, CreateSystemTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase

__all__ = [
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "CreateSystemTagRequest",
    "CreateSystemTagUseCase",
]
