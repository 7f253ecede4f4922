"""Post and project use cases."""

from .content_image import (
    RemoveContentImageRequest,
    RemoveContentImageUseCase,
    UploadContentImageRequest,
    UploadContentImageUseCase,
)
from .create_content import CreateContentRequest, CreateContentUseCase
from .delete_content import (
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
)
from .get_content import GetContentRequest, GetContentUseCase
from .list_content import ListContentRequest, ListContentUseCase
from .update_content import UpdateContentRequest, UpdateContentUseCase
from .views import ContentListResponse, ContentView, PaginationView, TagView

__all__ = [
    "ContentView",
    "ContentListResponse",
    "PaginationView",
    "TagView",
    "CreateContentRequest",
    "CreateContentUseCase",
    "GetContentRequest",
    "GetContentUseCase",
    "ListContentRequest",
    "ListContentUseCase",
    "UpdateContentRequest",
    "UpdateContentUseCase",
    "DeleteContentRequest",
    "DeleteContentResponse",
    "DeleteContentUseCase",
    "UploadContentImageRequest",
    "UploadContentImageUseCase",
    "RemoveContentImageRequest",
    "RemoveContentImageUseCase",
]
