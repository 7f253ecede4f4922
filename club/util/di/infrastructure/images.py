"""Image hosting infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import httpx

from club.adapter.cloudinary import CloudinaryImageHost
from club.config import ImageSettings
from club.domain.service import ImageHost
from club.util.di.base import ProviderBase


class ImagesProvider(ProviderBase):
    """Image host component base."""

    __mock_component__ = "images"


class ProdImagesProvider(ImagesProvider):
    """Production image host backed by Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: ImageSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared outbound HTTP client, closed on shutdown."""
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_image_host(
        self, settings: ImageSettings, http_client: httpx.AsyncClient
    ) -> ImageHost:
        """Provide image host."""
        return CloudinaryImageHost(settings=settings, http_client=http_client)
