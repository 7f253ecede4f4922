"""Cloudinary image host client.

Talks to the Cloudinary REST upload API with signed requests.
"""

import hashlib
import time
from uuid import uuid4

import httpx
import logfire

from club.adapter.error import ImageHostError
from club.config import ImageSettings
from club.domain.service.content_service import ImageHost
from club.domain.value import ImageUpload, UploadedImage


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute a Cloudinary request signature.

    Parameters are sorted by name, joined as ``k=v`` pairs with ``&`` and the
    API secret is appended before hashing with SHA-1.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryImageHost(ImageHost):
    """Image host backed by Cloudinary."""

    def __init__(self, settings: ImageSettings, http_client: httpx.AsyncClient) -> None:
        """Initialize Cloudinary client.

        Args:
            settings: Image settings with Cloudinary credentials
            http_client: Shared HTTP client (owned by the DI container)
        """
        self.settings = settings
        self.http_client = http_client
        self.base_url = f"{settings.api_base_url}/{settings.cloud_name}/image"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        signed = {**params, "timestamp": str(int(time.time()))}
        signed["signature"] = sign_params(signed, self.settings.api_secret)
        signed["api_key"] = self.settings.api_key
        return signed

    async def upload(self, image: ImageUpload, folder: str) -> UploadedImage:
        """Upload an image.

        Raises:
            ImageHostError: If the upload fails
        """
        data = self._signed({"folder": folder})
        files = {
            "file": (
                image.filename or "upload",
                image.data,
                image.content_type or "application/octet-stream",
            )
        }

        with logfire.span("cloudinary.upload", folder=folder, size=image.size):
            try:
                response = await self.http_client.post(
                    f"{self.base_url}/upload",
                    data=data,
                    files=files,
                    timeout=self.settings.request_timeout,
                )
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                logfire.error(
                    "Image upload rejected",
                    status_code=e.response.status_code,
                    response=e.response.text,
                )
                raise ImageHostError(
                    f"Image upload failed with status {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                logfire.error("Image upload request failed", error=str(e))
                raise ImageHostError(f"Image upload failed: {e}") from e

            if "secure_url" not in payload or "public_id" not in payload:
                raise ImageHostError("Image upload response missing secure_url or public_id")

            logfire.info("Image uploaded", public_id=payload["public_id"])
            return UploadedImage(url=payload["secure_url"], asset_ref=payload["public_id"])

    async def delete(self, asset_ref: str) -> bool:
        """Delete an image.

        Returns:
            True if deleted, False if Cloudinary reports it as not found

        Raises:
            ImageHostError: If the request fails or the result is unexpected
        """
        data = self._signed({"public_id": asset_ref})

        with logfire.span("cloudinary.destroy", public_id=asset_ref):
            try:
                response = await self.http_client.post(
                    f"{self.base_url}/destroy",
                    data=data,
                    timeout=self.settings.request_timeout,
                )
                response.raise_for_status()
                result = response.json().get("result")
            except httpx.HTTPError as e:
                logfire.error("Image delete request failed", error=str(e))
                raise ImageHostError(f"Image delete failed: {e}") from e

            if result == "ok":
                logfire.info("Image deleted", public_id=asset_ref)
                return True
            if result == "not found":
                return False
            raise ImageHostError(f"Unexpected destroy result: {result}")


class MockImageHost(ImageHost):
    """In-memory image host for testing.

    Set ``fail_uploads`` or ``fail_deletes`` to simulate an unavailable host.
    """

    def __init__(self, base_url: str = "https://images.test") -> None:
        self.base_url = base_url
        self.assets: dict[str, bytes] = {}
        self.deleted: list[str] = []
        self.fail_uploads = False
        self.fail_deletes = False

    async def upload(self, image: ImageUpload, folder: str) -> UploadedImage:
        if self.fail_uploads:
            raise ImageHostError("Mock image host unavailable")
        asset_ref = f"{folder}/{uuid4().hex}"
        self.assets[asset_ref] = image.data
        return UploadedImage(url=f"{self.base_url}/{asset_ref}", asset_ref=asset_ref)

    async def delete(self, asset_ref: str) -> bool:
        if self.fail_deletes:
            raise ImageHostError("Mock image host unavailable")
        if asset_ref not in self.assets:
            return False
        del self.assets[asset_ref]
        self.deleted.append(asset_ref)
        return True
