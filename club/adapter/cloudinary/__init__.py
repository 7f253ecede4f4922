"""Cloudinary image host adapter."""

from .client import CloudinaryImageHost, MockImageHost

__all__ = ["CloudinaryImageHost", "MockImageHost"]
