"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ImageHostError(ProviderError):
    """Image host rejected or failed a request."""

    pass


class MailerError(ProviderError):
    """Outgoing mail could not be delivered to the SMTP server."""

    pass
