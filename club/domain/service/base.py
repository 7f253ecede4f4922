"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold rules spanning entities (tag resolution, ownership checks,
    membership review) and talk to storage only through repositories.
    """
