"""Outcome of the current request's unit of work."""

from typing import Optional


class RequestTransaction:
    """Commit-or-rollback decision shared across one request scope.

    FastAPI exception handlers turn domain and adapter errors into responses
    before the request scope closes, so the session finalizer never sees
    those exceptions. The handlers record the failure here instead and the
    finalizer rolls back.
    """

    def __init__(self) -> None:
        self.failure: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def mark_failed(self, reason: str) -> None:
        if self.failure is None:
            self.failure = reason
