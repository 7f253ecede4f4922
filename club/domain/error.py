"""Domain layer errors.

Every error carries a stable ``code`` used by the HTTP layer when rendering
error bodies.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "DomainError"


class ValidationError(DomainError):
    """Domain validation error."""

    code = "ValidationError"


class EmptyTagSetError(ValidationError):
    """Raised when content would be saved without any tags."""

    code = "EmptyTagSet"

    def __init__(self, message: str = "At least one tag is required") -> None:
        super().__init__(message)


class InvalidMainTagError(ValidationError):
    """Raised when the main tag is missing or is not a SYSTEM tag."""

    code = "InvalidMainTag"

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        super().__init__("mainTag must be a valid SYSTEM tag")


class InvalidParentTypeError(ValidationError):
    """Raised when a comment route names an unknown parent collection."""

    code = "InvalidParentType"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__("Invalid parent type")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    code = "BusinessRuleViolation"


class AuthenticationError(DomainError):
    """Raised when credentials are missing, invalid or expired."""

    code = "Unauthenticated"


class NotAuthorizedError(DomainError):
    """Raised when an identity may not perform an action on a resource."""

    code = "Forbidden"

    def __init__(
        self,
        resource: str,
        resource_id: str | None,
        user_id: str,
        reason: str | None = None,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.reason = reason
        target = f"{resource} {resource_id}" if resource_id else resource
        message = f"User {user_id} is not authorized to modify {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ParentMismatchError(NotAuthorizedError):
    """Raised when a comment is addressed through a parent it does not belong to."""

    code = "ParentMismatch"

    def __init__(self, comment_id: str, user_id: str) -> None:
        super().__init__(
            "Comment",
            comment_id,
            user_id,
            reason="comment does not belong to the requested parent",
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NotFound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with an existing unique record."""

    code = "Conflict"


class TagConflictError(ConflictError):
    """Raised when a tag with the same name and kind already exists."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"{kind} tag already exists: {name}")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email address is already in use."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Email already registered")
