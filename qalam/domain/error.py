"""Domain layer errors.

Each error carries a stable ``code`` that the interface layer maps to a
transport status.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class ConflictError(DomainError):
    """Uniqueness constraint violation."""

    code = "conflict"


class AuthorizationError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    code = "not_authorized"

    def __init__(self, user_id: str, action: str, resource: str, resource_id: str):
        self.user_id = user_id
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
