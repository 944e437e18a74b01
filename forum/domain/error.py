"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change something they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AdminRequiredError(NotAuthorizedError):
    """Raised when a non-admin calls an admin-only operation."""

    def __init__(self, action: str, user_id: str):
        super().__init__("admin operation", action, user_id)
        self.action = action


class BannedUserError(DomainError):
    """Raised when a banned user tries to use the API."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} is banned")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation collides with existing state.

    Examples: liking a post twice, re-voting for the same poll option,
    sending a friend request while one is already active.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidStateTransitionError(ConflictError):
    """Raised when a status change is not allowed by the entity lifecycle."""

    def __init__(self, resource: str, current: str, target: str):
        self.resource = resource
        self.current = current
        self.target = target
        super().__init__(f"Cannot move {resource} from {current} to {target}")
