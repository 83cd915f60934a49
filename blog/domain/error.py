"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for empty or over-length content, missing identifiers and
    out-of-range paging arguments.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConsistencyError(DomainError):
    """Raised when a reply targets a parent comment on a different article."""

    pass


class CascadeLimitError(DomainError):
    """Raised when a cascade delete would remove more comments than allowed."""

    def __init__(self, comment_id: str, limit: int):
        self.comment_id = comment_id
        self.limit = limit
        super().__init__(
            f"Deleting comment {comment_id} would remove more than {limit} comments"
        )
