"""Error taxonomy shared by the data access and API layers."""


class StoreError(Exception):
    """Raised when a statement against the user store fails."""


class StoreConnectionError(StoreError):
    """Raised when a connection to the store cannot be acquired."""


class UserNotFoundError(StoreError):
    """Raised when no row matches the requested user id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id


class UserValidationError(ValueError):
    """Base class for user payloads that fail validation."""


class MissingFieldError(UserValidationError):
    """Raised when a required user field is empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class InvalidFormatError(UserValidationError):
    """Raised when a user field does not have the expected format."""

    def __init__(self, field: str) -> None:
        super().__init__(f"invalid {field} format")
        self.field = field
