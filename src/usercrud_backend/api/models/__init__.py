"""Models used for API request and response payloads."""

from usercrud_backend.api.models.user import UserPayload, UserResponse

__all__ = ["UserPayload", "UserResponse"]
