"""Service layer for API-specific business logic."""

from usercrud_backend.api.services.users import UserService

__all__ = ["UserService"]
