"""API models package."""

from .customer import LoginData, LoginResponse, ProfileData, ProfileResponse
from .errors import MessageResponse

__all__ = [
    "LoginData",
    "LoginResponse",
    "ProfileData",
    "ProfileResponse",
    "MessageResponse",
]
