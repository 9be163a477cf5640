"""Auth value types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUser:
    """Authenticated user as seen by request handlers."""

    id: int
    username: str
    name: str


@dataclass(frozen=True)
class UserCredentials:
    """User row including the stored password hash; never leaves the auth layer."""

    user: AuthUser
    hashed_password: str
