"""Auth Exceptions."""

from apps.character.application.auth.exceptions.auth import (
    AuthenticationError,
    AuthenticationFailure,
    ForbiddenError,
    InvalidAccessTokenError,
    MalformedCredentialsError,
    MissingCredentialsError,
)

__all__ = [
    "AuthenticationError",
    "AuthenticationFailure",
    "ForbiddenError",
    "InvalidAccessTokenError",
    "MalformedCredentialsError",
    "MissingCredentialsError",
]
