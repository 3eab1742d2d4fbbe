"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserAlreadyExistsError(UserError):
    """Raised when registering an email that is already taken."""


class UserNotFoundError(UserError):
    """Raised when no user matches the given email or id."""


class InvalidCredentialsError(UserError):
    """Raised when the password does not match the stored hash."""


class SessionNotFoundError(UserError):
    """Raised when a session token is unknown or has expired."""
