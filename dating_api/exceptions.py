# dating_api/exceptions.py

from typing import Any, Mapping, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions.

    Subclasses carry a stable machine-readable ``code`` and the HTTP status
    the API layer answers with.
    """

    code: str = "domain_error"
    status_code: int = 400

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


# --- Account Errors ---

class DuplicateEmailError(DomainError):
    """Raised when registering an email that already belongs to a member."""

    code = "duplicate_email"
    status_code = 400

    def __init__(self, email: str):
        super().__init__("Email is already taken.")
        self.email = email


class InvalidCredentialsError(DomainError):
    """Raised on any failed login.

    The message never says whether the email or the password was wrong.
    """

    code = "invalid_credentials"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")


class InvalidTokenError(DomainError):
    """Raised when a bearer token fails signature or expiry checks."""

    code = "invalid_token"
    status_code = 401

    def __init__(self, reason: str):
        super().__init__(f"Invalid token: {reason}")


# --- Member Errors ---

class MemberNotFoundError(DomainError):
    """Raised when a member id does not exist."""

    code = "member_not_found"
    status_code = 404

    def __init__(self, member_id: str):
        super().__init__(f"Member '{member_id}' was not found.")
        self.member_id = member_id
