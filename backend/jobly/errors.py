"""
Error taxonomy shared by every layer.

Services raise these; the handlers registered in jobly.main turn them into
responses. Nothing below the route layer builds HTTP responses itself.
"""
from typing import List, Optional


class JoblyError(Exception):
    """Base class for errors reported to the client."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def detail(self):
        return self.message


class ValidationError(JoblyError):
    """Payload or filter failed its schema. Carries every violation, in order."""
    status_code = 400

    def __init__(self, errors: List[str], message: Optional[str] = None):
        super().__init__(message or "; ".join(errors) or "Invalid request")
        self.errors = list(errors)

    def detail(self):
        return self.errors


class UnauthorizedError(JoblyError):
    """No authenticated identity on the request."""
    status_code = 401


class ForbiddenError(JoblyError):
    """Authenticated, but the identity lacks the required tier."""
    status_code = 403


class NotFoundError(JoblyError):
    """Referenced record does not exist."""
    status_code = 404
