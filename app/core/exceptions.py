"""
Error taxonomy for candidate operations.

Every error carries the HTTP status it maps to, so the API layer can render
it without knowing which workflow step raised it.
"""


class CandidateServiceError(Exception):
    """Base exception for candidate workflows. Unexpected failures map to 500."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(CandidateServiceError):
    """Referenced candidate, skill or association does not exist."""

    status_code = 404


class ConflictError(CandidateServiceError):
    """Uniqueness violation, duplicate association or compensated failure."""

    status_code = 409


class InvalidInputError(CandidateServiceError):
    """A field value is malformed or out of range."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
