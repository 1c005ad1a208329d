"""
Exceptions for Projects.

Every failure in the application is one of these, so the menu loop can report
it with a single handler:
- InputError: console text that does not parse as the expected number
- NotFoundError: a project id that matches no row
- DbException: any store-level failure, wrapping the original error
"""

from typing import Any, Optional


class ProjectsException(Exception):
    """Base exception for all Projects errors."""

    def __init__(self, message: str, error_code: str = "internal_error"):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class InputError(ProjectsException):
    """Console input could not be parsed."""

    def __init__(self, text: str, expected: str):
        super().__init__(
            message=f"{text} is not a valid {expected}.",
            error_code="invalid_input",
        )
        self.text = text
        self.expected = expected


class NotFoundError(ProjectsException):
    """Project not found, or an update/delete touched no row."""

    def __init__(self, message: str, project_id: Any = None):
        super().__init__(message=message, error_code="not_found")
        self.project_id = project_id


class DbException(ProjectsException):
    """
    Data-access failure.

    The underlying error (connectivity, constraint violation, SQL error) is
    kept both as ``cause`` and as ``__cause__`` when raised with ``from``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message=message, error_code="db_error")
        self.cause = cause
