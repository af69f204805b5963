"""Errors raised by the tool workflows.

Each error carries the message shown to the worker and the HTTP status it
maps to; ``main.py`` turns them into JSON responses.
"""
from fastapi import status


class ToolCribError(Exception):
    """Base error for rejected requests."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ToolCribError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ToolCribError):
    """Unknown worker ID, QR code or tool ID."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ToolCribError):
    """The tool is already in the requested state, or a duplicate record."""
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(ToolCribError):
    """Calibration blocks the check-out, or the tool belongs to someone else."""
    status_code = status.HTTP_403_FORBIDDEN
