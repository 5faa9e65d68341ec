"""Application error type raised by the data-access layer.

Errors subclass ``fastapi.HTTPException`` so a route layer can let them
propagate and FastAPI turns them into responses with the right status code.
"""
from fastapi import HTTPException, status


class ExpressError(HTTPException):
    """A failure carrying a human-readable message and an HTTP status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(status_code=status_code, detail=message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class UnauthorizedError(ExpressError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


class NotFoundError(ExpressError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)
