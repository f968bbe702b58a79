"""
Error kinds raised by the store, validation and lifecycle layers.

Each error carries the HTTP status it is rendered with, so the exception
handlers registered in ``main.py`` only have to translate the payload.
"""

from typing import Any, Dict, List, Optional

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailedError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__()

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str = "Record"):
        self.entity = entity
        super().__init__(f"{entity} not found")


class DuplicateKeyError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"A {entity.lower()} with this {field} already exists")


class InvalidStatusError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__("Invalid or missing status")


class StoreUnavailableError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Database unavailable"
