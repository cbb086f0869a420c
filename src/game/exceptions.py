from __future__ import annotations


class PlayerServiceError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(PlayerServiceError):
    status_code = 400
    code = "BAD_REQUEST"


class MissingFieldError(BadRequestError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Please fill in all required fields: '{field}' is missing")
        self.field = field


class InvalidFieldError(BadRequestError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(PlayerServiceError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str, key: str, value: object) -> None:
        super().__init__(f"{resource} not found with {key}: {value}")
