"""Typed failures raised by the storefront services.

Each error carries the HTTP status the API layer responds with and a message
that is surfaced to the caller verbatim.
"""


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"code": self.status_code, "message": self.message}


class NotFoundError(ApiError):
    status_code = 404


class BadRequestError(ApiError):
    status_code = 400


class ConflictError(BadRequestError):
    """The resource already holds what the caller tried to add."""


class InternalError(ApiError):
    status_code = 500
