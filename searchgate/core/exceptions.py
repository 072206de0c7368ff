__all__ = [
    "BaseError",
    "BadRequestError",
    "ConflictError",
    "InvalidResponseError",
    "LoadError",
    "NotFoundError",
    "NotSupportedError",
    "PreconditionFailedError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class NotFoundError(BaseError):
    status_code = 404


class ConflictError(BaseError):
    status_code = 409


class PreconditionFailedError(BaseError):
    status_code = 412


class NotSupportedError(BaseError):
    status_code = 415


class InvalidResponseError(BaseError):
    """Engine response does not match the expected schema."""

    status_code = 502


class LoadError(Exception):
    status_code = 500
