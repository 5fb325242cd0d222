from shared.utils.app_status_code import AppStatusCode


class AppError(Exception):
    """Base for errors raised below the router layer.

    Each subclass maps to one HTTP status and one AppStatusCode, so the
    exception handlers can render it without knowing where it came from.
    """

    http_status = 400
    status_code = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    http_status = 404
    status_code = AppStatusCode.DATA_NOT_FOUND


class InvalidInputError(AppError):
    http_status = 400
    status_code = AppStatusCode.INVALID_INPUT


class ConsistencyViolationError(AppError):
    http_status = 422
    status_code = AppStatusCode.CONSISTENCY_VIOLATION


class StoreFailureError(AppError):
    http_status = 500
    status_code = AppStatusCode.STORE_FAILURE
