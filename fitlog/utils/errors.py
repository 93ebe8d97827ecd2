"""
Service-layer errors.

Services raise these instead of returning Flask responses; controllers (or the
app-wide error handler) render them with the standard error envelope.
"""


class ServiceError(Exception):
    code = "UNKNOWN_ERROR"
    status = 400

    def __init__(self, message: str, code: str = None, status: int = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status is not None:
            self.status = status


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ForbiddenError(ServiceError):
    code = "FORBIDDEN"
    status = 403


class ConflictError(ServiceError):
    code = "DUPLICATE_ENTRY"
    status = 409
