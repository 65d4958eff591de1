class ApiError(Exception):
    """Base error translated into the JSON error envelope.

    ``error`` is the short client-facing summary, ``message`` an optional
    longer explanation and ``data`` optional context (e.g. the existing
    registration on a duplicate).
    """

    status_code = 500
    error = "Internal server error"

    def __init__(self, error=None, message=None, data=None):
        if error is not None:
            self.error = error
        super().__init__(message or self.error)
        self.message = message
        self.data = data

    def to_dict(self):
        body = {"success": False, "error": self.error}
        if self.message:
            body["message"] = self.message
        if self.data is not None:
            body["data"] = self.data
        return body


class ValidationError(ApiError):
    status_code = 400
    error = "Validation failed"

    def __init__(self, errors, error=None, message=None):
        super().__init__(error, message)
        self.errors = errors

    def to_dict(self):
        body = super().to_dict()
        body["errors"] = self.errors
        return body


class UnauthorizedError(ApiError):
    status_code = 401
    error = "Unauthorized"


class ForbiddenError(ApiError):
    status_code = 403
    error = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    error = "Not found"


class ConflictError(ApiError):
    status_code = 409
    error = "Conflict"


class CapacityExceededError(ApiError):
    status_code = 400
    error = "Event is at full capacity"


class InvalidStatusError(ApiError):
    status_code = 400
    error = "Invalid status. Must be confirmed, pending, or rejected"
