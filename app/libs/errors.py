class APIError(Exception):
    """Base API error with status code and message"""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv["error"] = self.message
        return rv


class ValidationError(APIError):
    """Invalid or incomplete input"""

    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)


class AuthError(APIError):
    """Authentication errors"""

    def __init__(self, message="Unauthorized", status_code=401):
        super().__init__(message, status_code)


class ForbiddenError(APIError):
    """Authenticated but not allowed (e.g. not the listing owner)"""

    def __init__(self, message="Forbidden", status_code=403):
        super().__init__(message, status_code)


class NotFoundError(APIError):
    """Resource not found errors"""

    def __init__(self, message="Resource not found", status_code=404):
        super().__init__(message, status_code)


class StorageError(APIError):
    """Persistence layer failures; message is generic and not client-actionable"""

    def __init__(self, message="Internal Server Error", status_code=500):
        super().__init__(message, status_code)
