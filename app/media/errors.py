from app.libs.errors import APIError
from app.libs.constants import MESSAGES


class UploadError(APIError):
    """Object storage rejected or failed the upload"""

    def __init__(self, message=MESSAGES["UPLOAD_FAILED"], status_code=500):
        super().__init__(message, status_code)


class FileTooLargeError(APIError):
    def __init__(self, message=MESSAGES["FILE_TOO_LARGE"], status_code=413, payload=None):
        super().__init__(message, status_code, payload)


class UnsupportedMediaError(APIError):
    def __init__(self, message=MESSAGES["UNSUPPORTED_FILE"], status_code=415):
        super().__init__(message, status_code)
