from .base import AppException, ErrorCode


class MissingURLParameterException(AppException):
    """Raised when the url query parameter is absent or blank"""

    def __init__(self):
        super().__init__(
            code=ErrorCode.URL_REQUIRED,
            message="URL parameter is required",
            status_code=400
        )


class InvalidURLFormatException(AppException):
    """Raised when the url query parameter is not an absolute http(s) URL"""

    def __init__(self, url: str = ""):
        self.url = url
        super().__init__(
            code=ErrorCode.INVALID_URL_FORMAT,
            message="Invalid URL format",
            status_code=400
        )
