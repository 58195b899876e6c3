from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    # Metadata endpoint errors
    URL_REQUIRED = "URL_REQUIRED"
    INVALID_URL_FORMAT = "INVALID_URL_FORMAT"


class AppException(Exception):
    """Base exception class for the application"""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response"""
        result: Dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result
