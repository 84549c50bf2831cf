from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure categories raised by the API client"""
    INVALID_TOKEN = "invalid_token"
    TRANSPORT = "transport"
    PARSE = "parse"
    STATUS = "status"


class BlumApiError(Exception):
    """
    Any failure talking to the Blum API.

    The session only branches on InvalidToken; every other kind is
    reported to the user as a generic failure.
    """

    def __init__(self, message: str, kind: ErrorKind,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class InvalidToken(BlumApiError):
    """Raised whenever the API answers 401 Unauthorized"""

    def __init__(self, message: str = "Invalid authorization token"):
        super().__init__(message, ErrorKind.INVALID_TOKEN, status_code=401)
