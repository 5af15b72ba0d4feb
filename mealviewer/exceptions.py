"""
MealViewer error types and failure classification.

Every failed call surfaces as a single MealViewerError carrying one of four
codes. `classify` is the only place raw failures get translated.
"""

import errno
import sys
from enum import Enum
from typing import Optional

import httpx

if sys.version_info < (3, 11):
    from exceptiongroup import BaseExceptionGroup


class ErrorCode(str, Enum):
    """Kinds of MealViewer failures."""
    SCHOOL_NOT_FOUND = "SCHOOL_NOT_FOUND"
    API_ERROR = "API_ERROR"
    INVALID_DATE = "INVALID_DATE"
    NETWORK_ERROR = "NETWORK_ERROR"


class MealViewerError(Exception):
    """Error raised by the MealViewer client.

    Attributes:
        message: Human-readable error message.
        code: Kind of failure; branch on this, not on the message.
    """

    def __init__(self, message: str, code: ErrorCode):
        self.message = message
        self.code = ErrorCode(code)
        super().__init__(message)

    def __repr__(self) -> str:
        return f"MealViewerError({self.message!r}, code={self.code.value})"


SCHOOL_NOT_FOUND_MESSAGE = "School not found. Please check the school name and try again."

NETWORK_ERROR_CODES = ("ECONNREFUSED", "ETIMEDOUT")


def transport_error_code(exc: BaseException) -> Optional[str]:
    """Return the symbolic transport error code behind an exception, if any."""
    if isinstance(exc, httpx.TimeoutException):
        return "ETIMEDOUT"
    return _find_error_code(exc, set())


def _find_error_code(exc: Optional[BaseException], seen: set) -> Optional[str]:
    # httpx wraps the socket error, walk the cause chain to find it. When
    # several addresses were tried, the socket errors sit in an exception group.
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, ConnectionRefusedError):
            return "ECONNREFUSED"
        if isinstance(exc, TimeoutError):
            return "ETIMEDOUT"
        if isinstance(exc, OSError) and exc.errno in errno.errorcode:
            return errno.errorcode[exc.errno]
        if isinstance(exc, BaseExceptionGroup):
            codes = [_find_error_code(inner, seen) for inner in exc.exceptions]
            for code in NETWORK_ERROR_CODES:
                if code in codes:
                    return code
            found = next((code for code in codes if code), None)
            if found:
                return found
        exc = exc.__cause__ or exc.__context__

    return None


def classify(exc: BaseException) -> MealViewerError:
    """Translate any failure from a menu request into a MealViewerError."""
    if isinstance(exc, MealViewerError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 404:
        return MealViewerError(SCHOOL_NOT_FOUND_MESSAGE, ErrorCode.SCHOOL_NOT_FOUND)

    if isinstance(exc, httpx.HTTPError):
        code = transport_error_code(exc)
        if code in NETWORK_ERROR_CODES:
            return MealViewerError(
                f"Network error: {code}. Please check your internet connection.",
                ErrorCode.NETWORK_ERROR,
            )
        return MealViewerError(f"API request failed: {exc}", ErrorCode.API_ERROR)

    return MealViewerError(f"Unexpected error: {exc}", ErrorCode.API_ERROR)
