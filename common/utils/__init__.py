"""
Utilities module - Common helpers for API responses, exceptions, and debouncing.
"""

from common.utils.responses import success_response
from common.utils.exceptions import (
    APIException,
    NotFoundException,
    ValidationException,
    ServerException,
    InternalServerException,
    ServiceUnavailableException,
)
from common.utils.debounce import Debouncer

__all__ = [
    "success_response",
    "APIException",
    "NotFoundException",
    "ValidationException",
    "ServerException",
    "InternalServerException",
    "ServiceUnavailableException",
    "Debouncer",
]
