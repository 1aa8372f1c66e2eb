"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- ai: Pluggable AI providers (Claude, OpenAI) with tool calling and JSON output
- utils: Standard responses, exceptions, keyed debounce timers
- config: Base settings class
"""

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    APIException,
    NotFoundException,
    ValidationException,
    ServiceUnavailableException,
    Debouncer,
)
from common.config import BaseAppSettings

__all__ = [
    # AI
    "AIProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "APIException",
    "NotFoundException",
    "ValidationException",
    "ServiceUnavailableException",
    "Debouncer",
    # Config
    "BaseAppSettings",
]
