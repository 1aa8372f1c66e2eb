"""
AI module - Pluggable AI providers (Claude, OpenAI).
"""

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider
from common.ai.json_output import extract_json

__all__ = ["AIProvider", "ClaudeProvider", "OpenAIProvider", "extract_json"]
