"""
Abstract AI provider interface.

Defines the contract that all AI/LLM providers must implement.
This allows swapping between different AI services (Claude, OpenAI, etc.)
without changing the storefront services that build prompts.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "openai":
            return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

import json
from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

from common.ai.json_output import extract_json


class AIProvider(ABC):
    """
    Abstract AI provider interface.

    Implement this for different LLM services.
    Supports plain chat, structured JSON answers and tool calling.
    """

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> str:
        """
        Send a message and get a response.

        Args:
            message: The user's message
            system_prompt: Optional system instructions
            conversation_history: Previous messages in the conversation
                Format: [{"role": "user"|"assistant", "content": "..."}]
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            **kwargs: Provider-specific options

        Returns:
            The AI's response text
        """
        pass

    @abstractmethod
    async def chat_with_tools(
        self,
        message: str,
        tools: List[Dict[str, Any]],
        system_prompt: Optional[str] = None,
        conversation_history: Optional[List[Dict[str, str]]] = None,
        image_base64: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Chat with tool calling capability.

        Args:
            message: The user's message
            tools: Tool declarations in the neutral format
                {"name", "description", "parameters": <JSON schema>}
            system_prompt: Optional system instructions
            conversation_history: Previous messages
            image_base64: Optional JPEG attached to the user turn
            max_tokens: Maximum tokens
            temperature: Sampling temperature

        Returns:
            Dict with 'content' (text), 'tool_calls' (list of
            {"id", "name", "arguments": dict}) and 'messages' (the provider
            transcript, passed back to submit_tool_result)
        """
        pass

    @abstractmethod
    async def submit_tool_result(
        self,
        messages: List[Dict[str, Any]],
        tool_call: Dict[str, Any],
        result: str,
        tools: List[Dict[str, Any]],
        system_prompt: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Report the outcome of a tool call and get the model's follow-up.

        Args:
            messages: Transcript returned by chat_with_tools
            tool_call: The call being answered
            result: Plain-text outcome reported to the model
            tools: Same tool declarations as the triggering call
            system_prompt: Same system instructions as the triggering call

        Returns:
            Same shape as chat_with_tools
        """
        pass

    async def chat_json(
        self,
        message: str,
        schema: Dict[str, Any],
        system_prompt: Optional[str] = None,
        max_tokens: int = 2048,
        temperature: float = 0.2,
        **kwargs: Any,
    ) -> Any:
        """
        Ask for an answer constrained to a JSON schema.

        The schema is embedded in the prompt and the reply is parsed
        locally. Override where the provider has native structured output.

        Raises:
            ValueError: If the reply holds no parseable JSON
        """
        prompt = (
            f"{message}\n\n"
            "Respond with JSON only, no other text, matching this JSON schema:\n"
            f"{json.dumps(schema)}"
        )
        response = await self.chat(
            message=prompt,
            system_prompt=system_prompt or "Return only valid JSON.",
            max_tokens=max_tokens,
            temperature=temperature,
            **kwargs,
        )
        return extract_json(response)
