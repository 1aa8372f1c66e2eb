"""Tests for reading JSON out of model replies."""

import pytest
from unittest.mock import AsyncMock

from common.ai.base import AIProvider
from common.ai.json_output import extract_json, strip_code_fences


class StubProvider(AIProvider):
    """Provider whose chat() returns a canned reply."""

    def __init__(self, reply):
        self.chat = AsyncMock(return_value=reply)

    async def chat(self, message, **kwargs):
        raise NotImplementedError

    async def chat_with_tools(self, message, tools, **kwargs):
        raise NotImplementedError

    async def submit_tool_result(self, messages, tool_call, result, tools, **kwargs):
        raise NotImplementedError


class TestExtractJson:

    def test_plain_array(self):
        assert extract_json('["Boutique", "À propos"]') == ["Boutique", "À propos"]

    def test_fenced_object(self):
        assert extract_json('```json\n{"cost": 12.5}\n```') == {"cost": 12.5}

    def test_leading_prose(self):
        assert extract_json('Here you go: [{"zip": "98121"}] Enjoy!') == [{"zip": "98121"}]

    def test_brackets_in_prose_before_answer(self):
        assert extract_json('Result [estimate]: {"cost": 12.5}') == {"cost": 12.5}

    def test_trailing_prose_with_brackets(self):
        assert extract_json('["Boutique"] (French)') == ["Boutique"]

    @pytest.mark.parametrize("text", ["", "no json here", "[unclosed"])
    def test_invalid_raises(self, text):
        with pytest.raises(ValueError):
            extract_json(text)

    def test_strip_code_fences_leaves_plain_text(self):
        assert strip_code_fences("  hello ") == "hello"


class TestChatJson:

    @pytest.mark.asyncio
    async def test_schema_embedded_and_reply_parsed(self):
        provider = StubProvider('```json\n["Boutique"]\n```')

        result = await provider.chat_json("Translate", schema={"type": "array"})

        assert result == ["Boutique"]
        prompt = provider.chat.call_args.kwargs["message"]
        assert prompt.startswith("Translate")
        assert '{"type": "array"}' in prompt

    @pytest.mark.asyncio
    async def test_unparseable_reply_raises(self):
        provider = StubProvider("Sorry, I can't help with that.")

        with pytest.raises(ValueError):
            await provider.chat_json("Translate", schema={"type": "array"})
