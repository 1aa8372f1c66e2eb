"""Tests for FAL.ai image generation behind the edit_image tool."""

import base64
import pytest
from unittest.mock import AsyncMock, patch

from common.utils.exceptions import ServerException
from aura.services.media.image_service import ImageService


def _data_uri(payload: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(payload).decode("ascii")


class TestImageService:

    @pytest.mark.asyncio
    async def test_text_to_image_without_source(self):
        service = ImageService(api_key="fal-key")

        with patch.object(service, "_call_fal_api", AsyncMock(return_value={"images": [{"url": _data_uri(b"png")}], "seed": 7})) as call:
            result = await service.edit_image("a linen lamp at dusk")

        assert result == b"png"
        assert call.call_args.kwargs["endpoint"] == "fal-ai/flux/dev"
        assert call.call_args.kwargs["payload"]["prompt"] == "a linen lamp at dusk"

    @pytest.mark.asyncio
    async def test_image_to_image_with_source(self):
        service = ImageService(api_key="fal-key")

        with patch.object(service, "_call_fal_api", AsyncMock(return_value={"images": [{"url": _data_uri(b"edited")}]})) as call:
            result = await service.edit_image("make it blue", image_bytes=b"jpeg")

        assert result == b"edited"
        payload = call.call_args.kwargs["payload"]
        assert call.call_args.kwargs["endpoint"] == "fal-ai/flux/dev/image-to-image"
        assert payload["image_url"] == _data_uri(b"jpeg")

    @pytest.mark.asyncio
    async def test_missing_key_returns_none(self):
        assert await ImageService(api_key=None).edit_image("a cat") is None

    @pytest.mark.asyncio
    async def test_empty_result_returns_none(self):
        service = ImageService(api_key="fal-key")

        with patch.object(service, "_call_fal_api", AsyncMock(return_value={"images": []})):
            assert await service.edit_image("a cat") is None

    @pytest.mark.asyncio
    async def test_missing_key_raises_from_generate(self):
        with pytest.raises(ServerException):
            await ImageService(api_key=None).generate_image("a cat")
