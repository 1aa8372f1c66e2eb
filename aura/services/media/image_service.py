"""
Image generation service using FAL.ai FLUX models.

Backs the concierge's edit_image tool: text-to-image when no picture is
attached, image-to-image when the shopper is looking at a product photo.
"""

import base64
import logging
from typing import Optional, Dict, Any

import httpx

from common.utils.exceptions import ServerException, ValidationException

logger = logging.getLogger(__name__)


IMAGE_SIZES = {
    "square_hd": {"width": 1024, "height": 1024},
    "square": {"width": 512, "height": 512},
    "portrait_4_3": {"width": 768, "height": 1024},
    "landscape_4_3": {"width": 1024, "height": 768},
}


class ImageService:
    """
    Generates and edits images using FAL.ai FLUX models.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://fal.run",
        timeout: float = 120.0,
    ):
        """
        Initialize ImageService.

        Args:
            api_key: FAL.ai key; generation fails with API_KEY_MISSING without it
            base_url: FAL.ai endpoint root
            timeout: Per-request timeout in seconds
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def edit_image(
        self,
        prompt: str,
        image_bytes: Optional[bytes] = None,
        image_size: str = "square_hd",
    ) -> Optional[bytes]:
        """
        Generate a new image, or edit image_bytes, from a text prompt.

        Args:
            prompt: Description of the image or of the edits to apply
            image_bytes: Optional JPEG to edit
            image_size: Size preset for text-to-image

        Returns:
            Generated image bytes, or None if generation failed
        """
        try:
            if image_bytes:
                result = await self.generate_image_to_image(prompt=prompt, image_bytes=image_bytes)
            else:
                result = await self.generate_image(prompt=prompt, image_size=image_size)
            return await self._download(result["imageUrl"])
        except Exception as e:
            logger.error(f"Image generation failed: {e}")
            return None

    async def generate_image(
        self,
        prompt: str,
        image_size: str = "square_hd",
        num_inference_steps: int = 28,
        seed: Optional[int] = None,
        guidance_scale: float = 3.5,
        enable_safety_checker: bool = True,
    ) -> Dict[str, Any]:
        """
        Generate image using FLUX dev model.

        Returns:
            dict with keys: imageUrl, width, height, seed, prompt, model
        """
        if not prompt:
            raise ValidationException(
                message="Prompt is required",
                code="VALIDATION_ERROR"
            )

        result = await self._call_fal_api(
            endpoint="fal-ai/flux/dev",
            payload={
                "prompt": prompt,
                "image_size": image_size,
                "num_inference_steps": num_inference_steps,
                "seed": seed,
                "guidance_scale": guidance_scale,
                "enable_safety_checker": enable_safety_checker,
                "sync_mode": True,
            }
        )

        size = IMAGE_SIZES.get(image_size, IMAGE_SIZES["square_hd"])
        return self._format_result(result, prompt, size, "flux-dev")

    async def generate_image_to_image(
        self,
        prompt: str,
        image_bytes: bytes,
        strength: float = 0.75,
    ) -> Dict[str, Any]:
        """
        Transform an existing JPEG based on prompt.

        The source image is sent inline as a data URI.

        Returns:
            dict with image result + model: "flux-dev-i2i"
        """
        if not prompt:
            raise ValidationException(
                message="Prompt is required",
                code="VALIDATION_ERROR"
            )

        strength = min(max(strength, 0), 1)
        image_url = "data:image/jpeg;base64," + base64.b64encode(image_bytes).decode("ascii")

        result = await self._call_fal_api(
            endpoint="fal-ai/flux/dev/image-to-image",
            payload={
                "prompt": prompt,
                "image_url": image_url,
                "strength": strength,
                "sync_mode": True,
            }
        )

        return self._format_result(result, prompt, IMAGE_SIZES["square_hd"], "flux-dev-i2i")

    @staticmethod
    def _format_result(
        result: Dict[str, Any],
        prompt: str,
        size: Dict[str, int],
        model: str,
    ) -> Dict[str, Any]:
        images = result.get("images") or [{}]
        image_data = images[0]
        if not image_data.get("url"):
            raise ServerException(
                message="Image provider returned no image",
                code="GENERATION_FAILED"
            )

        return {
            "imageUrl": image_data["url"],
            "width": image_data.get("width", size["width"]),
            "height": image_data.get("height", size["height"]),
            "seed": result.get("seed"),
            "prompt": prompt,
            "model": model,
        }

    async def _call_fal_api(
        self,
        endpoint: str,
        payload: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Call FAL.ai API endpoint.

        Args:
            endpoint: API endpoint path
            payload: Request payload

        Returns:
            API response dict
        """
        if not self._api_key:
            raise ServerException(
                message="FAL.ai API key not configured",
                code="API_KEY_MISSING"
            )

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self._base_url}/{endpoint}",
                    headers={
                        "Authorization": f"Key {self._api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                    timeout=self._timeout
                )

                if response.status_code != 200:
                    logger.error(
                        f"FAL.ai API error: {response.status_code} - {response.text}"
                    )
                    raise ServerException(
                        message="Failed to generate image",
                        code="GENERATION_FAILED"
                    )

                return response.json()

        except httpx.RequestError as e:
            logger.error(f"FAL.ai request error: {e}")
            raise ServerException(
                message="Failed to connect to FAL.ai API",
                code="GENERATION_FAILED"
            )

    async def _download(self, image_url: str) -> bytes:
        """Image bytes from a data URI (sync mode) or a hosted URL."""
        if image_url.startswith("data:"):
            _, _, encoded = image_url.partition(",")
            return base64.b64decode(encoded)

        async with httpx.AsyncClient() as client:
            response = await client.get(image_url, timeout=self._timeout)
            response.raise_for_status()
            return response.content
