"""
AI Concierge chat service.

Answers shopper questions in the Aura brand voice with the catalog (and
the product being viewed) in the system prompt. The model may call the
edit_image tool; the service runs the image generation, reports the
outcome back into the conversation and returns the model's final reply
together with the generated image.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from common.ai.base import AIProvider
from aura.schemas.catalog import Product
from aura.services.media.image_service import ImageService

logger = logging.getLogger(__name__)


MISSING_KEY_REPLY = "I'm sorry, I cannot connect to the server right now. (Missing API Key)"
APOLOGY_REPLY = "I apologize, but I seem to be having trouble reaching our archives at the moment."

EDIT_IMAGE_TOOL: Dict[str, Any] = {
    "name": "edit_image",
    "description": (
        "Generates a new image or edits the current product image based on a text prompt. "
        "Use this when the user asks to visualize something, add/remove elements, "
        "or change the style of the image."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "prompt": {
                "type": "string",
                "description": "The description of the image to generate or the edits to apply.",
            },
        },
        "required": ["prompt"],
    },
}

TOOL_SUCCESS = "Image generated successfully."
TOOL_FAILURE = "Failed to generate image."

# Shopper-facing history uses "model" for the concierge's turns
_ROLE_MAP = {"user": "user", "model": "assistant", "assistant": "assistant"}


@dataclass
class ConciergeReply:
    text: str
    image: Optional[bytes] = None


def build_system_instruction(
    products: Sequence[Product],
    active_product: Optional[Product] = None,
) -> str:
    """System prompt with brand voice, catalog and optional product context."""
    product_context = "\n".join(
        f"- {p.name} (${p.price:g}): {p.description}. Features: {', '.join(p.features)}"
        for p in products
    )

    instruction = f"""You are the AI Concierge for "Aura", a warm, organic lifestyle tech brand.
Your tone is calm, inviting, grounded, and sophisticated. Avoid overly "techy" jargon; prefer words like "natural", "seamless", "warm", and "texture".

Here is our current product catalog:
{product_context}

Answer customer questions about specifications, recommendations, and brand philosophy.
Keep answers concise (under 3 sentences usually) to fit the chat UI.
If asked about products not in the list, gently steer them back to Aura products."""

    if active_product:
        p = active_product
        instruction += f"""

CURRENT CONTEXT: The user is currently viewing the product page for "{p.name}".

Here are the specific details for this product:
- Name: {p.name}
- Price: ${p.price:g}
- Tagline: {p.tagline}
- Category: {p.category}
- Description: {p.longDescription or p.description}
- Features: {', '.join(p.features)}

If the user asks "what is this?", "tell me about this", "is it good?", or questions about the "current product", use the details above to provide a specific, helpful answer regarding {p.name}.

If the user asks to "describe the image", "what does it look like", or about visual details, look at the IMAGE provided in the input (if any) and describe it using the Aura brand voice (warm, textured, minimalist).

If the user asks to EDIT the image (e.g., "add a cat", "make it blue"), use the 'edit_image' tool."""
    else:
        instruction += "\n\nIf the user asks to generate an image, use the 'edit_image' tool."

    return instruction


class ConciergeService:
    """
    Chat turns against the AI provider with edit_image tool dispatch.

    Every failure is turned into a fixed apology; nothing is raised to
    the caller.
    """

    def __init__(
        self,
        ai_provider: Optional[AIProvider],
        image_service: ImageService,
        products: Sequence[Product],
    ):
        """
        Initialize ConciergeService.

        Args:
            ai_provider: AI provider, or None when no key is set
            image_service: Backend for the edit_image tool
            products: Catalog included in the system prompt
        """
        self._ai = ai_provider
        self._images = image_service
        self._products = list(products)

    async def send_message(
        self,
        history: List[Dict[str, str]],
        message: str,
        active_product: Optional[Product] = None,
        image_bytes: Optional[bytes] = None,
    ) -> ConciergeReply:
        """
        Send one shopper turn.

        Args:
            history: Prior turns as [{"role": "user"|"model", "text": "..."}]
            message: The new shopper message
            active_product: Product page the shopper is on, if any
            image_bytes: Optional JPEG attached to the turn

        Returns:
            ConciergeReply with the model's text and an optional generated image
        """
        if self._ai is None:
            return ConciergeReply(text=MISSING_KEY_REPLY)

        system_prompt = build_system_instruction(self._products, active_product)
        image_b64 = base64.b64encode(image_bytes).decode("ascii") if image_bytes else None

        try:
            result = await self._ai.chat_with_tools(
                message=message,
                tools=[EDIT_IMAGE_TOOL],
                system_prompt=system_prompt,
                conversation_history=self._to_provider_history(history),
                image_base64=image_b64,
            )

            calls = result.get("tool_calls") or []
            call = calls[0] if calls else None
            if call and call["name"] == EDIT_IMAGE_TOOL["name"]:
                return await self._run_edit_image(result, call, system_prompt, image_bytes)

            return ConciergeReply(text=result.get("content", ""))

        except Exception as e:
            logger.error(f"Concierge API Error: {e}")
            return ConciergeReply(text=APOLOGY_REPLY)

    async def _run_edit_image(
        self,
        result: Dict[str, Any],
        call: Dict[str, Any],
        system_prompt: str,
        image_bytes: Optional[bytes],
    ) -> ConciergeReply:
        prompt = str(call.get("arguments", {}).get("prompt", ""))
        logger.info(f"Concierge requested edit_image: {prompt[:80]}")

        generated = await self._images.edit_image(prompt, image_bytes) if prompt else None

        follow_up = await self._ai.submit_tool_result(
            messages=result["messages"],
            tool_call=call,
            result=TOOL_SUCCESS if generated else TOOL_FAILURE,
            tools=[EDIT_IMAGE_TOOL],
            system_prompt=system_prompt,
        )

        return ConciergeReply(text=follow_up.get("content", ""), image=generated)

    @staticmethod
    def _to_provider_history(history: List[Dict[str, str]]) -> List[Dict[str, str]]:
        return [
            {"role": _ROLE_MAP.get(turn.get("role", "user"), "user"), "content": turn.get("text", "")}
            for turn in history
            if turn.get("text")
        ]
