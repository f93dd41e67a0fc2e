"""LangChain ChatAnthropic wrapper for the vision solve call."""

from __future__ import annotations

import logging
from typing import Any

from inkcalc.config import Settings
from inkcalc.imaging.data_url import DecodedImage

logger = logging.getLogger(__name__)


class SolverNotConfiguredError(RuntimeError):
    """Raised when a solve is attempted without an API key."""


class VisionSolver:
    """One configured chat model shared by every request in the process."""

    def __init__(self, api_key: str, model: str, max_tokens: int = 2048) -> None:
        self.model = model
        self._llm = None
        if api_key:
            from langchain_anthropic import ChatAnthropic

            self._llm = ChatAnthropic(
                model=model,
                api_key=api_key,
                max_tokens=max_tokens,
                max_retries=0,
                timeout=None,
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> VisionSolver:
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.model_vision,
            max_tokens=settings.max_tokens,
        )

    @property
    def configured(self) -> bool:
        return self._llm is not None

    async def complete(self, prompt: str, image: DecodedImage) -> str:
        """Send the prompt and image, return the text of the single completion."""
        if self._llm is None:
            raise SolverNotConfiguredError("LLM not configured: set ANTHROPIC_API_KEY in .env")

        from langchain_core.messages import HumanMessage

        message = HumanMessage(
            content=[
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": image.media_type,
                        "data": image.b64,
                    },
                },
                {"type": "text", "text": prompt},
            ]
        )

        logger.debug("Solving %d-byte %s with %s", len(image.data), image.media_type, self.model)
        response = await self._llm.ainvoke([message])
        return _message_text(response.content)


def _message_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
