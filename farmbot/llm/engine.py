from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic_ai import Agent
from pydantic_ai.messages import BinaryContent, UserContent
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from farmbot.core.config import Settings
from farmbot.llm.prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

TEXT_FAILURE_REPLY = "Sorry, I'm having trouble right now. Please try again in a moment. 🙏"
IMAGE_FAILURE_REPLY = "I couldn't analyze the image. Please try again or describe what you see. 🌿"


@dataclass
class CompletionResult:
    text: str
    ok: bool
    model: str
    tokens_in: int | None = None
    tokens_out: int | None = None


def build_agent(settings: Settings) -> Agent[None, str]:
    """Create the Gemini-backed agent carrying the agriculture system prompt."""
    model = GoogleModel(
        settings.gemini_model,
        provider=GoogleProvider(api_key=settings.gemini_api_key or None),
    )
    return Agent(model=model, system_prompt=SYSTEM_PROMPT)


class CompletionClient:
    """Single-shot completions against the model provider.

    Provider and transport errors never escape: they are logged and replaced
    by a fixed apology so the sender always gets a reply.
    """

    def __init__(self, settings: Settings, agent: Agent[None, str] | None = None) -> None:
        self.settings = settings
        self.model_name = settings.gemini_model
        self._agent = agent

    @property
    def agent(self) -> Agent[None, str]:
        """The Gemini agent, created on first use.

        A missing API key then surfaces as a failed completion instead of a
        startup error.
        """
        if self._agent is None:
            self._agent = build_agent(self.settings)
        return self._agent

    async def complete_text(self, user_text: str) -> CompletionResult:
        return await self._run(user_text, fallback=TEXT_FAILURE_REPLY, kind="text")

    async def complete_with_image(
        self,
        image: bytes,
        mime_type: str | None,
        caption: str,
    ) -> CompletionResult:
        """Ask about an image in one multimodal request.

        The image travels inline (base64) next to the caption, which acts as
        the instruction for the model.
        """
        content: list[UserContent] = [
            caption,
            BinaryContent(data=image, media_type=mime_type or DEFAULT_IMAGE_MIME_TYPE),
        ]
        return await self._run(content, fallback=IMAGE_FAILURE_REPLY, kind="image")

    async def _run(
        self,
        prompt: str | Sequence[UserContent],
        fallback: str,
        kind: str,
    ) -> CompletionResult:
        try:
            result = await self.agent.run(prompt)
        except Exception:
            logger.exception(f"Gemini {kind} completion failed")
            return CompletionResult(text=fallback, ok=False, model=self.model_name)

        usage = result.usage()
        return CompletionResult(
            text=result.output.strip(),
            ok=True,
            model=self.model_name,
            tokens_in=usage.input_tokens if usage else None,
            tokens_out=usage.output_tokens if usage else None,
        )
