"""Gemini API client for remote fortune generation and genie chat.

The google-genai SDK is imported lazily so the local engine works without it.
Every call makes exactly one attempt; callers own the fallback decision.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from lucky.ai.logging import get_generation_logger
from lucky.config import get_settings

logger = logging.getLogger(__name__)


@dataclass
class GeminiConfig:
    """Configuration for Gemini client."""

    api_key: str
    fortune_model: str = "gemini-2.5-flash"
    chat_model: str = "gemini-2.5-flash"
    timeout: float = 30.0
    temperature: float = 0.9
    max_output_tokens: int = 8192

    @classmethod
    def from_settings(cls) -> "GeminiConfig":
        ai = get_settings().ai
        return cls(
            api_key=ai.gemini_api_key,
            fortune_model=ai.fortune_model,
            chat_model=ai.chat_model,
            timeout=ai.timeout,
            temperature=ai.temperature,
            max_output_tokens=ai.max_output_tokens,
        )


class GeminiClient:
    """Async interface to Gemini models.

    Provides:
    - Structured JSON generation (fortune reports)
    - Multi-turn text generation (genie chat)
    """

    def __init__(self, config: Optional[GeminiConfig] = None):
        if config is None:
            config = GeminiConfig.from_settings()
            if not config.api_key:
                logger.warning("GEMINI_API_KEY not set, remote generation disabled")

        self.config = config
        self._client = None

        logger.info("GeminiClient initialized")

    @property
    def is_available(self) -> bool:
        """Check if a credential is configured."""
        return bool(self.config.api_key)

    async def _ensure_client(self) -> bool:
        """Ensure the SDK client is initialized."""
        if self._client is not None:
            return True

        if not self.config.api_key:
            logger.error("Cannot initialize client: no API key")
            return False

        try:
            from google import genai

            self._client = genai.Client(api_key=self.config.api_key)
            logger.info("Gemini API client connected")
            return True

        except ImportError:
            logger.error("google-genai package not installed")
            return False
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {e}")
            return False

    async def _generate(
        self,
        category: str,
        model: str,
        contents: Any,
        config: Any,
    ) -> Optional[str]:
        """Run one generate_content call off the event loop, with timeout."""
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self._client.models.generate_content,
                    model=model,
                    contents=contents,
                    config=config,
                ),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"{category} generation timed out after {self.config.timeout}s")
            return None
        except Exception as e:
            logger.error(f"{category} generation failed: {e}")
            return None

        text = response.text if response is not None else None
        get_generation_logger().log_text_generation(
            category=category,
            prompt=contents,
            response=text,
            model=model,
        )
        return text or None

    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: Dict[str, Any],
        model: Optional[str] = None,
    ) -> Optional[str]:
        """Generate a JSON document constrained by ``response_schema``.

        Args:
            prompt: The user prompt
            system_instruction: System prompt
            response_schema: OpenAPI-style schema for the JSON response
            model: Override the configured fortune model

        Returns:
            Raw JSON text, or None on any failure
        """
        if not await self._ensure_client():
            return None

        from google.genai import types

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_output_tokens,
            response_mime_type="application/json",
            response_schema=response_schema,
        )
        return await self._generate(
            "fortune", model or self.config.fortune_model, prompt, config
        )

    async def generate_text(
        self,
        contents: Union[str, List[Dict[str, Any]]],
        system_instruction: Optional[str] = None,
        model: Optional[str] = None,
    ) -> Optional[str]:
        """Generate free text, single-turn or from a chat history.

        Args:
            contents: A prompt, or a list of ``{"role", "parts"}`` turns
            system_instruction: Optional system prompt
            model: Override the configured chat model

        Returns:
            Generated text or None on error
        """
        if not await self._ensure_client():
            return None

        from google.genai import types

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.config.temperature,
        )
        return await self._generate(
            "chat", model or self.config.chat_model, contents, config
        )


# Module-level singleton accessor
_client: Optional[GeminiClient] = None


def get_gemini_client(config: Optional[GeminiConfig] = None) -> GeminiClient:
    """Get the shared Gemini client instance.

    Args:
        config: Optional configuration (only used on first call)
    """
    global _client
    if _client is None:
        _client = GeminiClient(config)
    return _client
