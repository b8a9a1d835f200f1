"""AI module for Lucky - Gemini integration for remote reports and genie chat."""

from lucky.ai.client import GeminiClient, GeminiConfig, get_gemini_client
from lucky.ai.fortune import FortuneService
from lucky.ai.genie import GenieChat, ChatMessage

__all__ = [
    # Client
    "GeminiClient",
    "GeminiConfig",
    "get_gemini_client",
    # Fortune
    "FortuneService",
    # Chat
    "GenieChat",
    "ChatMessage",
]
