"""Lucky Genie chat session.

Keeps an in-memory history and replies through the Gemini client. Replies
never raise: an empty answer or a failure turns into a friendly canned line.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lucky.ai.client import GeminiClient, get_gemini_client

logger = logging.getLogger(__name__)

GENIE_SYSTEM_PROMPT = (
    'You are a friendly and encouraging "Lucky Genie" for the app "Lucky" (幸运点点). '
    "Respond in Simplified Chinese. Keep it positive, warm, and supportive."
)

GREETING = "嗨！我是你的专属好运小精灵。有什么心事都可以告诉我哦，我会一直陪着你～ ✨"
EMPTY_REPLY = "抱歉，我刚刚走神啦，能再说一遍吗？🌸"
ERROR_REPLY = "哎呀，魔法信号好像中断了，请稍后再试一下～ 🌟"


@dataclass
class ChatMessage:
    """One chat turn."""

    role: str  # "user" or "model"
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: float = field(default_factory=time.time)
    # Shown to the user but kept out of the model conversation
    local: bool = False

    def to_content(self) -> Dict[str, Any]:
        return {"role": self.role, "parts": [{"text": self.text}]}


class GenieChat:
    """A chat session with the genie persona.

    ``messages`` is the displayed conversation. Local lines (the greeting,
    canned replies and the user turns they answer) are never sent to the
    model.
    """

    def __init__(self, client: Optional[GeminiClient] = None):
        self._client = client or get_gemini_client()
        self.messages: List[ChatMessage] = [
            ChatMessage(role="model", text=GREETING, local=True)
        ]

    async def send(self, text: str) -> ChatMessage:
        """Send a user message and return the genie's reply.

        Blank input is ignored and returns the last message unchanged.
        """
        text = text.strip()
        if not text:
            return self.messages[-1]

        turn = ChatMessage(role="user", text=text)
        self.messages.append(turn)

        reply_text: Optional[str] = None
        fallback = ERROR_REPLY
        if self._client.is_available:
            try:
                reply_text = await self._client.generate_text(
                    contents=self._history(),
                    system_instruction=GENIE_SYSTEM_PROMPT,
                )
                fallback = EMPTY_REPLY
            except Exception as e:
                logger.error(f"Genie chat failed: {e}")

        if not reply_text:
            turn.local = True
            reply = ChatMessage(role="model", text=fallback, local=True)
        else:
            reply = ChatMessage(role="model", text=reply_text)
        self.messages.append(reply)
        return reply

    def _history(self) -> List[Dict[str, Any]]:
        return [m.to_content() for m in self.messages if not m.local]
