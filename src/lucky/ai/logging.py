"""Generation logging for remote model calls.

Saves each remote generation (prompt, raw response, outcome) as a JSON file
with metadata:

<log_dir>/
└── YYYY-MM-DD/
    └── text/
        ├── fortune_HHMMSS_uuid.json
        └── chat_HHMMSS_uuid.json

Disabled unless a log directory is configured.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class GenerationLogger:
    """Writes remote generations to a dated directory tree."""

    def __init__(self, log_dir: Optional[str] = None):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            logger.info(f"GenerationLogger writing to {self.log_dir}")

    @property
    def enabled(self) -> bool:
        return self.log_dir is not None

    def _get_text_dir(self) -> Path:
        """Get the text log directory for the report day, creating it on demand."""
        from lucky.config import get_settings

        today = get_settings().today().isoformat()
        text_dir = self.log_dir / today / "text"
        text_dir.mkdir(parents=True, exist_ok=True)
        return text_dir

    def _generate_id(self) -> str:
        return f"{datetime.now().strftime('%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_text_generation(
        self,
        category: str,
        prompt: Any,
        response: Optional[str],
        model: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Log a text generation result.

        Args:
            category: Type of generation (fortune, chat)
            prompt: The prompt or contents sent to the model
            response: Raw model text, None if nothing came back
            model: Model used for generation
            metadata: Additional context data

        Returns:
            Log entry ID, or "" when disabled or on write failure
        """
        if not self.enabled:
            return ""

        try:
            entry_id = self._generate_id()
            log_entry = {
                "id": entry_id,
                "timestamp": datetime.now().isoformat(),
                "category": category,
                "model": model,
                "prompt": prompt if isinstance(prompt, str) else repr(prompt),
                "response": response,
                "metadata": metadata or {},
            }

            filepath = self._get_text_dir() / f"{category}_{entry_id}.json"
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(log_entry, f, ensure_ascii=False, indent=2)

            logger.debug(f"Logged text generation: {filepath}")
            return entry_id

        except Exception as e:
            logger.error(f"Failed to log text generation: {e}")
            return ""


# Singleton accessor
_generation_logger: Optional[GenerationLogger] = None


def get_generation_logger(log_dir: Optional[str] = None) -> GenerationLogger:
    """Get the singleton GenerationLogger.

    ``log_dir`` is only used on first call and defaults to the configured
    ``LUCKY_AI_LOG_DIR``.
    """
    global _generation_logger
    if _generation_logger is None:
        if log_dir is None:
            from lucky.config import get_settings

            log_dir = get_settings().ai.log_dir or None
        _generation_logger = GenerationLogger(log_dir)
    return _generation_logger
