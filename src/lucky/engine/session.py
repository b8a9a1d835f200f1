"""Per-session report cache."""

import logging
from datetime import date
from typing import Optional

from lucky.ai.fortune import FortuneService
from lucky.core.models import FortuneResult, UserProfile
from lucky.engine.report import generate_fortune_report

logger = logging.getLogger(__name__)


class FortuneSession:
    """Holds one profile and the report generated for it.

    The report is generated once per session; re-reading it does not
    regenerate. ``reset`` ends the session.
    """

    def __init__(self, service: Optional[FortuneService] = None):
        self._service = service
        self.profile: Optional[UserProfile] = None
        self.fortune: Optional[FortuneResult] = None

    def start(self, profile: UserProfile) -> None:
        """Begin a session for a freshly captured profile."""
        self.profile = profile
        self.fortune = None
        logger.debug(f"Session started for {profile.name}")

    async def get_fortune(self, today: Optional[date] = None) -> FortuneResult:
        """Return the cached report, generating it on first call."""
        if self.profile is None:
            raise RuntimeError("no active session; call start() first")

        if self.fortune is None:
            self.fortune = await generate_fortune_report(
                self.profile, today=today, service=self._service
            )
        return self.fortune

    def reset(self) -> None:
        """Drop the profile and its report."""
        self.profile = None
        self.fortune = None
