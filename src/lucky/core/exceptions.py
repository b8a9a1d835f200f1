"""Exceptions raised by the Lucky engine."""


class LuckyError(Exception):
    """Base class for all Lucky errors."""


class InvalidInputError(LuckyError, ValueError):
    """Raised on programming or intake errors (bad profile, pool over-draw)."""


class RemoteUnavailableError(LuckyError):
    """Raised when remote generation is not configured or did not produce a usable report.

    Never escapes ``generate_fortune_report``; it is always absorbed into
    the local synthesis fallback.
    """
