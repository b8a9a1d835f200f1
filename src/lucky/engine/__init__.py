"""Fortune synthesis, remote/local merge and session helpers."""

from lucky.engine.synthesizer import synthesize_local, birth_facts, build_seed
from lucky.engine.report import generate_fortune_report, merge_remote
from lucky.engine.share import build_share_text, FALLBACK_NOTICE
from lucky.engine.session import FortuneSession

__all__ = [
    "synthesize_local",
    "birth_facts",
    "build_seed",
    "generate_fortune_report",
    "merge_remote",
    "build_share_text",
    "FALLBACK_NOTICE",
    "FortuneSession",
]
