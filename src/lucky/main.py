"""
Command line entry point for Lucky.

Generates today's fortune report for one profile and prints it as JSON
(or as share text with --share).
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from typing import List, Optional


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lucky",
        description="幸运点点 - generate a personalised daily fortune report",
    )
    parser.add_argument("--name", required=True, help="user name")
    parser.add_argument("--birth-date", required=True, help="birth date, YYYY-MM-DD")
    parser.add_argument("--mbti", help="optional 4-letter MBTI type")
    parser.add_argument("--date", dest="today", help="report day, YYYY-MM-DD (default: today)")
    parser.add_argument("--local", action="store_true", help="skip remote generation")
    parser.add_argument("--share", action="store_true", help="print share text instead of JSON")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


async def run(args: argparse.Namespace) -> str:
    """Generate the report and render it for output."""
    from lucky.config import get_settings
    from lucky.core.models import UserProfile
    from lucky.engine.report import generate_fortune_report
    from lucky.engine.share import FALLBACK_NOTICE, build_share_text
    from lucky.engine.synthesizer import synthesize_local

    logger = logging.getLogger(__name__)
    settings = get_settings()

    profile = UserProfile.create(args.name, args.birth_date, args.mbti)
    today = date.fromisoformat(args.today) if args.today else settings.today()

    if args.local:
        result = synthesize_local(profile, today)
    else:
        result = await generate_fortune_report(profile, today=today)

    if result.is_fallback:
        logger.info(FALLBACK_NOTICE)

    if args.share:
        return build_share_text(profile, result, today, url=settings.share_url or None)
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import os
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    args = build_parser().parse_args(argv)
    debug = args.debug or os.getenv("LUCKY_DEBUG", "false").lower() == "true"
    setup_logging(debug)

    logger = logging.getLogger(__name__)

    try:
        output = asyncio.run(run(args))
    except ValueError as e:
        # InvalidInputError from intake, or a bad --date
        logger.error(f"Invalid input: {e}")
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
