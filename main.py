"""
Booking form entry point.

Loads configuration and runs the console booking form against the live
EmailJS provider, or fully offline for development.

Usage:
    Live:    python main.py
    Offline: python main.py offline
"""

import asyncio
import logging
import sys

from motorserve.config import settings

logger = logging.getLogger(__name__)


def _run_live_mode() -> None:
    """Send bookings through EmailJS and open WhatsApp in the browser."""
    from console_form import run_form

    logger.info("Starting booking form for %s", settings.workshop.name)
    asyncio.run(run_form(offline=False))


def _run_offline_mode() -> None:
    """Run the form without credentials or network access."""
    from console_form import run_form

    asyncio.run(run_form(offline=True))


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "offline":
        _run_offline_mode()
    else:
        _run_live_mode()
