"""WhatsApp click-to-chat deep links and the capability that opens them."""

import logging
import webbrowser
from typing import Callable
from urllib.parse import quote

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Characters encodeURIComponent leaves alone besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"

LinkOpener = Callable[[str], None]


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way browsers' encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_whatsapp_link(number: str, message: str, base_url: str = WHATSAPP_BASE_URL) -> str:
    """Build a wa.me link that opens a chat with ``message`` pre-filled.

    Examples:
        >>> build_whatsapp_link("254705639260", "Hi there")
        'https://wa.me/254705639260?text=Hi%20there'
    """
    return f"{base_url.rstrip('/')}/{number}?text={encode_uri_component(message)}"


def open_in_browser(url: str) -> None:
    """Open the link in a new browser tab without waiting on the result."""
    opened = webbrowser.open_new_tab(url)
    if not opened:
        logger.warning("No browser available to open WhatsApp link")


def print_link(url: str) -> None:
    """Offline substitute for open_in_browser."""
    print(f"Open WhatsApp: {url}")
