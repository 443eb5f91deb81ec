from motorserve.clients.emailjs_client import (
    DispatchError,
    EmailDispatcher,
    EmailJSClient,
    OfflineEmailClient,
)
from motorserve.clients.whatsapp import build_whatsapp_link, open_in_browser, print_link

__all__ = [
    "EmailJSClient", "OfflineEmailClient", "EmailDispatcher", "DispatchError",
    "build_whatsapp_link", "open_in_browser", "print_link",
]
