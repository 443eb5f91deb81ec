"""
Centralized configuration with environment variable overrides.

Provider credentials, the WhatsApp destination and logging settings are
read once at import time and treated as immutable for the session.
Nothing is hardcoded in the pipeline or client logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from motorserve.logging_context import configure_logging
from motorserve.utils import normalize_whatsapp_number

load_dotenv()

logger = logging.getLogger(__name__)

PLACEHOLDER_SUFFIX = "_xxx"
MIN_WHATSAPP_DIGITS = 7
MAX_WHATSAPP_DIGITS = 15


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag (true/false, yes/no, 1/0) from an env var."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class EmailConfig:
    """Email-delivery provider (EmailJS) credentials and endpoint."""

    service_id: str = os.getenv("EMAILJS_SERVICE_ID", "service_xxx")
    template_id: str = os.getenv("EMAILJS_TEMPLATE_ID", "template_xxx")
    public_key: str = os.getenv("EMAILJS_PUBLIC_KEY", "user_xxx")
    api_url: str = os.getenv("EMAILJS_API_URL", "https://api.emailjs.com/api/v1.0/email/send")
    timeout_sec: float = _safe_float("EMAILJS_TIMEOUT_SEC", "30.0")

    def uses_placeholders(self) -> bool:
        return any(
            value.endswith(PLACEHOLDER_SUFFIX)
            for value in (self.service_id, self.template_id, self.public_key)
        )


@dataclass(frozen=True)
class WhatsAppConfig:
    """Destination for the WhatsApp notification deep link."""

    number: str = normalize_whatsapp_number(os.getenv("WORKSHOP_WHATSAPP", "254705639260"))
    base_url: str = "https://wa.me"


@dataclass(frozen=True)
class WorkshopConfig:
    """Workshop branding shown by the booking form."""

    name: str = os.getenv("WORKSHOP_NAME", "MotorServe Workshop Solutions")
    tagline: str = os.getenv("WORKSHOP_TAGLINE", "Driven by Service, Powered by Trust")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    email: EmailConfig = field(default_factory=EmailConfig)
    whatsapp: WhatsAppConfig = field(default_factory=WhatsAppConfig)
    workshop: WorkshopConfig = field(default_factory=WorkshopConfig)
    require_email_config: bool = _safe_bool("REQUIRE_EMAIL_CONFIG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    number = config.whatsapp.number
    if not (number.isascii() and number.isdigit()):
        raise ValueError(
            f"WORKSHOP_WHATSAPP must contain only digits, got {number!r}"
        )
    if not MIN_WHATSAPP_DIGITS <= len(number) <= MAX_WHATSAPP_DIGITS:
        raise ValueError(
            f"WORKSHOP_WHATSAPP must have {MIN_WHATSAPP_DIGITS}-{MAX_WHATSAPP_DIGITS} digits, "
            f"got {len(number)}"
        )
    if config.email.timeout_sec <= 0:
        raise ValueError(
            f"EMAILJS_TIMEOUT_SEC must be > 0, got {config.email.timeout_sec}"
        )
    if not config.email.api_url.startswith(("http://", "https://")):
        raise ValueError(
            f"EMAILJS_API_URL must be an http(s) URL, got {config.email.api_url!r}"
        )

    if config.email.uses_placeholders():
        if config.require_email_config:
            raise ValueError(
                "EMAILJS_SERVICE_ID, EMAILJS_TEMPLATE_ID and EMAILJS_PUBLIC_KEY must be set "
                "when REQUIRE_EMAIL_CONFIG is enabled"
            )
        logger.warning(
            "EmailJS credentials are placeholders; bookings will be rejected by the provider"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    configure_logging(getattr(logging, config.log_level.upper(), logging.INFO))
    _validate_config(config)
    logger.info("Configuration loaded for '%s'", config.workshop.name)
    return config


# Singleton instance
settings = load_config()
