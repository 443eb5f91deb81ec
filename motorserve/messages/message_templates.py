"""Plaintext message construction for the WhatsApp notification."""

from motorserve.schemas.booking_schema import BookingDraft

SUMMARY_HEADER = "MotorServe Booking Request:"

# (label, draft attribute) in the order the workshop reads them
SUMMARY_LINES: list[tuple[str, str]] = [
    ("Name", "customer_name"),
    ("Phone", "customer_phone"),
    ("Email", "customer_email"),
    ("Vehicle", "vehicle_type"),
    ("Service", "service_type"),
    ("Date/Time", "datetime"),
    ("Notes", "notes"),
]


def build_booking_summary(draft: BookingDraft) -> str:
    """Build the labeled booking summary sent to the workshop over WhatsApp.

    Values are used exactly as entered; empty optional fields still get
    their label so the workshop sees the full template.
    """
    lines = [SUMMARY_HEADER]
    for label, attr in SUMMARY_LINES:
        lines.append(f"{label}: {getattr(draft, attr)}")
    return "\n".join(lines)
