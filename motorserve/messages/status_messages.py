"""
Centralized user-visible text for the booking form.

Every message the customer can see lives here so the pipeline and the
form never hardcode copy. Messages are short and non-technical; provider
or network detail is only ever logged.
"""

# Validation, in rule order
NAME_REQUIRED = "Please enter your name."
PHONE_REQUIRED = "Please enter a phone number."
DATETIME_REQUIRED = "Please choose a date and time."

# Dispatch outcome
BOOKING_SENT = "Booking sent! Opening WhatsApp..."
BOOKING_FAILED = "Could not send booking. Please try again."

# Submit control captions
SUBMIT_IDLE_CAPTION = "Send Booking & Open WhatsApp"
SUBMIT_BUSY_CAPTION = "Sending..."

FORM_TITLE = "Book a Service"

FIELD_PLACEHOLDERS: dict[str, str] = {
    "customer_name": "Full name *",
    "customer_phone": "Phone number *",
    "customer_email": "Email (optional)",
    "vehicle_type": "Vehicle",
    "service_type": "Service",
    "datetime": "Date and time * (YYYY-MM-DDTHH:MM)",
    "notes": "Extra details",
}
