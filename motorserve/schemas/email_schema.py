"""Email-delivery provider wire models."""

from pydantic import BaseModel, Field


class EmailSendRequest(BaseModel):
    """JSON body of the EmailJS REST send call.

    EmailJS calls the public key ``user_id`` on the wire.
    """
    service_id: str
    template_id: str
    user_id: str
    template_params: dict[str, str] = Field(default_factory=dict)
