"""Booking draft and submission status models."""

from dataclasses import asdict, dataclass, fields
from enum import Enum

from pydantic import BaseModel, ConfigDict


class VehicleType(str, Enum):
    """Vehicles the workshop services. Values are the display strings."""
    CAR = "Car"
    MOTORCYCLE = "Motorcycle"
    GENERATOR = "Generator"


class ServiceType(str, Enum):
    """Kinds of work a customer can book."""
    REPAIR = "Repair"
    MAINTENANCE = "Maintenance"
    DIAGNOSTICS = "Diagnostics"
    PARTS_REPLACEMENT = "Parts Replacement"


@dataclass
class BookingDraft:
    """
    The user-editable record describing one service request.

    Owned by a single form session, mutated field by field and reset to
    these defaults only after a successful dispatch. Enum-backed fields
    hold the plain display value so summaries render "Vehicle: Car".
    """
    customer_name: str = ""
    customer_phone: str = ""
    customer_email: str = ""
    vehicle_type: str = VehicleType.CAR.value
    service_type: str = ServiceType.REPAIR.value
    datetime: str = ""
    notes: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        """Attribute names in form order."""
        return [f.name for f in fields(cls)]

    def to_params(self) -> dict[str, str]:
        """Export all seven attributes as the provider parameter bag."""
        return asdict(self)


class StatusKind(str, Enum):
    """Styling variant of the status banner."""
    SUCCESS = "success"
    ERROR = "error"


class SubmissionStatus(BaseModel):
    """Last user-visible outcome. A missing status is represented by None."""
    model_config = ConfigDict(frozen=True)

    kind: StatusKind
    message: str

    @classmethod
    def success(cls, message: str) -> "SubmissionStatus":
        return cls(kind=StatusKind.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "SubmissionStatus":
        return cls(kind=StatusKind.ERROR, message=message)

    @property
    def is_error(self) -> bool:
        return self.kind == StatusKind.ERROR
