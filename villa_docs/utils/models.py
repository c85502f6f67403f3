"""
Data models for the Villa Claudia document portal.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, List
from enum import Enum


class DocumentType(Enum):
    """Identity documents a traveler can supply."""
    PASSPORT = "passport"
    ID_CARD = "id_card"
    RESIDENCE_PERMIT = "residence_permit"
    DRIVERS_LICENSE = "drivers_license"

    @property
    def label(self) -> str:
        return DOCUMENT_TYPE_LABELS[self.value]


DOCUMENT_TYPE_LABELS = {
    "passport": "Passport",
    "id_card": "National ID Card",
    "residence_permit": "Residence Permit",
    "drivers_license": "Driver's License",
}


def document_type_label(document_type: str) -> str:
    """Human readable name for a document type, unknown types returned as given."""
    return DOCUMENT_TYPE_LABELS.get(document_type, document_type)


def _parse_date(value: Any) -> Optional[datetime]:
    """Parse an ISO date or datetime into naive local time; unparseable values become None."""
    if not value:
        return None
    if not isinstance(value, datetime):
        try:
            value = datetime.fromisoformat(str(value))
        except ValueError:
            return None
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def _text(value: Any, default: str = "") -> str:
    """Form field as text. Numbers are accepted, objects and lists are not."""
    if value is None or value == "":
        return default
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return str(value)


@dataclass
class Booking:
    """Booking as exposed by the WordPress booking API."""
    booking_id: str
    guest_name: str = "Guest"
    guest_email: Optional[str] = None
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    status: Optional[str] = None
    number_of_guests: Optional[int] = None
    has_uploaded_documents: bool = False

    def __post_init__(self):
        self.booking_id = str(self.booking_id)
        self.check_in_date = _parse_date(self.check_in_date)
        self.check_out_date = _parse_date(self.check_out_date)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Booking':
        """Create a Booking from a WordPress API payload."""
        return cls(
            booking_id=data.get("bookingId") or data.get("id"),
            guest_name=data.get("guestName") or "Guest",
            guest_email=data.get("guestEmail"),
            check_in_date=data.get("checkInDate") or data.get("startDate"),
            check_out_date=data.get("checkOutDate"),
            status=data.get("status"),
            number_of_guests=data.get("numberOfGuests"),
            has_uploaded_documents=bool(
                data.get("hasUploadedDocuments", data.get("hasDocuments", False))
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bookingId": self.booking_id,
            "guestName": self.guest_name,
            "guestEmail": self.guest_email,
            "checkInDate": self.check_in_date.date().isoformat() if self.check_in_date else None,
            "checkOutDate": self.check_out_date.date().isoformat() if self.check_out_date else None,
            "status": self.status,
            "numberOfGuests": self.number_of_guests,
            "hasUploadedDocuments": self.has_uploaded_documents,
        }

    def __str__(self) -> str:
        return (f"Booking(booking_id='{self.booking_id}', "
                f"guest='{self.guest_name}', "
                f"check_in='{self.check_in_date}', "
                f"check_out='{self.check_out_date}')")


@dataclass
class SecureBookingRef:
    """Booking id and date digits decoded from a secure booking reference."""
    booking_id: str
    check_in: str
    check_out: Optional[str] = None


@dataclass
class Traveler:
    """One person on a booking who must supply an identity document."""
    name: str
    document_type: str = DocumentType.PASSPORT.value
    document_number: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Traveler':
        return cls(
            name=_text(data.get("name")),
            document_type=_text(data.get("documentType"), DocumentType.PASSPORT.value),
            document_number=_text(data.get("documentNumber")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "documentType": self.document_type,
            "documentNumber": self.document_number,
        }


@dataclass
class FileMetadata:
    """Per-file metadata linking an uploaded file to a traveler."""
    traveler_index: int = 0
    traveler_name: str = "Unknown"
    document_type: str = DocumentType.PASSPORT.value
    document_number: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileMetadata':
        return cls(
            traveler_index=int(data.get("travelerIndex") or 0),
            traveler_name=_text(data.get("travelerName"), "Unknown"),
            document_type=_text(data.get("documentType"), DocumentType.PASSPORT.value),
            document_number=_text(data.get("documentNumber")),
        )


@dataclass
class UploadedFile:
    """A document file held in memory for the duration of one request."""
    original_name: str
    content: bytes
    content_type: str
    traveler_name: str = "Unknown"
    document_type: str = DocumentType.PASSPORT.value
    document_number: str = ""

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def attachment_name(self) -> str:
        number = f" ({self.document_number})" if self.document_number else ""
        return (f"{self.traveler_name} - {document_type_label(self.document_type)}"
                f"{number} - {self.original_name}")

    def to_summary(self) -> Dict[str, Any]:
        """File description returned to the guest, without the file bytes."""
        return {
            "originalName": self.original_name,
            "size": self.size,
            "type": self.content_type,
            "travelerName": self.traveler_name,
            "documentType": self.document_type,
            "documentNumber": self.document_number,
        }


@dataclass
class UploadSubmission:
    """Validated document upload for a booking."""
    booking_id: str
    guest_name: str
    guest_email: Optional[str] = None
    travelers: List[Traveler] = field(default_factory=list)
    files: List[UploadedFile] = field(default_factory=list)

    @property
    def total_size(self) -> int:
        return sum(f.size for f in self.files)


@dataclass
class ReminderResult:
    """Counts for one reminder scheduler run."""
    processed: int = 0
    sent: int = 0
    failed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"processed": self.processed, "sent": self.sent, "failed": self.failed}
