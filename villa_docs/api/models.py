"""
Data models for API requests and responses.
"""
from typing import Optional, Dict, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict, field_serializer


class APIResponse(BaseModel):
    """Base API response model."""
    success: bool = Field(..., description="Whether the request was successful")
    message: str = Field(..., description="Response message")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    message: Optional[str] = Field(None, description="Additional error detail")


class HealthResponse(BaseModel):
    """Health check response model."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Health check timestamp")
    version: str = Field(..., description="API version")
    dependencies: Dict[str, str] = Field(default_factory=dict, description="Dependency statuses")

    @field_serializer('timestamp')
    def serialize_timestamp(self, timestamp: datetime) -> str:
        return timestamp.isoformat()


class FileSummary(BaseModel):
    """Uploaded file as echoed back to the guest."""
    originalName: str
    size: int
    type: str
    travelerName: str
    documentType: str
    documentNumber: str


class TravelerModel(BaseModel):
    name: str
    documentType: str
    documentNumber: str


class UploadResponse(APIResponse):
    """Response model for a document upload."""
    files: List[FileSummary] = Field(default_factory=list)
    bookingId: str
    guestName: str
    travelers: List[TravelerModel] = Field(default_factory=list)


class ReminderRunResponse(APIResponse):
    """Response model for a reminder scheduler run."""
    processed: int = Field(..., ge=0)
    sent: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    debug: Optional[bool] = Field(None, description="Echo of the debug flag on manual runs")


class MagicLinkRequest(BaseModel):
    """Request model for a magic link email."""
    email: str = Field(..., min_length=1, description="Guest email")
    bookingId: str = Field(..., min_length=1, description="Booking ID")
    name: Optional[str] = Field(None, description="Guest name")


class VerifyTokenRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Magic link token")


class MagicLinkUser(BaseModel):
    email: str
    bookingId: str
    name: str


class VerifyTokenResponse(BaseModel):
    success: bool
    user: MagicLinkUser


class AdminLoginRequest(BaseModel):
    password: str = Field(..., description="Admin password")


class BookingItem(BaseModel):
    """Booking row in the admin panel."""
    bookingId: str
    guestName: str
    guestEmail: Optional[str] = None
    checkInDate: Optional[str] = None
    checkOutDate: Optional[str] = None
    status: Optional[str] = None
    numberOfGuests: Optional[int] = None
    hasUploadedDocuments: bool = False


class BookingListResponse(APIResponse):
    data: List[BookingItem] = Field(default_factory=list)


class SendRemindersRequest(BaseModel):
    bookingIds: Optional[List[str]] = Field(None, description="Restrict to these bookings")


class SendRemindersResponse(APIResponse):
    sent: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class UploadContextResponse(BookingItem):
    """Booking context for the guest upload page."""
    secureBookingId: str
    email: str = ""
