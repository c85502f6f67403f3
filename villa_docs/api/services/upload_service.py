"""
Upload service for validating guest document uploads and forwarding them to the administrator.
"""
import json
import structlog
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ...guest_communications.notifier import Notifier
from ...utils.models import FileMetadata, Traveler, UploadedFile, UploadSubmission
from config.settings import AppConfig, app_config

# (original filename, MIME type, content)
RawFile = Tuple[str, str, bytes]


class UploadValidationError(ValueError):
    """Raised when an upload is rejected; the message is shown to the guest."""


def _megabytes(size: int) -> str:
    return f"{size / (1024 * 1024):.2f}MB"


class UploadService:
    """Service for handling document uploads.

    Files are kept in memory only and leave the process as email attachments.
    """

    def __init__(self, notifier: Notifier, logger: structlog.BoundLogger, config: Optional[AppConfig] = None):
        self.notifier = notifier
        self.logger = logger
        self.config = config or app_config

    def parse_travelers(self, travelers_json: Optional[str]) -> List[Traveler]:
        if not travelers_json:
            return []
        try:
            data = json.loads(travelers_json)
        except ValueError:
            raise UploadValidationError("Invalid travelers data")
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise UploadValidationError("Invalid travelers data")
        try:
            return [Traveler.from_dict(item) for item in data]
        except TypeError:
            raise UploadValidationError("Invalid travelers data")

    def parse_metadata(self, raw_metadata: Mapping[int, str]) -> Dict[int, FileMetadata]:
        metadata = {}
        for index, value in raw_metadata.items():
            try:
                data = json.loads(value)
                if not isinstance(data, dict):
                    raise TypeError("metadata must be an object")
                metadata[index] = FileMetadata.from_dict(data)
            except (ValueError, TypeError):
                raise UploadValidationError(f"Invalid metadata for file {index}")
        return metadata

    def validate(
        self,
        booking_id: Optional[str],
        guest_name: Optional[str],
        files: Sequence[RawFile],
    ) -> None:
        """
        Check an upload before anything is sent.

        Raises:
            UploadValidationError: On the first failed check
        """
        if not booking_id:
            raise UploadValidationError("Missing booking ID")
        if not guest_name:
            raise UploadValidationError("Missing guest name")
        if not files:
            raise UploadValidationError("No files provided")

        total_size = sum(len(content) for _, _, content in files)
        if total_size > self.config.max_total_size:
            raise UploadValidationError(
                f"Total file size ({_megabytes(total_size)}) exceeds "
                f"{self.config.max_total_size // (1024 * 1024)}MB limit. "
                "Please reduce file sizes or upload fewer files."
            )

        for _, content_type, content in files:
            if content_type not in self.config.allowed_mime_types:
                raise UploadValidationError(
                    f"File type {content_type} is not supported. "
                    "Please upload JPG, JPEG, PNG, or PDF files only."
                )
            if len(content) > self.config.max_file_size:
                raise UploadValidationError(
                    f"File size exceeds {self.config.max_file_size // (1024 * 1024)}MB limit"
                )

    def build_submission(
        self,
        booking_id: str,
        guest_name: str,
        guest_email: Optional[str],
        travelers_json: Optional[str],
        files: Sequence[RawFile],
        raw_metadata: Optional[Mapping[int, str]] = None,
    ) -> UploadSubmission:
        self.validate(booking_id, guest_name, files)
        travelers = self.parse_travelers(travelers_json)
        metadata = self.parse_metadata(raw_metadata or {})

        uploaded = []
        for index, (name, content_type, content) in enumerate(files):
            meta = metadata.get(index, FileMetadata())
            uploaded.append(UploadedFile(
                original_name=name,
                content=content,
                content_type=content_type,
                traveler_name=meta.traveler_name,
                document_type=meta.document_type,
                document_number=meta.document_number,
            ))

        return UploadSubmission(
            booking_id=booking_id,
            guest_name=guest_name,
            guest_email=guest_email or None,
            travelers=travelers,
            files=uploaded,
        )

    def process_upload(
        self,
        booking_id: str,
        guest_name: str,
        guest_email: Optional[str],
        travelers_json: Optional[str],
        files: Sequence[RawFile],
        raw_metadata: Optional[Mapping[int, str]] = None,
    ) -> Dict[str, Any]:
        """
        Validate an upload and email it to the administrator.

        Every call sends its own notification; identical uploads are not merged.

        Returns:
            Response body for the guest

        Raises:
            UploadValidationError: If the upload is rejected
        """
        submission = self.build_submission(
            booking_id, guest_name, guest_email, travelers_json, files, raw_metadata
        )
        self.logger.info("upload_received",
                         booking_id=submission.booking_id,
                         files=len(submission.files),
                         total_size=submission.total_size)

        delivered = self.notifier.send_upload_notification(submission)
        if not delivered:
            self.logger.warning("upload_notification_not_delivered", booking_id=submission.booking_id)

        return {
            "success": True,
            "message": "Files uploaded successfully",
            "files": [f.to_summary() for f in submission.files],
            "bookingId": submission.booking_id,
            "guestName": submission.guest_name,
            "travelers": [t.to_dict() for t in submission.travelers],
        }
