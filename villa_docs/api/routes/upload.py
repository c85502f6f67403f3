"""
Document upload endpoint.
"""
import re
from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from ..dependencies import get_logger, get_upload_service
from ..models import ErrorResponse, UploadResponse
from ..services.upload_service import UploadService, UploadValidationError


router = APIRouter(prefix="/upload", tags=["upload"])

METADATA_FIELD = re.compile(r"^fileMetadata\[(\d+)\]$")


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload travel documents",
    description=(
        "Multipart form with bookingId, guestName, email, travelers (JSON), "
        "repeated files and fileMetadata[<index>] (JSON) per file"
    ),
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
async def upload_documents(
    request: Request,
    upload_service: UploadService = Depends(get_upload_service),
):
    logger = get_logger()
    form = await request.form()

    files = []
    for item in form.getlist("files"):
        if isinstance(item, UploadFile):
            content = await item.read()
            files.append((item.filename or "document", item.content_type or "", content))

    raw_metadata = {}
    for key, value in form.multi_items():
        match = METADATA_FIELD.match(key)
        if match and isinstance(value, str):
            raw_metadata[int(match.group(1))] = value

    def _field(name):
        value = form.get(name)
        return value if isinstance(value, str) else None

    try:
        return await run_in_threadpool(
            upload_service.process_upload,
            _field("bookingId"),
            _field("guestName"),
            _field("email"),
            _field("travelers"),
            files,
            raw_metadata,
        )
    except UploadValidationError as e:
        logger.info("upload_rejected", booking_id=_field("bookingId"), reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        await form.close()
