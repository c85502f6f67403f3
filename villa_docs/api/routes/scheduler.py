"""
Document reminder scheduler endpoints, called daily by cron.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_logger, get_reminder_service, require_scheduler_key
from ..models import ErrorResponse, ReminderRunResponse
from ..services.reminder_service import ReminderService


router = APIRouter(
    prefix="/scheduler",
    tags=["scheduler"],
    dependencies=[Depends(require_scheduler_key)],
)


def _run(reminder_service: ReminderService) -> dict:
    try:
        result = reminder_service.process_document_reminders()
    except Exception as e:
        get_logger().error("document_reminders_failed", error=str(e), error_type=type(e).__name__)
        raise HTTPException(status_code=500, detail="Failed to process document reminders")
    return {
        "success": True,
        "message": "Document reminders processed successfully",
        **result.to_dict(),
    }


@router.post(
    "/document-reminders",
    response_model=ReminderRunResponse,
    response_model_exclude_none=True,
    summary="Send document reminders",
    description="Email guests checking in about a week from now who have not uploaded documents",
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def run_document_reminders(reminder_service: ReminderService = Depends(get_reminder_service)):
    return _run(reminder_service)


@router.get(
    "/document-reminders",
    response_model=ReminderRunResponse,
    response_model_exclude_none=True,
    summary="Send document reminders (manual)",
    description="Same as POST, authorized with the key query parameter for browser testing",
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def run_document_reminders_manual(
    debug: bool = Query(False),
    reminder_service: ReminderService = Depends(get_reminder_service),
):
    return {**_run(reminder_service), "debug": debug}
