from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_auth_service, get_logger
from ..models import APIResponse, ErrorResponse, MagicLinkRequest, VerifyTokenRequest, VerifyTokenResponse
from ..security.jwt import TokenError
from ..services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/request-link", response_model=APIResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def request_link(req: MagicLinkRequest, auth_service: AuthService = Depends(get_auth_service)):
    logger = get_logger()
    try:
        auth_service.request_magic_link(req.email, req.bookingId, req.name)
        return {"success": True, "message": "Magic link sent successfully"}
    except Exception as e:
        logger.error("magic_link_failed", email=req.email, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to send magic link")


@router.post("/verify", response_model=VerifyTokenResponse, responses={401: {"model": ErrorResponse}})
def verify(req: VerifyTokenRequest, auth_service: AuthService = Depends(get_auth_service)):
    logger = get_logger()
    try:
        user = auth_service.verify(req.token)
    except TokenError as e:
        logger.info("magic_link_rejected", reason=str(e))
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return {"success": True, "user": user}
