"""Protected Routes — identity echo for any token, and an admin-only probe."""

from fastapi import APIRouter, Depends

from sports_schedule.api.dependencies import get_current_identity, require_admin
from sports_schedule.core.domain_types import Identity
from sports_schedule.schemas.auth import IdentityResponse
from sports_schedule.schemas.base import MessageResponse

router = APIRouter(prefix="/api", tags=["protected"])


@router.get("/dashboard-data", response_model=IdentityResponse)
async def dashboard_data(identity: Identity = Depends(get_current_identity)):
    return IdentityResponse(
        message="Secure content",
        user_id=identity.user_id,
        user_name=identity.name,
        is_admin=identity.is_admin,
    )


@router.get("/admin-data", response_model=MessageResponse)
async def admin_data(identity: Identity = Depends(require_admin)):
    return MessageResponse(message="Admin content")
