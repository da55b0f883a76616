"""Admin endpoints for the contact-form inbox."""

from fastapi import APIRouter, Depends, HTTPException, status

from delfina_home.application.schemas import ContactSubmissionResponse
from delfina_home.application.services import AdminDashboardService
from delfina_home.infrastructure.dependencies import (
    get_admin_dashboard_service,
    require_admin_session,
)

router = APIRouter(
    prefix="/admin/messages",
    tags=["Admin: Messages"],
    dependencies=[Depends(require_admin_session)],
)


@router.get("", response_model=list[ContactSubmissionResponse])
async def list_messages(
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> list[ContactSubmissionResponse]:
    """All messages, most recent first."""
    messages = await service.list_messages()
    return [ContactSubmissionResponse.model_validate(m, from_attributes=True) for m in messages]


@router.post("/{message_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_read(
    message_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> None:
    """Mark a message as read. Repeating the call is harmless."""
    if not await service.mark_message_read(message_id):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to update message. Please try again.",
        )
