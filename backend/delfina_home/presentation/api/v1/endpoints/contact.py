"""Contact form submission endpoint."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from delfina_home.application.schemas import ContactFormRequest, ContactFormState
from delfina_home.application.services import ContactForm, StorageGateway
from delfina_home.infrastructure.dependencies import get_storage_gateway

router = APIRouter(prefix="/contact", tags=["Contact"])


def _state(form: ContactForm) -> ContactFormState:
    return ContactFormState(
        name=form.name,
        email=form.email,
        message=form.message,
        sent=form.sent,
        error=form.error,
    )


@router.post(
    "",
    response_model=ContactFormState,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ContactFormState}},
)
async def submit_contact_form(
    data: ContactFormRequest,
    gateway: StorageGateway = Depends(get_storage_gateway),
):
    """Send a message to the shop.

    On success the returned form is cleared; on failure it still holds the
    visitor's input next to a generic error.
    """
    form = ContactForm(name=data.name, email=str(data.email), message=data.message)
    if await form.submit(gateway):
        return _state(form)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=_state(form).model_dump(),
    )
