"""Admin endpoints for the product editor: open a draft, edit it, manage its images, save it."""

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from delfina_home.application.schemas import (
    DragEventRequest,
    ImageReorderRequest,
    LocalizedStringSchema,
    ProductDraftResponse,
    ProductDraftUpdate,
    ProductResponse,
)
from delfina_home.application.services import AdminDashboardService, ProductEditor
from delfina_home.domain.entities import ImageUpload, LocalizedString
from delfina_home.domain.exceptions import DraftValidationError, EntityNotFoundError
from delfina_home.infrastructure.dependencies import (
    get_admin_dashboard_service,
    require_admin_session,
)

router = APIRouter(
    prefix="/admin",
    tags=["Admin: Product editor"],
    dependencies=[Depends(require_admin_session)],
)


# ── Helpers ──────────────────────────────────────────────────────────

def _to_response(editor: ProductEditor) -> ProductDraftResponse:
    return ProductDraftResponse(
        draft=ProductResponse.model_validate(editor.draft, from_attributes=True),
        is_new=editor.is_new,
        dragged_index=editor.dragged_index,
        drag_over_index=editor.drag_over_index,
        saving=editor.saving,
    )


def _localized(value: LocalizedStringSchema | None) -> LocalizedString | None:
    return LocalizedString(sq=value.sq, en=value.en) if value is not None else None


def _get_editor(service: AdminDashboardService, draft_id: str) -> ProductEditor:
    try:
        return service.get_draft(draft_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ── Opening and closing drafts ───────────────────────────────────────

@router.post("/drafts", response_model=ProductDraftResponse, status_code=status.HTTP_201_CREATED)
async def open_new_draft(
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Start a new product with a fresh id."""
    return _to_response(service.open_new_draft())


@router.post(
    "/products/{product_id}/draft",
    response_model=ProductDraftResponse,
    status_code=status.HTTP_201_CREATED,
)
async def open_product_draft(
    product_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Start editing a stored product."""
    try:
        editor = await service.open_draft(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(editor)


@router.get("/drafts/{draft_id}", response_model=ProductDraftResponse)
async def get_draft(
    draft_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    return _to_response(_get_editor(service, draft_id))


@router.patch("/drafts/{draft_id}", response_model=ProductDraftResponse)
async def update_draft(
    draft_id: str,
    data: ProductDraftUpdate,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Replace the given fields of the draft."""
    editor = _get_editor(service, draft_id)
    try:
        editor.update_fields(
            title=_localized(data.title),
            description=_localized(data.description),
            dimensions=_localized(data.dimensions),
            materials=_localized(data.materials),
            price=data.price,
            category=data.category,
            is_featured=data.is_featured,
            is_visible=data.is_visible,
        )
    except DraftValidationError as e:
        raise _bad_request(e)
    return _to_response(editor)


@router.delete("/drafts/{draft_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_draft(
    draft_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> None:
    """Discard a draft without saving."""
    try:
        service.cancel_draft(draft_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/drafts/{draft_id}/commit", response_model=list[ProductResponse])
async def commit_draft(
    draft_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> list[ProductResponse]:
    """Save the draft and return the reloaded product list.

    A failed save keeps the draft open so it can be submitted again.
    """
    _get_editor(service, draft_id)
    try:
        result = await service.commit_draft(draft_id)
    except DraftValidationError as e:
        raise _bad_request(e)

    if not result.saved:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    return [ProductResponse.model_validate(p, from_attributes=True) for p in result.products]


# ── Images ───────────────────────────────────────────────────────────

@router.post("/drafts/{draft_id}/images", response_model=ProductDraftResponse)
async def upload_images(
    draft_id: str,
    files: list[UploadFile],
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Append one or more images, in upload order."""
    editor = _get_editor(service, draft_id)
    uploads = [
        ImageUpload(
            filename=f.filename or "image",
            content_type=f.content_type,
            content=await f.read(),
        )
        for f in files
    ]
    try:
        await editor.add_images(uploads)
    except DraftValidationError as e:
        raise _bad_request(e)
    return _to_response(editor)


@router.delete("/drafts/{draft_id}/images/{index}", response_model=ProductDraftResponse)
async def remove_image(
    draft_id: str,
    index: int,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Remove one image; removing the first one promotes the next to cover image."""
    editor = _get_editor(service, draft_id)
    try:
        editor.remove_image(index)
    except (IndexError, DraftValidationError) as e:
        raise _bad_request(e)
    return _to_response(editor)


@router.post("/drafts/{draft_id}/images/reorder", response_model=ProductDraftResponse)
async def reorder_images(
    draft_id: str,
    body: ImageReorderRequest,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    editor = _get_editor(service, draft_id)
    try:
        editor.reorder(body.from_index, body.to_index)
    except (IndexError, DraftValidationError) as e:
        raise _bad_request(e)
    return _to_response(editor)


@router.post("/drafts/{draft_id}/drag", response_model=ProductDraftResponse)
async def drag_event(
    draft_id: str,
    body: DragEventRequest,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> ProductDraftResponse:
    """Drag-and-drop feedback and drop handling for the image grid."""
    editor = _get_editor(service, draft_id)
    if body.action != "end" and body.index is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"'{body.action}' needs an index",
        )
    try:
        if body.action == "start":
            editor.drag_start(body.index)
        elif body.action == "over":
            editor.drag_over(body.index)
        elif body.action == "drop":
            editor.drop(body.index)
        else:
            editor.drag_end()
    except (IndexError, DraftValidationError) as e:
        raise _bad_request(e)
    return _to_response(editor)
