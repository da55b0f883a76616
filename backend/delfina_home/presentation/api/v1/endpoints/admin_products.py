"""Admin endpoints for the dashboard overview and product management."""

from fastapi import APIRouter, Depends, HTTPException, status

from delfina_home.application.schemas import (
    ContactSubmissionResponse,
    DashboardResponse,
    ProductResponse,
)
from delfina_home.application.services import AdminDashboardService
from delfina_home.infrastructure.dependencies import (
    get_admin_dashboard_service,
    require_admin_session,
)

router = APIRouter(
    prefix="/admin",
    tags=["Admin: Products"],
    dependencies=[Depends(require_admin_session)],
)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> DashboardResponse:
    """Every product (hidden ones included) and every contact message."""
    snapshot = await service.refresh()
    return DashboardResponse(
        products=[ProductResponse.model_validate(p, from_attributes=True) for p in snapshot.products],
        messages=[
            ContactSubmissionResponse.model_validate(m, from_attributes=True)
            for m in snapshot.messages
        ],
        unread_count=snapshot.unread_count,
    )


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> list[ProductResponse]:
    products = await service.list_products()
    return [ProductResponse.model_validate(p, from_attributes=True) for p in products]


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: AdminDashboardService = Depends(get_admin_dashboard_service),
) -> None:
    """Delete a product by id."""
    if not await service.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to delete product. Please try again.",
        )
