"""Public page endpoints: each returns what one page of the site displays."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from delfina_home.application.schemas import (
    AboutPage,
    CollectionPage,
    ContactPage,
    HomePage,
    ProductDetailPage,
)
from delfina_home.application.services import CatalogService
from delfina_home.application.services.catalog_service import ALL_CATEGORIES
from delfina_home.domain.exceptions import EntityNotFoundError
from delfina_home.infrastructure.dependencies import get_catalog_service

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("/home", response_model=HomePage)
async def home(service: CatalogService = Depends(get_catalog_service)) -> HomePage:
    """Hero content and up to three featured products."""
    return await service.home_page()


@router.get("/collection", response_model=CollectionPage)
async def collection(
    category: str = Query(ALL_CATEGORIES, description="Canonical category name, or 'All'"),
    service: CatalogService = Depends(get_catalog_service),
) -> CollectionPage:
    """Visible products, optionally narrowed to one category."""
    return await service.collection_page(category)


@router.get("/products/{product_id}", response_model=ProductDetailPage)
async def product_detail(
    product_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ProductDetailPage:
    """A single product. Hidden products are still served here."""
    try:
        return await service.product_page(product_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/about", response_model=AboutPage)
async def about(service: CatalogService = Depends(get_catalog_service)) -> AboutPage:
    return service.about_page()


@router.get("/contact", response_model=ContactPage)
async def contact(service: CatalogService = Depends(get_catalog_service)) -> ContactPage:
    return service.contact_page()
