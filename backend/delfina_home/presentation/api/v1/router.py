"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from delfina_home.presentation.api.v1.endpoints.health import router as health_router
from delfina_home.presentation.api.v1.endpoints.pages import router as pages_router
from delfina_home.presentation.api.v1.endpoints.contact import router as contact_router
from delfina_home.presentation.api.v1.endpoints.language import router as language_router
from delfina_home.presentation.api.v1.endpoints.auth import router as auth_router
from delfina_home.presentation.api.v1.endpoints.admin_products import router as admin_products_router
from delfina_home.presentation.api.v1.endpoints.admin_messages import router as admin_messages_router
from delfina_home.presentation.api.v1.endpoints.admin_drafts import router as admin_drafts_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(pages_router)
router.include_router(contact_router)
router.include_router(language_router)
router.include_router(auth_router)
router.include_router(admin_products_router)
router.include_router(admin_messages_router)
router.include_router(admin_drafts_router)
