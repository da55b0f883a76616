"""Pydantic DTOs for the admin dashboard."""

from pydantic import BaseModel

from delfina_home.application.schemas.contact import ContactSubmissionResponse
from delfina_home.application.schemas.product import ProductResponse


class DashboardResponse(BaseModel):
    products: list[ProductResponse]
    messages: list[ContactSubmissionResponse]
    unread_count: int
