"""Pydantic DTOs (Data Transfer Objects) for products and the admin product editor."""

from typing import Literal

from pydantic import BaseModel, Field

from delfina_home.domain.entities import Category


class LocalizedStringSchema(BaseModel):
    """A text field in both languages."""

    sq: str = ""
    en: str = ""

    model_config = {"from_attributes": True}


class ProductSpecificationsSchema(BaseModel):
    dimensions: LocalizedStringSchema
    materials: LocalizedStringSchema

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    """Full product record as seen by the admin panel."""

    id: str
    title: LocalizedStringSchema
    description: LocalizedStringSchema
    specifications: ProductSpecificationsSchema
    price: str
    category: str
    images: list[str]
    is_featured: bool
    is_visible: bool
    created_at: int

    model_config = {"from_attributes": True}


class ProductDraftResponse(BaseModel):
    """State of an open editing session."""

    draft: ProductResponse
    is_new: bool
    dragged_index: int | None
    drag_over_index: int | None
    saving: bool


class ProductDraftUpdate(BaseModel):
    """Schema for editing a draft: all fields optional, given fields replace the draft's."""

    title: LocalizedStringSchema | None = None
    description: LocalizedStringSchema | None = None
    dimensions: LocalizedStringSchema | None = None
    materials: LocalizedStringSchema | None = None
    price: str | None = Field(None, max_length=255, examples=["On Request"])
    category: Category | None = Field(None, examples=["Kuzhinat"])
    is_featured: bool | None = None
    is_visible: bool | None = None


class ImageReorderRequest(BaseModel):
    """Move the image at ``from_index`` so it ends up at ``to_index``."""

    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)


class DragEventRequest(BaseModel):
    """One drag-and-drop event from the image grid."""

    action: Literal["start", "over", "drop", "end"]
    index: int | None = Field(None, ge=0)
