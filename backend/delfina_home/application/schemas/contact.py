"""Pydantic DTOs for the contact form and the admin inbox."""

from pydantic import BaseModel, EmailStr, Field


class ContactFormRequest(BaseModel):
    """Schema for a visitor's contact form submission."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Art"])
    email: EmailStr = Field(..., examples=["a@b.com"])
    message: str = Field(..., min_length=1, examples=["Hi"])


class ContactFormState(BaseModel):
    """What the form shows after a submission attempt."""

    name: str
    email: str
    message: str
    sent: bool
    error: str | None = None


class ContactSubmissionResponse(BaseModel):
    """Schema returned to the admin inbox."""

    id: str
    name: str
    email: str
    message: str
    date: int
    read: bool

    model_config = {"from_attributes": True}
