"""Domain entity for visitor inquiries sent through the contact form."""

from dataclasses import dataclass


@dataclass
class ContactSubmission:
    """A visitor message. ``read`` only ever moves from False to True."""

    id: str
    name: str
    email: str
    message: str
    date: int
    read: bool = False
