"""Abstract repository interface (port) for ContactSubmission persistence."""

from abc import ABC, abstractmethod

from delfina_home.domain.entities import ContactSubmission


class ContactSubmissionRepository(ABC):
    """Port for contact submission persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[ContactSubmission]:
        """Retrieve every submission, most recent first."""
        ...

    @abstractmethod
    async def create(self, name: str, email: str, message: str) -> ContactSubmission:
        """Store a new unread submission; id and date are assigned by storage."""
        ...

    @abstractmethod
    async def mark_read(self, submission_id: str) -> None:
        """Set the read flag. Applies unconditionally."""
        ...
