"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DraftValidationError(ValueError):
    """Raised when a product draft cannot be edited or committed as requested."""


class AuthenticationError(Exception):
    """Raised when admin credentials or a session token are rejected.

    The message is meant to be shown to the user as-is.
    """
