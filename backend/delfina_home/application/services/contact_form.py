"""The public contact form: what the visitor typed and what happened when they sent it."""

import logging

from delfina_home.application.services.storage_gateway import StorageGateway

logger = logging.getLogger(__name__)

GENERIC_SEND_ERROR = "Failed to send message. Please try again."


class ContactForm:
    """Form state for one visitor.

    A successful send clears the fields and marks the form as sent; a failed
    send keeps the fields so the visitor can try again.
    """

    def __init__(self, name: str = "", email: str = "", message: str = ""):
        self.name = name
        self.email = email
        self.message = message
        self.sending = False
        self.sent = False
        self.error: str | None = None

    async def submit(self, gateway: StorageGateway) -> bool:
        if self.sending:
            return False

        self.sending = True
        self.error = None
        try:
            success = await gateway.save_message(
                name=self.name, email=self.email, message=self.message
            )
        finally:
            self.sending = False

        if success:
            self.sent = True
            self.name = self.email = self.message = ""
            logger.info("Contact message received")
        else:
            self.error = GENERIC_SEND_ERROR
        return success
