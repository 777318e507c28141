"""Outbound email delivery for the contact form."""

import logging
from typing import Optional

import httpx

from .config import Settings, get_settings
from .errors import UpstreamDeliveryError
from .models.contact import ContactMessage

logger = logging.getLogger("contact_mailer")


class EmailClient:
    """Client for an EmailJS-compatible ``email/send`` REST endpoint."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    def build_payload(self, message: ContactMessage) -> dict:
        """Template parameters plus service credentials."""
        return {
            "service_id": self.settings.email_service_id,
            "template_id": self.settings.email_template_id,
            "user_id": self.settings.email_public_key,
            "template_params": {
                "from_name": message.name,
                "from_email": message.email,
                "message": message.message,
                "to_email": self.settings.contact_recipient,
            },
        }

    async def send(self, message: ContactMessage) -> None:
        """Deliver a contact message.

        Raises:
            UpstreamDeliveryError: service not configured, unreachable, or
                responded with a non-2xx status.
        """
        if not (self.settings.email_service_id and self.settings.email_template_id):
            logger.error("Contact email service is not configured")
            raise UpstreamDeliveryError("Failed to send message. Please try again later.")

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.settings.request_timeout_seconds,
            ) as client:
                response = await client.post(
                    self.settings.email_api_url,
                    json=self.build_payload(message),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Email API rejected message: {e.response.status_code} {e.response.text}")
            raise UpstreamDeliveryError("Failed to send message. Please try again later.") from e
        except httpx.HTTPError as e:
            logger.error(f"Email API request failed: {e}")
            raise UpstreamDeliveryError("Failed to send message. Please try again later.") from e

        logger.info(f"Contact message from {message.email} delivered")


def get_email_client() -> EmailClient:
    """Dependency returning a client bound to the current settings."""
    return EmailClient(get_settings())
