"""Contact API endpoint."""

from fastapi import APIRouter, Depends

from ..mailer import EmailClient, get_email_client
from ..models.contact import ContactMessage, ContactReceipt

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", response_model=ContactReceipt)
async def send_contact_message(
    data: ContactMessage,
    mailer: EmailClient = Depends(get_email_client),
) -> ContactReceipt:
    """Forward a contact message to the site owner by email."""
    await mailer.send(data)
    return ContactReceipt()
