"""Contact form message model."""

from pydantic import BaseModel, EmailStr, Field


class ContactMessage(BaseModel):
    """A message submitted through the contact form."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=5000)


class ContactReceipt(BaseModel):
    """Acknowledgement returned after delivery."""

    success: bool = True
    message: str = "Message sent successfully! I'll get back to you soon."
