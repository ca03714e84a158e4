import logging

from src.base.client.backend_api import Attachment
from src.domain.models.auth_schemas import MessageResponse
from src.domain.models.support_schemas import (
    MAX_ATTACHMENT_BYTES,
    ContactSupportForm,
    FeedbackForm,
)
from src.domain.repositories.backend import UserHubBackend

logger = logging.getLogger(__name__)


class SupportService:
    async def submit_contact(
        self,
        backend: UserHubBackend,
        form: ContactSupportForm,
        attachment: Attachment | None = None,
    ) -> MessageResponse:
        """Send a support request as multipart form data with an optional attachment.

        Raises ValueError("attachment_too_large") for attachments over 5 MB.
        """
        if attachment is not None and len(attachment[1]) > MAX_ATTACHMENT_BYTES:
            raise ValueError("attachment_too_large")

        response = await backend.submit_contact_support(form.to_fields(), attachment)
        logger.info(f"Support request submitted ({form.inquiry_type.value})")
        return MessageResponse(
            success=(response or {}).get("success", True),
            message=(response or {}).get("message")
            or "Thank you for contacting us. Our support team will get back to you soon.",
        )

    async def submit_feedback(
        self, backend: UserHubBackend, form: FeedbackForm
    ) -> MessageResponse:
        response = await backend.submit_feedback(form.to_backend())
        logger.info(f"Feedback submitted ({form.feedback_type.value})")
        return MessageResponse(
            success=(response or {}).get("success", True),
            message=(response or {}).get("message") or "Thank you for your feedback!",
        )
