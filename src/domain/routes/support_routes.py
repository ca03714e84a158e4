from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_backend, get_support_service
from src.domain.models.auth_schemas import MessageResponse
from src.domain.models.support_schemas import (
    ContactSupportForm,
    FeedbackForm,
    FeedbackType,
    InquiryType,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response, handle_service_error
from src.domain.services.support_service import SupportService

router = APIRouter(tags=["Support"])


@router.get("/contact-support")
async def contact_support_page():
    return {
        "title": "Contact Support",
        "inquiryTypes": [t.value for t in InquiryType],
    }


@router.post(
    "/contact-support",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def contact_support(
    name: str = Form(...),
    email: str = Form(...),
    subject: str = Form(...),
    inquiry_type: str = Form(..., alias="inquiryType"),
    message: str = Form(...),
    attachment: UploadFile | None = File(None),
    backend: UserHubBackend = Depends(get_backend),
    service: SupportService = Depends(get_support_service),
):
    """Multipart support request; the attachment is optional and limited to 5 MB."""
    try:
        form = ContactSupportForm(
            name=name,
            email=email,
            subject=subject,
            inquiry_type=inquiry_type,
            message=message,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    upload = None
    if attachment is not None and attachment.filename:
        content = await attachment.read()
        upload = (
            attachment.filename,
            content,
            attachment.content_type or "application/octet-stream",
        )

    try:
        return await service.submit_contact(backend, form, upload)
    except ValueError as e:
        handle_service_error(e)
    except ApiError as e:
        return form_error_response(e, form)


@router.get("/feedback")
async def feedback_page():
    return {
        "title": "Submit Feedback",
        "feedbackTypes": [t.value for t in FeedbackType],
    }


@router.post(
    "/feedback", status_code=status.HTTP_201_CREATED, response_model=MessageResponse
)
async def submit_feedback(
    body: FeedbackForm,
    backend: UserHubBackend = Depends(get_backend),
    service: SupportService = Depends(get_support_service),
):
    try:
        return await service.submit_feedback(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
