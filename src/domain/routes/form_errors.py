import logging

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from src.base.client.api_client import ApiError
from src.domain.models.form_base import FormModel

logger = logging.getLogger(__name__)

ERROR_MAP = {
    "attachment_too_large": (
        status.HTTP_413_CONTENT_TOO_LARGE,
        "Attachment cannot exceed 5MB.",
    ),
    "language_unavailable": (
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "This language is not available yet.",
    ),
}


def _status_for(e: ApiError) -> int:
    if e.status_code is not None and e.status_code >= 400:
        return e.status_code
    return status.HTTP_502_BAD_GATEWAY


def form_error_response(e: ApiError, form: FormModel | None = None) -> JSONResponse:
    """
    Notice for a failed write: the backend's message plus the submitted
    values (secrets removed) so the page can show the form again.
    """
    logger.warning(f"Form submission failed: {e.message}")
    content = {"detail": e.message}
    if form is not None:
        content["form"] = form.redacted()
    return JSONResponse(status_code=_status_for(e), content=content)


def handle_service_error(e: ValueError) -> None:
    """Map service ValueError codes to HTTP exceptions."""
    code = str(e)
    if code in ERROR_MAP:
        status_code, detail = ERROR_MAP[code]
        raise HTTPException(status_code=status_code, detail=detail)
    raise e
