from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ikon_site.core.deps import get_inquiry_service
from ikon_site.schemas.inquiry import InquiryOut, ServerErrorOut, ValidationErrorOut
from ikon_site.services.inquiry_service import InquiryService

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.post(
    "",
    response_model=InquiryOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorOut},
        500: {"model": ServerErrorOut},
    },
)
def create_inquiry(
    payload: Any = Body(...),
    service: InquiryService = Depends(get_inquiry_service),
):
    """
    Store one contact-form submission.
    The body is validated by the inquiry service, so any JSON value is accepted here
    and schema violations come back as 400 with per-field errors.
    """
    return service.create_inquiry(payload)
