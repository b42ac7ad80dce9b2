# ikon_site/core/deps.py
from fastapi import Request

from ikon_site.services.inquiry_service import InquiryService
from ikon_site.services.inquiry_storage import InquiryStorage


def get_storage(request: Request) -> InquiryStorage:
    # set by create_app; tests pass their own
    return request.app.state.storage


def get_inquiry_service(request: Request) -> InquiryService:
    return InquiryService(get_storage(request))
