from ikon_site.schemas.inquiry import (
    ALL_SERVICE_TYPES,
    InquiryCreate,
    InquiryOut,
    ServiceType,
    ValidationErrorOut,
)

__all__ = [
    "ALL_SERVICE_TYPES",
    "InquiryCreate",
    "InquiryOut",
    "ServiceType",
    "ValidationErrorOut",
]
