# ikon_site/services/inquiry_service.py
from __future__ import annotations

import logging
from typing import Any

from ikon_site.core.errors import InquiryValidationError, StorageError
from ikon_site.schemas.inquiry import ALL_SERVICE_TYPES, InquiryOut
from ikon_site.services.inquiry_storage import InquiryStorage
from ikon_site.services.validation import validate_inquiry

logger = logging.getLogger(__name__)


class InquiryService:
    """
    Accepts contact-form submissions.

    Input is always validated here, whatever the caller already checked.
    There is no idempotency key: two identical submissions are two records.
    """

    def __init__(self, storage: InquiryStorage):
        self.storage = storage

    def create_inquiry(self, data: Any) -> InquiryOut:
        result = validate_inquiry(data, ALL_SERVICE_TYPES)
        if not result.ok:
            logger.info("inquiry rejected: fields=%s", ",".join(result.errors))
            raise InquiryValidationError(result.errors)

        try:
            row = self.storage.create_inquiry(result.inquiry)
        except StorageError:
            logger.exception("inquiry not stored (service_type=%s)", result.inquiry.service_type)
            raise

        created = InquiryOut.model_validate(row)
        logger.info("inquiry stored: id=%s service_type=%s", created.id, created.service_type)
        return created
