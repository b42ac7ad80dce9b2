# ikon_site/services/inquiry_storage.py
from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ikon_site.core.errors import StorageError
from ikon_site.db.models.inquiry import Inquiry
from ikon_site.schemas.inquiry import InquiryCreate

logger = logging.getLogger(__name__)


class InquiryStorage(Protocol):
    def create_inquiry(self, inquiry: InquiryCreate) -> Inquiry:
        ...


class DatabaseStorage:
    """Writes inquiries through SQLAlchemy, one session and one commit per call."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_inquiry(self, inquiry: InquiryCreate) -> Inquiry:
        row = Inquiry(
            name=inquiry.name,
            email=inquiry.email,
            phone=inquiry.phone,
            message=inquiry.message,
            service_type=inquiry.service_type,
        )
        db = self._session_factory()
        try:
            db.add(row)
            db.commit()
            db.refresh(row)
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError("could not store inquiry") from e
        finally:
            db.close()
        return row
