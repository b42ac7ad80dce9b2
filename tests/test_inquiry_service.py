from datetime import datetime, timezone

import pytest

from ikon_site.core.errors import InquiryValidationError, StorageError
from ikon_site.db.mixins import Base
from ikon_site.db.models.inquiry import Inquiry
from ikon_site.services.inquiry_service import InquiryService
from ikon_site.services.inquiry_storage import DatabaseStorage

from tests.conftest import UnavailableStorage


class RecordingStorage:
    def __init__(self):
        self.received = []

    def create_inquiry(self, inquiry):
        self.received.append(inquiry)
        raise AssertionError("storage should not be reached")


def test_create_inquiry_echoes_fields(storage, valid_payload, count_inquiries):
    start = datetime.now(timezone.utc)

    created = InquiryService(storage).create_inquiry(valid_payload)

    assert created.id
    assert created.created_at >= start
    assert created.created_at.tzinfo is not None
    assert created.name == "Jo Smith"
    assert created.email == "jo@example.com"
    assert created.phone == ""
    assert created.message == "I am interested in buying a rental property."
    assert created.service_type == "investment"
    assert count_inquiries() == 1


def test_duplicate_submissions_are_separate_records(storage, valid_payload, count_inquiries):
    service = InquiryService(storage)

    first = service.create_inquiry(valid_payload)
    second = service.create_inquiry(dict(valid_payload))

    assert first.id != second.id
    assert count_inquiries() == 2


def test_invalid_input_never_reaches_storage(valid_payload):
    storage = RecordingStorage()
    valid_payload["message"] = "too short"

    with pytest.raises(InquiryValidationError) as exc_info:
        InquiryService(storage).create_inquiry(valid_payload)

    assert exc_info.value.errors == {"message": "Message must be at least 10 characters"}
    assert storage.received == []


def test_invalid_input_writes_nothing(storage, count_inquiries):
    with pytest.raises(InquiryValidationError) as exc_info:
        InquiryService(storage).create_inquiry({
            "name": "A",
            "email": "jo@example.com",
            "message": "too short",
            "serviceType": "investment",
        })

    assert set(exc_info.value.errors) == {"name", "message"}
    assert count_inquiries() == 0


def test_unavailable_storage_raises(valid_payload):
    storage = UnavailableStorage()

    with pytest.raises(StorageError):
        InquiryService(storage).create_inquiry(valid_payload)
    assert storage.calls == 1


def test_failed_write_leaves_no_record(engine, session_factory, valid_payload, count_inquiries):
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(StorageError):
        InquiryService(DatabaseStorage(session_factory)).create_inquiry(valid_payload)

    Base.metadata.create_all(bind=engine)
    assert count_inquiries() == 0


def test_validation_error_lists_fields():
    err = InquiryValidationError({"name": "too short", "email": "bad"})
    assert err.as_list() == [
        {"field": "name", "message": "too short"},
        {"field": "email", "message": "bad"},
    ]


def test_long_name_and_phone_are_stored(storage, valid_payload):
    valid_payload["name"] = "N" * 250
    valid_payload["phone"] = "+1 (313) 555-0123 ext. 4567, ask for the property manager"

    created = InquiryService(storage).create_inquiry(valid_payload)

    assert created.name == valid_payload["name"]
    assert created.phone == valid_payload["phone"]


def test_unconstrained_columns_have_no_length_limit():
    columns = Inquiry.__table__.c
    # a length-enforcing database must not reject what the validator accepts
    assert columns.name.type.length is None
    assert columns.phone.type.length is None
    assert columns.message.type.length is None
