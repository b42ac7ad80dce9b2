# ikon_site/client.py
"""
Client side of the inquiry pipeline: check the form locally, then POST it.

    client = InquiryClient("https://ikonpropertygrp.com")
    try:
        created = client.submit(form, allowed_services=page.services)
    except InquiryValidationError as e:
        show(e.errors)                       # per-field messages
    except (StorageError, NetworkError):
        toast("Something went wrong. Please try again.")

Nothing is retried automatically; the user resubmits.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Iterable, Mapping, Optional

import requests

from ikon_site.core.errors import InquiryValidationError, NetworkError, StorageError
from ikon_site.schemas.inquiry import InquiryOut
from ikon_site.services.validation import validate_inquiry

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/api/inquiries"


class SubmissionState(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    STORED = "stored"
    REJECTED = "rejected"


class InquiryClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        path: str = DEFAULT_PATH,
        timeout: float = 20,
    ):
        self.url = base_url.rstrip("/") + path
        self.session = session or requests.Session()
        self.timeout = timeout
        self.state = SubmissionState.IDLE
        self.last_result: Optional[InquiryOut] = None

    def submit(
        self,
        data: Mapping[str, Any],
        allowed_services: Optional[Iterable[str]] = None,
    ) -> InquiryOut:
        checked = validate_inquiry(data, allowed_services)
        if not checked.ok:
            # never leaves the browser
            self.state = SubmissionState.REJECTED
            raise InquiryValidationError(checked.errors)

        payload = checked.inquiry.model_dump(by_alias=True)
        self.state = SubmissionState.PENDING
        try:
            r = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            self.state = SubmissionState.REJECTED
            raise NetworkError(f"could not reach {self.url}") from e

        if r.status_code == 400:
            self.state = SubmissionState.REJECTED
            raise InquiryValidationError(_field_errors(r))

        if r.status_code >= 300:
            self.state = SubmissionState.REJECTED
            logger.warning("inquiry submit failed: status=%s", r.status_code)
            raise StorageError(f"server error {r.status_code}")

        try:
            self.last_result = InquiryOut.model_validate(r.json())
        except ValueError as e:
            # not JSON, or not an inquiry (e.g. a proxy error page); pydantic errors are ValueErrors too
            self.state = SubmissionState.REJECTED
            logger.warning("inquiry submit got an unreadable response: status=%s", r.status_code)
            raise StorageError(f"unreadable response {r.status_code}") from e
        self.state = SubmissionState.STORED
        return self.last_result


def _field_errors(r: requests.Response) -> dict[str, str]:
    try:
        body = r.json()
    except ValueError:
        return {"body": "Invalid request"}
    if not isinstance(body, dict):
        return {"body": "Invalid request"}
    errors = {}
    items = body.get("errors")
    for item in items if isinstance(items, list) else []:
        if isinstance(item, dict):
            errors.setdefault(str(item.get("field", "body")), str(item.get("message", "Invalid value")))
    return errors or {"body": str(body.get("message", "Invalid request"))}
