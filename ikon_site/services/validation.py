# ikon_site/services/validation.py
"""
Inquiry form validation.

`validate_inquiry` is a pure check: it never raises for bad input and never
touches storage. The page form runs it against the services offered on that
page; the inquiry service runs it again against every known service type.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from ikon_site.schemas.inquiry import ALL_SERVICE_TYPES, InquiryCreate

FIELD_MESSAGES = {
    "name": "Name must be at least 2 characters",
    "email": "Please enter a valid email",
    "phone": "Invalid value",
    "message": "Message must be at least 10 characters",
    "serviceType": "Please select a service",
}
UNKNOWN_SERVICE_MESSAGE = "Please select a valid service"
INVALID_VALUE_MESSAGE = "Invalid value"

# error loc may carry the python name or the JSON alias
_JSON_NAMES = {"service_type": "serviceType"}

# wrong JSON type (number, list, ...) for a text field
_TYPE_ERRORS = {"string_type", "model_attributes_type", "dict_type"}


@dataclass
class ValidationResult:
    inquiry: Optional[InquiryCreate] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.inquiry is not None and not self.errors


def _field_name(loc: tuple) -> str:
    if not loc:
        return "body"
    name = str(loc[0])
    return _JSON_NAMES.get(name, name)


def validate_inquiry(
    data: Any,
    allowed_services: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """
    Check a candidate submission.

    `allowed_services` defaults to every ServiceType. Errors are keyed by the
    JSON field name, one message per field, in schema order.
    """
    allowed = frozenset(allowed_services) if allowed_services is not None else ALL_SERVICE_TYPES

    if not isinstance(data, Mapping):
        return ValidationResult(errors={"body": "Expected a JSON object"})

    errors: dict[str, str] = {}
    inquiry = None
    try:
        inquiry = InquiryCreate.model_validate(dict(data))
    except ValidationError as e:
        for err in e.errors():
            name = _field_name(err.get("loc", ()))
            if name in errors:
                continue
            if err.get("type") in _TYPE_ERRORS:
                errors[name] = INVALID_VALUE_MESSAGE
            else:
                errors[name] = FIELD_MESSAGES.get(name, INVALID_VALUE_MESSAGE)

    # membership is checked even when other fields failed, so the user sees every problem at once
    service = data.get("serviceType", data.get("service_type"))
    if "serviceType" not in errors and isinstance(service, str) and service and service not in allowed:
        errors["serviceType"] = UNKNOWN_SERVICE_MESSAGE

    if errors:
        order = list(FIELD_MESSAGES)
        ordered = dict(sorted(errors.items(), key=lambda kv: order.index(kv[0]) if kv[0] in order else len(order)))
        return ValidationResult(errors=ordered)
    return ValidationResult(inquiry=inquiry)
