# ikon_site/core/errors.py
from __future__ import annotations

from typing import Mapping


class InquiryError(Exception):
    """Base class for failures of the inquiry submission pipeline."""


class InquiryValidationError(InquiryError):
    """
    Input violates the inquiry schema.
    `errors` maps the JSON field name to a human readable message.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        super().__init__("Validation failed: " + ", ".join(self.errors))

    def as_list(self) -> list[dict[str, str]]:
        return [{"field": f, "message": m} for f, m in self.errors.items()]


class StorageError(InquiryError):
    """The persistence write failed or is unavailable; nothing was stored."""


class NetworkError(InquiryError):
    """The request never reached the backend (client side only)."""
