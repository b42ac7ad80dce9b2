# ikon_site/db/models/inquiry.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ikon_site.db.mixins import Base, TimestampMixin


class Inquiry(TimestampMixin, Base):
    """One contact-form submission. Rows are only ever inserted."""

    __tablename__ = "inquiries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # free text from the form; only the validator constrains it
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    service_type: Mapped[str] = mapped_column(String(30), nullable=False)

    def __repr__(self) -> str:
        return f"<Inquiry id={self.id} service_type={self.service_type!r}>"
