# ikon_site/web/pages.py
from __future__ import annotations

from dataclasses import dataclass

from ikon_site.schemas.inquiry import ServiceType

SERVICE_LABELS = {
    ServiceType.INVESTMENT.value: "Investment Consulting",
    ServiceType.MANAGEMENT.value: "Property Management",
    ServiceType.BROKERAGE.value: "Brokerage Services",
    ServiceType.LENDING.value: "Lending",
}


@dataclass(frozen=True)
class Page:
    key: str
    path: str
    template: str
    title: str
    # service types offered by this page's contact form; empty = no form
    services: tuple[str, ...] = ()

    @property
    def has_form(self) -> bool:
        return bool(self.services)

    def service_options(self) -> list[tuple[str, str]]:
        return [(s, SERVICE_LABELS[s]) for s in self.services]


PAGES: dict[str, Page] = {
    p.key: p
    for p in (
        Page(
            key="home",
            path="/",
            template="pages/home.html",
            title="Maximize Your ROI with Expert Real Estate Guidance",
            services=(
                ServiceType.INVESTMENT.value,
                ServiceType.MANAGEMENT.value,
                ServiceType.BROKERAGE.value,
            ),
        ),
        Page(
            key="consulting",
            path="/consulting",
            template="pages/consulting.html",
            title="Investment Consulting",
        ),
        Page(
            key="propertymanagement",
            path="/propertymanagement",
            template="pages/property_management.html",
            title="Property Management",
        ),
        Page(
            key="brokerageservices",
            path="/brokerageservices",
            template="pages/brokerage.html",
            title="Brokerage Services",
        ),
        Page(
            key="lending",
            path="/lending",
            template="pages/lending.html",
            title="Built For Real Estate Investors",
            services=tuple(s.value for s in ServiceType),
        ),
    )
}


def page_for(key: str | None) -> Page:
    """Page whose contact form was posted. Unknown keys and pages without a form fall back to home."""
    page = PAGES.get(key or "")
    if page is None or not page.has_form:
        return PAGES["home"]
    return page
