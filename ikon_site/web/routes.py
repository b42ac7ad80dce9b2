from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ikon_site.core.deps import get_inquiry_service
from ikon_site.core.errors import InquiryValidationError, StorageError
from ikon_site.services.inquiry_service import InquiryService
from ikon_site.services.validation import validate_inquiry
from ikon_site.web.deps import flash, get_csrf_token, pop_flashes, require_csrf
from ikon_site.web.pages import PAGES, Page, page_for

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

SUCCESS_TITLE = "Message Sent"
SUCCESS_TEXT = "Thank you for your inquiry. We'll be in touch soon!"
ERROR_TITLE = "Error"
ERROR_TEXT = "Something went wrong. Please try again."


def render(
    request: Request,
    page: Page,
    context: dict | None = None,
    *,
    status_code: int = 200,
):
    ctx = dict(context or {})
    ctx["page"] = page
    ctx["pages"] = PAGES
    ctx["flashes"] = pop_flashes(request)
    ctx.setdefault("csrf_token", get_csrf_token(request))
    ctx.setdefault("form", {})
    ctx.setdefault("errors", {})
    return templates.TemplateResponse(request, page.template, ctx, status_code=status_code)


# ----------------- Pages -----------------

@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return render(request, PAGES["home"])

@router.get("/consulting", response_class=HTMLResponse)
def consulting(request: Request):
    return render(request, PAGES["consulting"])

@router.get("/propertymanagement", response_class=HTMLResponse)
def property_management(request: Request):
    return render(request, PAGES["propertymanagement"])

@router.get("/brokerageservices", response_class=HTMLResponse)
def brokerage(request: Request):
    return render(request, PAGES["brokerageservices"])

@router.get("/lending", response_class=HTMLResponse)
def lending(request: Request):
    return render(request, PAGES["lending"])


# ----------------- Contact form -----------------

@router.post("/contact")
def contact_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    message: str = Form(""),
    serviceType: str = Form(""),
    page: str = Form("home"),
    csrf_token: str = Form(""),
    service: InquiryService = Depends(get_inquiry_service),
):
    require_csrf(request, csrf_token)
    current = page_for(page)
    form = {
        "name": name,
        "email": email,
        "phone": phone,
        "message": message,
        "serviceType": serviceType,
    }

    # quick check against what this page offers; the service validates again
    checked = validate_inquiry(form, current.services)
    if not checked.ok:
        return render(request, current, {"form": form, "errors": checked.errors}, status_code=400)

    back = f"{current.path}#contact"
    try:
        service.create_inquiry(form)
    except InquiryValidationError as e:
        return render(request, current, {"form": form, "errors": e.errors}, status_code=400)
    except StorageError:
        flash(request, ERROR_TITLE, ERROR_TEXT, "error")
        return RedirectResponse(url=back, status_code=303)

    flash(request, SUCCESS_TITLE, SUCCESS_TEXT, "success")
    return RedirectResponse(url=back, status_code=303)
