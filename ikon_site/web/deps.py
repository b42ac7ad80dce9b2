# ikon_site/web/deps.py
import hmac
import secrets
from typing import Optional

from fastapi import HTTPException, Request

# ---- Flash messages (for Jinja templates) ----
def flash(request: Request, title: str, text: str, type_: str = "info") -> None:
    request.session.setdefault("flashes", []).append({"title": title, "text": text, "type": type_})

def pop_flashes(request: Request):
    return request.session.pop("flashes", [])

# ---- CSRF helpers ----
# One token per session, compared on POST.
# Name must match what templates post as <input name="csrf_token" ...>
_CSRF_SESSION_KEY = "csrf_token"

def get_csrf_token(request: Request) -> str:
    """
    Return the existing CSRF token from session, or create one and store it.
    Render this value into forms as a hidden field named 'csrf_token'.
    """
    token = request.session.get(_CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        request.session[_CSRF_SESSION_KEY] = token
    return token

def require_csrf(request: Request, token_from_form: Optional[str]) -> None:
    """
    Compare the posted token with the one stored in the session.
    Raise 400 if missing or mismatch.
    """
    if not token_from_form:
        raise HTTPException(status_code=400, detail="Missing CSRF token")

    expected = request.session.get(_CSRF_SESSION_KEY)
    if not expected:
        raise HTTPException(status_code=400, detail="CSRF token not in session")

    if not hmac.compare_digest(expected, token_from_form):
        raise HTTPException(status_code=400, detail="Invalid CSRF token")
