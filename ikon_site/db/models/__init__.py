# ikon_site/db/models/__init__.py
from .inquiry import Inquiry
