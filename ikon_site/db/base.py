from ikon_site.db.mixins import Base

# Import all models so Alembic can detect them
from ikon_site.db.models.inquiry import Inquiry
