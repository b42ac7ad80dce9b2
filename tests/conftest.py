import pytest
from fastapi.testclient import TestClient

from ikon_site.core.config import Settings
from ikon_site.core.errors import StorageError
from ikon_site.db.mixins import Base
from ikon_site.db.models.inquiry import Inquiry
from ikon_site.db.session import make_engine, make_session_factory
from ikon_site.main import create_app
from ikon_site.services.inquiry_storage import DatabaseStorage


class UnavailableStorage:
    """Storage double whose backend is down."""

    def __init__(self):
        self.calls = 0

    def create_inquiry(self, inquiry):
        self.calls += 1
        raise StorageError("database unavailable")


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        CREATE_TABLES_ON_STARTUP=False,
    )


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def storage(session_factory):
    return DatabaseStorage(session_factory)


@pytest.fixture
def count_inquiries(session_factory):
    def _count():
        with session_factory() as db:
            return db.query(Inquiry).count()
    return _count


@pytest.fixture
def app(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def down_client(settings):
    return TestClient(create_app(settings=settings, storage=UnavailableStorage()))


@pytest.fixture
def valid_payload():
    return {
        "name": "Jo Smith",
        "email": "jo@example.com",
        "phone": "",
        "message": "I am interested in buying a rental property.",
        "serviceType": "investment",
    }
