"""Shared fixtures: a seeded SQLite store, a controllable clock and API clients."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel

from surfjournal.config import SessionUser, Settings, get_settings
from surfjournal.main import app
from surfjournal.models import Article, Category, User
from surfjournal.services import NewsService, TTLCache, get_news_service

EDITOR_TOKEN = "editor-token"
ADMIN_TOKEN = "admin-token"

BASE_DATE = datetime(2025, 6, 1, 8, 0, 0, tzinfo=UTC)


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _article(id: int, slug: str, category_id: int, days: int, **overrides) -> Article:
    fields = {
        "id": id,
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "content": f"<p>Full story about {slug}</p>",
        "excerpt": f"Short take on {slug}",
        "image_url": f"https://cdn.example.com/{slug}.jpg",
        "category_id": category_id,
        "author_id": 1,
        "status": "published",
        "is_featured": False,
        "view_count": 10,
        "created_at": BASE_DATE + timedelta(days=days),
        "updated_at": BASE_DATE + timedelta(days=days),
    }
    fields.update(overrides)
    return Article(**fields)


def seed(session: Session) -> None:
    """Five published articles in two categories, one draft, one empty category."""
    session.add_all(
        [
            User(id=1, name="Marina Costa", email="marina@surfjournal.test", role="editor"),
            User(id=2, name="Rafael Nunes", email="rafael@surfjournal.test", role="admin"),
            Category(id=1, name="Competitions", slug="competitions", description="Contests"),
            Category(id=2, name="Big Waves", slug="big-waves"),
            Category(id=3, name="Equipment", slug="equipment"),
        ]
    )
    session.add_all(
        [
            _article(1, "saquarema-final", 1, days=1, is_featured=True),
            _article(2, "nazare-swell-alert", 2, days=2, title="Nazare Swell Alert"),
            _article(3, "florianopolis-qualifier", 1, days=3),
            _article(4, "jaws-paddle-session", 2, days=4, is_featured=True, author_id=2),
            _article(5, "junior-championship", 1, days=5),
            _article(6, "unfinished-draft", 1, days=6, status="draft"),
        ]
    )
    session.commit()


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "surfjournal.sqlite3"
    engine = create_engine(f"sqlite:///{path}")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        seed(session)
    engine.dispose()
    return path


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def make_service(url: str, clock: FakeClock) -> NewsService:
    engine = create_async_engine(url, poolclass=NullPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    return NewsService(factory, cache=TTLCache(ttl=300, clock=clock))


@pytest.fixture
def service(db_path, clock) -> NewsService:
    return make_service(f"sqlite+aiosqlite:///{db_path}", clock)


@pytest.fixture
def broken_service(tmp_path, clock) -> NewsService:
    """Service whose store cannot be opened."""
    return make_service(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/store.sqlite3", clock)


def make_settings(**overrides) -> Settings:
    fields = {
        "mock_mode": False,
        "environment": "test",
        "session_users": {
            EDITOR_TOKEN: SessionUser(id=1, name="Marina Costa", email="marina@surfjournal.test"),
            ADMIN_TOKEN: SessionUser(id=2, name="Rafael Nunes", email="rafael@surfjournal.test", role="admin"),
        },
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


@pytest.fixture
def use_app():
    """Point the application at the given settings and service."""

    def _use(settings: Settings, news_service: NewsService):
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_news_service] = lambda: news_service
        return app

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client(use_app, service) -> TestClient:
    """Client against the seeded store with mock mode off."""
    return TestClient(use_app(make_settings(), service))


@pytest.fixture
def mock_client(use_app, broken_service) -> TestClient:
    """Client in mock mode with an unreachable store."""
    return TestClient(use_app(make_settings(mock_mode=True), broken_service))


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
