import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.models import DeliveryResult
from app.main import create_app
from app.repositories.chats_repo import ChatStore
from app.repositories.clients_repo import ClientRegistry
from app.repositories.db import Database


class FakeNotifier:
    """Guarda as mensagens em vez de chamar a Twilio."""

    def __init__(self, success: bool = True):
        self.success = success
        self.sent: list[tuple[str, str]] = []

    def send(self, to: str, body: str) -> DeliveryResult:
        self.sent.append((to, body))
        if self.success:
            return DeliveryResult(success=True, message_sid=f"SM{len(self.sent):032d}")
        return DeliveryResult(success=False, error="falha simulada")


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "test.sqlite3", pool_size=2, timeout=1.0)
    database.init_schema()
    yield database
    database.close()


@pytest.fixture
def chat_store(db):
    return ChatStore(db)


@pytest.fixture
def client_registry(db):
    return ClientRegistry(db)


@pytest.fixture
def settings(tmp_path):
    return Settings(db_path=str(tmp_path / "api.sqlite3"), db_pool_size=2, db_timeout=1.0)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def client(settings, notifier):
    app = create_app(settings)
    app.state.notifier = notifier
    with TestClient(app) as test_client:
        yield test_client
