"""Shared fixtures: in-memory database, a Redis double and API clients."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from collabry.main import app
from collabry.schemas import TaskSchema
from database.database import session_manager
from database.enums import Priority, TaskStatus
from database.redis import get_redis_client

PASSWORD = "password123"


class UserClient(AsyncClient):
    user: dict = {}


class FakeRedis:
    """The subset of redis.asyncio.Redis the application uses."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.expiry: dict[str, int] = {}

    async def get(self, key):
        return self.store.get(str(key))

    async def set(self, key, value, ex=None):
        self.store[str(key)] = str(value)
        if ex is None:
            self.expiry.pop(str(key), None)
        else:
            self.expiry[str(key)] = int(ex)
        return True

    async def exists(self, *keys):
        return sum(1 for key in keys if str(key) in self.store)

    async def ttl(self, key):
        if str(key) not in self.store:
            return -2
        return self.expiry.get(str(key), -1)

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.store.pop(str(key), None) is not None:
                removed += 1
            self.expiry.pop(str(key), None)
        return removed


class RecordingNotifier:
    def __init__(self):
        self.successes = []
        self.failures = []

    def notify_success(self, message):
        self.successes.append(message)

    def notify_failure(self, message):
        self.failures.append(message)


def make_task(title: str,
              status: TaskStatus = TaskStatus.todo,
              project_id: UUID | None = None,
              **kwargs) -> TaskSchema:
    now = datetime.now(UTC).replace(tzinfo=None)
    return TaskSchema(id=kwargs.pop("id", uuid4()),
                      project_id=project_id or uuid4(),
                      title=title,
                      status=status,
                      priority=kwargs.pop("priority", Priority.medium),
                      creator_id=kwargs.pop("creator_id", uuid4()),
                      created_date=now,
                      last_modified_date=now,
                      **kwargs)


@pytest.fixture
def redis():
    return FakeRedis()


@pytest.fixture
async def database():
    session_manager.init("sqlite+aiosqlite://",
                         {"poolclass": StaticPool,
                          "connect_args": {"check_same_thread": False}})
    await session_manager.create_all()
    yield session_manager
    await session_manager.close()


@pytest.fixture
async def make_client(database, redis):
    app.dependency_overrides[get_redis_client] = lambda: redis
    clients: list[UserClient] = []

    def factory() -> UserClient:
        client = UserClient(transport=ASGITransport(app=app), base_url="http://testserver")
        clients.append(client)
        return client

    yield factory
    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


async def register(client: AsyncClient, name: str, email: str, password: str = PASSWORD) -> dict:
    response = await client.post("/api/auth/register", json={"name": name,
                                                             "email": email,
                                                             "password": password,
                                                             "password_repeat": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
async def alice(make_client):
    client = make_client()
    client.user = await register(client, "Alice", "alice@example.com")
    return client


@pytest.fixture
async def bob(make_client):
    client = make_client()
    client.user = await register(client, "Bob", "bob@example.com")
    return client


@pytest.fixture
async def carol(make_client):
    client = make_client()
    client.user = await register(client, "Carol", "carol@example.com")
    return client


async def create_project(client: AsyncClient, name: str = "Apollo", **kwargs) -> dict:
    response = await client.post("/api/project", json={"name": name, **kwargs})
    assert response.status_code == 200, response.text
    return response.json()


async def add_member(client: AsyncClient, project_id: str, email: str) -> dict:
    response = await client.post(f"/api/project/member/{project_id}", json={"email": email})
    assert response.status_code == 200, response.text
    return response.json()


async def create_task(client: AsyncClient, project_id: str, title: str, **kwargs) -> dict:
    response = await client.post(f"/api/task/{project_id}", json={"title": title, **kwargs})
    assert response.status_code == 200, response.text
    return response.json()
