import asyncio
from types import SimpleNamespace

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from shopgraph.database import create_tables
from shopgraph.main import create_app
from shopgraph.resolvers import ShopResolvers


class FakeRepository:
    """In-memory stand-in for the SQLAlchemy repositories."""

    def __init__(self, delays=None):
        self.rows = []
        self.delays = delays or {}
        self.started = []
        self.finished = []
        self._next_id = 1

    async def find_all(self):
        return list(self.rows)

    async def find_by_key(self, key):
        try:
            pk = int(key)
        except (TypeError, ValueError):
            return None
        self.started.append(pk)
        await asyncio.sleep(self.delays.get(pk, 0))
        self.finished.append(pk)
        return next((r for r in self.rows if r.id == pk), None)

    async def create(self, **fields):
        record = SimpleNamespace(id=self._next_id, **fields)
        self._next_id += 1
        self.rows.append(record)
        return record

    async def delete_instance(self, record):
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.id != record.id]
        return len(self.rows) < before


@pytest.fixture
def product_repo():
    return FakeRepository()


@pytest.fixture
def cart_repo():
    return FakeRepository()


@pytest.fixture
def resolvers(product_repo, cart_repo):
    return ShopResolvers(product_repo, cart_repo)


@pytest.fixture
async def db_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def client(db_engine):
    app = create_app(db_engine, bootstrap_database=False)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def gql(client):
    async def run(query, variables=None):
        r = await client.post("/graphql", json={"query": query, "variables": variables or {}})
        assert r.status_code == 200, r.text
        return r.json()

    return run
