# shopgraph/repository.py
"""
SQLAlchemy-backed record access used by the resolver layer.

Every call opens its own AsyncSession from the injected session factory, so
several lookups may run concurrently (an AsyncSession itself must not be
shared between concurrent tasks). Returned rows are detached instances; the
factory is expected to use expire_on_commit=False.
"""
from typing import Any, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .models import MAX_ID, CartItem, Product


def _coerce_key(key: Any) -> Optional[int]:
    # GraphQL IDs arrive as strings
    try:
        pk = int(key)
    except (TypeError, ValueError):
        return None
    # out-of-range ids cannot match a row and would fail in the driver
    return pk if 1 <= pk <= MAX_ID else None


class Repository:
    model = None

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def find_all(self) -> List[Any]:
        async with self.session_maker() as session:
            result = await session.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())

    async def find_by_key(self, key: Any) -> Optional[Any]:
        pk = _coerce_key(key)
        if pk is None:
            return None
        async with self.session_maker() as session:
            return await session.get(self.model, pk)

    async def create(self, **fields: Any) -> Any:
        async with self.session_maker() as session:
            record = self.model(**fields)
            session.add(record)
            await session.commit()
            await session.refresh(record)
            return record


class ProductRepository(Repository):
    model = Product


class CartRepository(Repository):
    model = CartItem

    async def delete_instance(self, record: CartItem) -> bool:
        """Delete the row behind `record`. Returns False if it was already gone."""
        async with self.session_maker() as session:
            result = await session.execute(delete(CartItem).where(CartItem.id == record.id))
            await session.commit()
            return result.rowcount > 0
