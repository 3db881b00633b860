# shopgraph/resolvers.py
"""
Operations behind the GraphQL schema.

ShopResolvers is built with its repositories and holds no other state, so a
single instance can serve every request. Results are plain pydantic models;
the GraphQL layer only reshapes them.
"""
import asyncio
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from .errors import CartItemNotFound, InvalidInput
from .repository import CartRepository, ProductRepository
from .schemas import CartItemCreate, CartItemOut, CartView, ProductCreate, ProductOut

logger = logging.getLogger(__name__)


def _validate(schema, **fields):
    try:
        return schema(**fields)
    except ValidationError as exc:
        raise InvalidInput.from_validation_error(exc) from exc


class ShopResolvers:
    def __init__(self, products: ProductRepository, cart_items: CartRepository):
        self.products_repo = products
        self.cart_repo = cart_items

    async def products(self) -> List[ProductOut]:
        records = await self.products_repo.find_all()
        return [ProductOut.model_validate(p) for p in records]

    async def cart(self) -> List[CartView]:
        items = await self.cart_repo.find_all()
        # all lookups are issued before any is awaited; gather keeps input order
        lookups = [
            asyncio.ensure_future(self.products_repo.find_by_key(item.product_id))
            for item in items
        ]
        try:
            products = await asyncio.gather(*lookups)
        except BaseException:
            # one failed lookup fails the read; stop the rest
            for task in lookups:
                if not task.done():
                    task.cancel()
            raise
        return [self._compose(item, product) for item, product in zip(items, products)]

    async def cart_view(self, item: Any) -> CartView:
        product = await self.products_repo.find_by_key(item.product_id)
        return self._compose(item, product)

    def _compose(self, item: Any, product: Optional[Any]) -> CartView:
        if product is None:
            logger.warning(
                "Cart item %s references missing product %s", item.id, item.product_id
            )
        return CartView(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            product=ProductOut.model_validate(product) if product is not None else None,
        )

    async def add_product(self, name: str, price: float, image: str) -> ProductOut:
        payload = _validate(ProductCreate, name=name, price=price, image=image)
        product = await self.products_repo.create(**payload.model_dump())
        logger.info("Created product %s (%s)", product.id, product.name)
        return ProductOut.model_validate(product)

    async def add_to_cart(self, product_id: Any, quantity: int) -> CartView:
        payload = _validate(CartItemCreate, product_id=product_id, quantity=quantity)
        item = await self.cart_repo.create(**payload.model_dump())
        logger.info(
            "Added cart item %s: product %s x%s", item.id, item.product_id, item.quantity
        )
        return await self.cart_view(item)

    async def remove_from_cart(self, cart_id: Any) -> CartView:
        item = await self.cart_repo.find_by_key(cart_id)
        if item is None:
            raise CartItemNotFound(cart_id)

        # the row is gone after deletion, so answer with the values it had
        snapshot = CartItemOut.model_validate(item)
        if not await self.cart_repo.delete_instance(item):
            raise CartItemNotFound(cart_id)
        logger.info("Removed cart item %s", snapshot.id)
        return await self.cart_view(snapshot)
