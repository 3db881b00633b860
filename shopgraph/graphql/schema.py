# shopgraph/graphql/schema.py
from typing import List

import strawberry
from strawberry.types import Info

from ..resolvers import ShopResolvers
from .types import CartLine, Product


def _resolvers(info: Info) -> ShopResolvers:
    return info.context["resolvers"]


@strawberry.type
class Query:
    @strawberry.field
    async def products(self, info: Info) -> List[Product]:
        return [Product.from_out(p) for p in await _resolvers(info).products()]

    @strawberry.field
    async def cart(self, info: Info) -> List[CartLine]:
        return [CartLine.from_view(v) for v in await _resolvers(info).cart()]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_product(self, info: Info, name: str, price: float, image: str) -> Product:
        return Product.from_out(await _resolvers(info).add_product(name, price, image))

    @strawberry.mutation
    async def add_to_cart(self, info: Info, product_id: strawberry.ID, quantity: int) -> CartLine:
        return CartLine.from_view(await _resolvers(info).add_to_cart(product_id, quantity))

    @strawberry.mutation
    async def remove_from_cart(self, info: Info, cart_id: strawberry.ID) -> CartLine:
        return CartLine.from_view(await _resolvers(info).remove_from_cart(cart_id))


schema = strawberry.Schema(query=Query, mutation=Mutation)
