# shopgraph/graphql/types.py
from typing import Optional

import strawberry

from ..schemas import CartView, ProductOut


@strawberry.type
class Product:
    id: strawberry.ID
    name: str
    price: float
    image: str

    @classmethod
    def from_out(cls, p: ProductOut) -> "Product":
        return cls(id=strawberry.ID(str(p.id)), name=p.name, price=p.price, image=p.image)


@strawberry.type(name="Cart", description="One cart line with its product resolved at read time.")
class CartLine:
    id: strawberry.ID
    product_id: strawberry.ID
    quantity: int
    product: Optional[Product] = strawberry.field(
        default=None, description="Null when productId matches no product."
    )

    @classmethod
    def from_view(cls, v: CartView) -> "CartLine":
        return cls(
            id=strawberry.ID(str(v.id)),
            product_id=strawberry.ID(str(v.product_id)),
            quantity=v.quantity,
            product=Product.from_out(v.product) if v.product is not None else None,
        )
