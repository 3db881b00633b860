# shopgraph/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .models import MAX_ID


# 🛍️ Product
class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    image: str


class ProductCreate(ProductBase):
    pass


class ProductOut(BaseModel):
    id: int
    name: str
    price: float
    image: str
    model_config = ConfigDict(from_attributes=True)


# 🛒 Cart line
class CartItemBase(BaseModel):
    # existence of the referenced product is not checked
    product_id: int = Field(ge=1, le=MAX_ID)
    quantity: int = Field(gt=0, le=MAX_ID)


class CartItemCreate(CartItemBase):
    pass


class CartItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    model_config = ConfigDict(from_attributes=True)


class CartView(CartItemOut):
    # None when product_id no longer resolves to a product
    product: Optional[ProductOut] = None
