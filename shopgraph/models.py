from sqlalchemy import Column, Integer, String, Float

from .database import Base

# largest value an Integer primary key or reference column holds on PostgreSQL
MAX_ID = 2**31 - 1


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String(1024), nullable=False)


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    # plain reference, not a foreign key: a line may outlive or precede its product
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
