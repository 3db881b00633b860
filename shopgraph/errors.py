# shopgraph/errors.py
from pydantic import ValidationError


class ShopError(Exception):
    """Base class for errors raised by the resolver layer."""


class CartItemNotFound(ShopError):
    def __init__(self, cart_id):
        self.cart_id = cart_id
        super().__init__("Cart item not found")


class InvalidInput(ShopError):
    def __init__(self, errors):
        self.errors = errors
        super().__init__("Invalid input: " + "; ".join(errors))

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInput":
        errors = []
        for err in exc.errors():
            field = ".".join(str(p) for p in err.get("loc", ())) or "input"
            errors.append(f"{field}: {err.get('msg')}")
        return cls(errors)
