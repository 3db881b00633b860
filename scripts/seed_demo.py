"""Seed demo data by calling the GraphQL API of a running server.

Creates a few products and puts one of each into the cart, then prints the
cart as the API returns it. Running it twice creates duplicate rows; there is
no uniqueness on products or cart lines.

Usage:
    python scripts/seed_demo.py [GRAPHQL_URL]

Assumptions:
 - the server is reachable at http://localhost:8081/graphql unless a URL is given
"""
import sys
import httpx

GRAPHQL_URL = "http://localhost:8081/graphql"

DEMO_PRODUCTS = [
    {"name": "Mug", "price": 9.99, "image": "mug.png"},
    {"name": "T-Shirt", "price": 19.5, "image": "tshirt.png"},
    {"name": "Sticker pack", "price": 3.0, "image": "stickers.png"},
]

ADD_PRODUCT = """
mutation AddProduct($name: String!, $price: Float!, $image: String!) {
  addProduct(name: $name, price: $price, image: $image) { id name price image }
}
"""

ADD_TO_CART = """
mutation AddToCart($productId: ID!, $quantity: Int!) {
  addToCart(productId: $productId, quantity: $quantity) { id productId quantity }
}
"""

CART = "{ cart { id quantity product { name price } } }"


def gql(url: str, query: str, variables=None):
    r = httpx.post(url, json={"query": query, "variables": variables or {}}, timeout=5.0)
    r.raise_for_status()
    body = r.json()
    if body.get("errors"):
        raise RuntimeError(f"GraphQL errors: {body['errors']}")
    return body["data"]


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else GRAPHQL_URL
    print(f"Seeding demo data into {url}")
    try:
        for i, payload in enumerate(DEMO_PRODUCTS, start=1):
            product = gql(url, ADD_PRODUCT, payload)["addProduct"]
            print(f"Created product: {product}")
            line = gql(url, ADD_TO_CART, {"productId": product["id"], "quantity": i})["addToCart"]
            print(f"Added to cart: {line}")
    except httpx.HTTPError as e:
        print(f"shopgraph unavailable: {e}")
        sys.exit(1)

    print("\nCart now contains:")
    for line in gql(url, CART)["cart"]:
        print(f"  #{line['id']}: {line['quantity']} x {line['product']}")


if __name__ == "__main__":
    main()
