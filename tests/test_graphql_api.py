ADD_PRODUCT = """
mutation($name: String!, $price: Float!, $image: String!) {
  addProduct(name: $name, price: $price, image: $image) { id name price image }
}
"""

ADD_TO_CART = """
mutation($productId: ID!, $quantity: Int!) {
  addToCart(productId: $productId, quantity: $quantity) { id productId quantity }
}
"""

REMOVE_FROM_CART = """
mutation($cartId: ID!) {
  removeFromCart(cartId: $cartId) { id productId quantity }
}
"""

CART = "{ cart { id productId quantity product { id name price image } } }"
PRODUCTS = "{ products { id name price image } }"


async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


async def test_mug_scenario(gql):
    product = (await gql(ADD_PRODUCT, {"name": "Mug", "price": 9.99, "image": "mug.png"}))["data"]["addProduct"]
    assert product == {"id": "1", "name": "Mug", "price": 9.99, "image": "mug.png"}

    line = (await gql(ADD_TO_CART, {"productId": "1", "quantity": 3}))["data"]["addToCart"]
    assert line == {"id": "1", "productId": "1", "quantity": 3}

    cart = (await gql(CART))["data"]["cart"]
    assert cart == [
        {
            "id": "1",
            "productId": "1",
            "quantity": 3,
            "product": {"id": "1", "name": "Mug", "price": 9.99, "image": "mug.png"},
        }
    ]

    removed = (await gql(REMOVE_FROM_CART, {"cartId": "1"}))["data"]["removeFromCart"]
    assert removed == {"id": "1", "productId": "1", "quantity": 3}

    assert (await gql(CART))["data"]["cart"] == []


async def test_products_lists_created_products(gql):
    await gql(ADD_PRODUCT, {"name": "Mug", "price": 9.99, "image": "mug.png"})
    await gql(ADD_PRODUCT, {"name": "Cap", "price": 15.0, "image": "https://cdn.example.com/cap.png"})

    products = (await gql(PRODUCTS))["data"]["products"]

    assert [p["name"] for p in products] == ["Mug", "Cap"]
    assert products == (await gql(PRODUCTS))["data"]["products"]


async def test_remove_unknown_cart_item_is_an_error(gql):
    await gql(ADD_TO_CART, {"productId": "1", "quantity": 1})

    body = await gql(REMOVE_FROM_CART, {"cartId": "99"})

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Cart item not found"
    assert len((await gql(CART))["data"]["cart"]) == 1


async def test_dangling_product_reference_is_null(gql):
    await gql(ADD_TO_CART, {"productId": "77", "quantity": 2})

    cart = (await gql(CART))["data"]["cart"]

    assert cart == [{"id": "1", "productId": "77", "quantity": 2, "product": None}]


async def test_invalid_quantity_is_rejected(gql):
    body = await gql(ADD_TO_CART, {"productId": "1", "quantity": 0})

    assert body["data"] is None
    assert body["errors"][0]["message"].startswith("Invalid input: quantity")
    assert (await gql(CART))["data"]["cart"] == []


async def test_negative_price_is_rejected(gql):
    body = await gql(ADD_PRODUCT, {"name": "Mug", "price": -1, "image": "mug.png"})

    assert body["data"] is None
    assert "price" in body["errors"][0]["message"]
    assert (await gql(PRODUCTS))["data"]["products"] == []


async def test_remove_with_oversized_id_is_not_found(gql):
    body = await gql(REMOVE_FROM_CART, {"cartId": "99999999999999999999"})

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Cart item not found"


async def test_add_to_cart_with_oversized_product_id_is_rejected(gql):
    body = await gql(ADD_TO_CART, {"productId": "99999999999999999999", "quantity": 1})

    assert body["data"] is None
    assert body["errors"][0]["message"].startswith("Invalid input: product_id")
    assert (await gql(CART))["data"]["cart"] == []


async def test_cart_with_several_lines_keeps_storage_order(gql):
    for name, price in [("Mug", 9.99), ("Cap", 15.0), ("Pen", 1.25)]:
        await gql(ADD_PRODUCT, {"name": name, "price": price, "image": f"{name.lower()}.png"})
    for product_id, quantity in [("3", 1), ("1", 2), ("2", 3)]:
        await gql(ADD_TO_CART, {"productId": product_id, "quantity": quantity})

    cart = (await gql(CART))["data"]["cart"]

    assert [(c["id"], c["productId"], c["quantity"], c["product"]["name"]) for c in cart] == [
        ("1", "3", 1, "Pen"),
        ("2", "1", 2, "Mug"),
        ("3", "2", 3, "Cap"),
    ]
