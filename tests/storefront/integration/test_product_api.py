"""Integration tests for the product endpoints."""


class TestProductEndpoints:
    def test_create_product(self, client):
        response = client.post(
            "/products",
            json={"name": "Atomberg Ceiling Fan", "category": "Home & Kitchen", "cost": 80, "rating": 4},
        )
        assert response.status_code == 201
        assert "product_id" in response.json()

    def test_get_product(self, client, create_product):
        product_id = create_product(name="Atomberg Ceiling Fan", cost=80)

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["product_id"] == product_id
        assert data["name"] == "Atomberg Ceiling Fan"
        assert data["cost"] == 80

    def test_unknown_product(self, client):
        response = client.get("/products/no-such-product")
        assert response.status_code == 404
        assert response.json() == {"code": 404, "message": "Product not found"}

    def test_list_products(self, client, create_product):
        create_product(name="Shoes")
        create_product(name="Racquet")

        response = client.get("/products")

        assert response.status_code == 200
        assert sorted(p["name"] for p in response.json()) == ["Racquet", "Shoes"]

    def test_rating_out_of_range(self, client):
        response = client.post("/products", json={"name": "Broken", "category": "Misc", "cost": 1, "rating": 9})
        assert response.status_code == 422
