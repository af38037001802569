"""Tests for product API endpoints."""
import uuid


class TestProductAPI:
    """Tests for product-related API endpoints."""

    def test_create_product(self, client):
        """Test creating a single product."""
        response = client.post(
            "/api/products",
            json={
                "barcode": "1234567890123",
                "name": "New Product",
                "price": 9.99,
                "details": "Shelf A"
            }
        )

        assert response.status_code == 201
        data = response.json()
        assert data["barcode"] == "1234567890123"
        assert data["name"] == "New Product"
        assert data["price"] == 9.99
        assert data["details"] == "Shelf A"
        assert uuid.UUID(data["documentId"])
        assert data["createdAt"]

    def test_create_product_minimal_fields(self, client):
        """Test creating product with only required fields."""
        response = client.post(
            "/api/products",
            json={"barcode": "MIN001", "name": "Minimal Product", "price": 1}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["details"] is None

    def test_duplicate_barcode_rejected(self, client, sample_products):
        """A second product with an existing barcode is a conflict, not an overwrite."""
        response = client.post(
            "/api/products",
            json={
                "barcode": sample_products[0]["barcode"],
                "name": "Duplicate Product",
                "price": 100
            }
        )

        assert response.status_code == 409
        assert response.text == "Product with this barcode already exists."

        products = client.get("/api/products").json()
        matching = [p for p in products if p["barcode"] == sample_products[0]["barcode"]]
        assert len(matching) == 1
        assert matching[0]["name"] == sample_products[0]["name"]

    def test_missing_required_field_rejected(self, client):
        response = client.post(
            "/api/products",
            json={"barcode": "NOPRICE", "name": "No Price"}
        )

        assert response.status_code == 400
        assert "price" in response.text

    def test_malformed_price_rejected(self, client):
        response = client.post(
            "/api/products",
            json={"barcode": "BADPRICE", "name": "Bad Price", "price": "cheap"}
        )

        assert response.status_code == 400

    def test_unknown_field_rejected(self, client):
        response = client.post(
            "/api/products",
            json={"barcode": "EXTRA", "name": "Extra", "price": 1, "color": "red"}
        )

        assert response.status_code == 400
        assert "color" in response.text

    def test_get_products_list(self, client, sample_products):
        """Test getting products list."""
        response = client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert len(data) == 3
        assert {p["barcode"] for p in data} == {p["barcode"] for p in sample_products}

    def test_get_products_empty(self, client):
        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_created_product_round_trip(self, client):
        """A listed product holds exactly the submitted fields plus server metadata."""
        submitted = {"barcode": "RT001", "name": "Round Trip", "price": 4.25, "details": "x"}
        client.post("/api/products", json=submitted)

        listed = client.get("/api/products").json()[0]

        assert set(listed) == set(submitted) | {"documentId", "createdAt"}
        for field, value in submitted.items():
            assert listed[field] == value


class TestProductUpdate:
    """Tests for PUT /api/products/{barcode}."""

    def test_update_product_partial(self, client, sample_products):
        barcode = sample_products[1]["barcode"]

        response = client.put(
            f"/api/products/{barcode}",
            json={"name": "Arabic Coffee 500g"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Arabic Coffee 500g"
        assert data["price"] == sample_products[1]["price"]
        assert data["barcode"] == barcode

    def test_update_replaces_price_and_details(self, client, sample_products):
        barcode = sample_products[0]["barcode"]

        response = client.put(
            f"/api/products/{barcode}",
            json={"price": 3.0, "details": None}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 3.0
        assert data["details"] is None

    def test_update_nonexistent_product_returns_404(self, client):
        response = client.put("/api/products/UNKNOWN", json={"name": "Ghost"})

        assert response.status_code == 404
        assert response.text == "Product not found."

    def test_update_rejects_null_required_field(self, client, sample_products):
        barcode = sample_products[0]["barcode"]

        response = client.put(f"/api/products/{barcode}", json={"name": None})

        assert response.status_code == 400

    def test_update_barcode_to_existing_is_conflict(self, client, sample_products):
        response = client.put(
            f"/api/products/{sample_products[0]['barcode']}",
            json={"barcode": sample_products[1]["barcode"]}
        )

        assert response.status_code == 409

    def test_update_barcode(self, client, sample_products):
        old_barcode = sample_products[2]["barcode"]

        response = client.put(f"/api/products/{old_barcode}", json={"barcode": "NEW-CODE"})

        assert response.status_code == 200
        barcodes = {p["barcode"] for p in client.get("/api/products").json()}
        assert "NEW-CODE" in barcodes
        assert old_barcode not in barcodes


class TestProductDelete:
    """Tests for DELETE /api/products/{barcode}."""

    def test_delete_product(self, client, sample_products):
        barcode = sample_products[0]["barcode"]

        response = client.delete(f"/api/products/{barcode}")

        assert response.status_code == 204
        assert response.content == b""
        barcodes = {p["barcode"] for p in client.get("/api/products").json()}
        assert barcode not in barcodes

    def test_delete_nonexistent_product_returns_404(self, client):
        response = client.delete("/api/products/UNKNOWN")

        assert response.status_code == 404
        assert response.text == "Product not found."

    def test_delete_twice_returns_404(self, client, sample_products):
        barcode = sample_products[0]["barcode"]

        assert client.delete(f"/api/products/{barcode}").status_code == 204
        assert client.delete(f"/api/products/{barcode}").status_code == 404
