"""Tests for product API endpoints."""

from fastapi.testclient import TestClient


class TestListProducts:
    """Tests for GET /products."""

    def test_default_listing(self, client: TestClient) -> None:
        """Returns published products newest first with camelCase metadata."""
        response = client.get("/products")
        assert response.status_code == 200

        data = response.json()
        assert [p["id"] for p in data["data"]] == [
            "prod_006",
            "prod_005",
            "prod_004",
            "prod_003",
            "prod_002",
            "prod_001",
        ]
        pagination = data["pagination"]
        assert pagination["total"] == 6
        assert pagination["totalPages"] == 1
        assert pagination["hasNextPage"] is False
        assert pagination["hasPrevPage"] is False
        assert pagination["limit"] == 12
        assert pagination["pageNumbers"] == [1]
        assert pagination["rangeText"] == "Showing 1-6 of 6"

    def test_product_fields_are_camel_case(self, client: TestClient) -> None:
        response = client.get("/products", params={"search": "handbag"})
        product = response.json()["data"][0]
        assert product["id"] == "prod_006"
        assert product["imageUrl"] is None
        assert product["affiliateUrl"] is None
        assert product["isFeatured"] is False
        assert product["price"] == 650.0
        assert "createdAt" in product

    def test_unpublished_not_listed(self, client: TestClient) -> None:
        response = client.get("/products", params={"category": "Outerwear"})
        assert [p["id"] for p in response.json()["data"]] == ["prod_001"]

    def test_filters_and_sort(self, client: TestClient) -> None:
        response = client.get(
            "/products",
            params={"minPrice": "200", "maxPrice": "400", "sortBy": "price-high"},
        )
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == ["prod_002", "prod_004", "prod_005"]

    def test_tag_filter(self, client: TestClient) -> None:
        response = client.get("/products", params={"tag": "classic"})
        assert [p["id"] for p in response.json()["data"]] == ["prod_005", "prod_001"]

    def test_page_past_end_is_clamped(self, client: TestClient) -> None:
        response = client.get("/products", params={"page": "99", "limit": "4"})
        assert response.status_code == 200
        data = response.json()
        assert data["pagination"]["page"] == 2
        assert [p["id"] for p in data["data"]] == ["prod_002", "prod_001"]

    def test_garbage_params_degrade_to_defaults(self, client: TestClient) -> None:
        response = client.get(
            "/products",
            params={"page": "abc", "limit": "many", "minPrice": "cheap", "sortBy": "random"},
        )
        assert response.status_code == 200
        pagination = response.json()["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 12
        assert pagination["total"] == 6

    def test_zero_limit_rejected(self, client: TestClient) -> None:
        response = client.get("/products", params={"limit": "0"})
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "limit"

    def test_inverted_price_range_rejected(self, client: TestClient) -> None:
        response = client.get("/products", params={"minPrice": "500", "maxPrice": "100"})
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "minPrice"
        assert "request_id" in data

    def test_search_total_counts_only_text_matches(self, client: TestClient) -> None:
        """Fuzzy ranking reorders matches but never adds non-matching items."""
        response = client.get("/products", params={"search": "coat"})
        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data["data"]] == ["prod_001"]
        assert data["pagination"]["total"] == 1

        response = client.get("/products", params={"search": "trensh"})
        assert response.json()["pagination"]["total"] == 0


class TestProductLookups:
    """Tests for product detail endpoints."""

    def test_get_by_id(self, client: TestClient) -> None:
        response = client.get("/products/prod_003")
        assert response.status_code == 200
        data = response.json()
        assert data["slug"] == "high-waist-trousers"
        assert data["tags"] == ["tailored"]

    def test_get_by_slug(self, client: TestClient) -> None:
        response = client.get("/products/slug/leather-loafers")
        assert response.status_code == 200
        assert response.json()["id"] == "prod_005"

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/products/prod_404")
        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"

    def test_unpublished_is_not_found(self, client: TestClient) -> None:
        assert client.get("/products/prod_draft").status_code == 404
        assert client.get("/products/slug/draft-blazer").status_code == 404

    def test_related(self, client: TestClient) -> None:
        response = client.get("/products/prod_001/related")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == ["prod_005"]

    def test_related_unknown_product(self, client: TestClient) -> None:
        response = client.get("/products/prod_404/related")
        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"

    def test_related_zero_limit_rejected(self, client: TestClient) -> None:
        response = client.get("/products/prod_001/related", params={"limit": "0"})
        assert response.status_code == 400


class TestFeaturedAndFacets:
    """Tests for featured and facet endpoints."""

    def test_featured(self, client: TestClient) -> None:
        response = client.get("/products/featured")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == ["prod_005", "prod_003", "prod_001"]

    def test_featured_limit(self, client: TestClient) -> None:
        response = client.get("/products/featured", params={"limit": "1"})
        assert [p["id"] for p in response.json()["data"]] == ["prod_005"]

    def test_home_featured(self, client: TestClient) -> None:
        response = client.get("/products/home-featured")
        assert response.status_code == 200
        data = response.json()
        assert [m["id"] for m in data["moodboards"]] == ["mood_003", "mood_001"]
        assert [p["id"] for p in data["products"]] == ["prod_005", "prod_003", "prod_001"]

    def test_brands(self, client: TestClient) -> None:
        response = client.get("/products/brands")
        assert response.status_code == 200
        assert response.json() == ["Burberry", "Celine", "Gucci", "Reformation", "The Row", "Toteme"]

    def test_categories(self, client: TestClient) -> None:
        response = client.get("/products/categories")
        assert response.json() == [
            "Accessories",
            "Bottoms",
            "Dresses",
            "Knitwear",
            "Outerwear",
            "Shoes",
        ]

    def test_tags(self, client: TestClient) -> None:
        response = client.get("/products/tags")
        assert "classic" in response.json()
        assert response.json() == sorted(response.json())
