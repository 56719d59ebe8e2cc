"""
HTTP tests for the public catalog endpoints.
"""
import pytest
from sqlalchemy.exc import OperationalError

from electrolight.repository import CatalogRepository


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestSimilarEndpoint:

    def test_unknown_product_is_404(self, client):
        resp = client.get("/api/products/does-not-exist/similar")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Product not found"}

    def test_returns_top_three_without_subject(self, client, add_product):
        subject = add_product(name="LED Strip Light Kit", brand="Philips",
                              specification_list=["Length: 16.4 feet", "Voltage: 12V DC"])
        pro = add_product(name="LED Strip Light Pro", brand="Philips",
                          specification_list=["Length: 10 feet", "Voltage: 12V DC"])
        same_cat = [add_product(name=f"Fixture {i}") for i in range(3)]
        add_product(name="Conduit", category_slug="construction")

        resp = client.get(f"/api/products/{subject.id}/similar")
        assert resp.status_code == 200
        body = resp.json()
        ids = [p["id"] for p in body]
        assert ids == [pro.id, same_cat[0].id, same_cat[1].id]
        assert subject.id not in ids
        assert all("similarity" not in p for p in body)

    def test_nothing_above_threshold(self, client, add_product):
        subject = add_product(name="Smoke Alarm", category_slug="smoke-alarm")
        add_product(name="Conduit", category_slug="construction")
        resp = client.get(f"/api/products/{subject.id}/similar")
        assert resp.status_code == 200
        assert resp.json() == []


class TestSearchEndpoint:

    def test_missing_query(self, client):
        resp = client.get("/api/search")
        assert resp.status_code == 200
        assert resp.json() == {"products": [], "accessories": []}

    def test_blank_queries(self, client, add_product):
        add_product(name="LED Panel")
        for q in ("", " "):
            resp = client.get("/api/search", params={"q": q})
            assert resp.status_code == 200
            assert resp.json() == {"products": [], "accessories": []}

    def test_case_insensitive_match(self, client, add_product):
        add_product(name="Professional LED Light Fixture")
        body = client.get("/api/search", params={"q": "led"}).json()
        assert [p["name"] for p in body["products"]] == ["Professional LED Light Fixture"]

    def test_caps(self, client, add_product, add_accessory):
        for i in range(10):
            add_product(name=f"LED Product {i}")
            add_accessory(name=f"LED Accessory {i}")
        body = client.get("/api/search", params={"q": "LED"}).json()
        assert [p["name"] for p in body["products"]] == [f"LED Product {i}" for i in range(3)]
        assert [a["name"] for a in body["accessories"]] == [f"LED Accessory {i}" for i in range(2)]

    def test_accessory_model_number(self, client, add_accessory):
        add_accessory(name="Tape", model_number="ET-200")
        body = client.get("/api/search", params={"q": "et-200"}).json()
        assert body["accessories"][0]["modelNumber"] == "ET-200"


class TestProducts:

    def test_list_in_storage_order_with_camel_case_keys(self, client, add_product):
        add_product(name="First", featured=True)
        add_product(name="Second", category_slug="driver")
        body = client.get("/api/products").json()
        assert [p["name"] for p in body] == ["First", "Second"]
        assert body[0]["categorySlug"] == "light"
        assert body[0]["imageUrls"] == []
        assert body[0]["featured"] is True
        assert body[0]["inStock"] is True

    def test_category_filter(self, client, add_product):
        add_product(name="First")
        add_product(name="Second", category_slug="driver")
        assert [p["name"] for p in client.get("/api/products", params={"category": "driver"}).json()] == ["Second"]
        assert len(client.get("/api/products", params={"category": "undefined"}).json()) == 2

    def test_get_product(self, client, add_product):
        p = add_product(name="Pot Light")
        resp = client.get(f"/api/products/{p.id}")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Pot Light"

    def test_get_product_with_encoded_newline(self, client, add_product):
        p = add_product(name="Pot Light")
        resp = client.get(f"/api/products/{p.id}%0A")
        assert resp.status_code == 200
        assert resp.json()["id"] == p.id

    def test_accessory_falls_back_to_product_shape(self, client, add_accessory):
        a = add_accessory(name="Wire Nuts", model_number="WN-100", brand="Ideal")
        body = client.get(f"/api/products/{a.id}").json()
        assert body["id"] == a.id
        assert body["categorySlug"] == "accessories"
        assert body["specificationList"] == ["Model: WN-100"]
        assert body["inStock"] is True
        assert body["featured"] is False

    def test_unknown_product(self, client):
        resp = client.get("/api/products/nope")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Product not found"}


class TestAccessoriesCategoriesBrands:

    def test_accessories(self, client, add_accessory):
        a = add_accessory(name="Wire Nuts", compatible_with=["light"])
        assert [x["compatibleWith"] for x in client.get("/api/accessories").json()] == [["light"]]
        assert client.get(f"/api/accessories/{a.id}").json()["name"] == "Wire Nuts"
        resp = client.get("/api/accessories/nope")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Accessory not found"}

    def test_categories(self, client, repo):
        repo.create_category({"name": "Light", "slug": "light", "image_url": "/img/light.png"})
        body = client.get("/api/categories").json()
        assert body[0]["slug"] == "light"
        assert body[0]["imageUrl"] == "/img/light.png"

    def test_brands_active_sorted(self, client, repo):
        repo.create_brand({"name": "Leviton"})
        repo.create_brand({"name": "Eaton"})
        repo.create_brand({"name": "Hubbell", "is_active": False})
        assert [b["name"] for b in client.get("/api/brands").json()] == ["Eaton", "Leviton"]


class TestContact:

    def test_submit(self, client):
        resp = client.post("/api/contact", json={
            "firstName": "Ada", "lastName": "Lovelace",
            "email": "ada@example.com", "message": "Need a quote",
        })
        assert resp.status_code == 201
        body = resp.json()
        assert body["firstName"] == "Ada"
        assert body["submittedAt"]
        assert body["id"]

    def test_invalid(self, client):
        resp = client.post("/api/contact", json={"firstName": "Ada"})
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid contact message data"}


class TestStoreFailures:
    """A failing store read is logged and answered with a generic 500."""

    @pytest.fixture
    def broken_list(self, monkeypatch):
        def fail(self, category_slug=None):
            raise OperationalError("SELECT products", {}, Exception("database is locked"))
        monkeypatch.setattr(CatalogRepository, "list_products", fail)

    def test_search(self, client, broken_list):
        resp = client.get("/api/search", params={"q": "led"})
        assert resp.status_code == 500
        assert resp.json() == {"message": "Search failed"}

    def test_similar(self, client, add_product, broken_list):
        product = add_product(name="LED Panel")
        resp = client.get(f"/api/products/{product.id}/similar")
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to fetch similar products"}


class TestProjects:

    def test_list_newest_first_and_get(self, client, repo):
        base = {"description": "Retrofit", "category": "Commercial", "location": "Toronto",
                "completed_date": "2024-05", "client_type": "Commercial"}
        older = repo.create_project({"title": "Office Retrofit", **base})
        repo.create_project({"title": "Warehouse Lighting", **base, "products_used": ["p1"]})

        body = client.get("/api/projects").json()
        assert [p["title"] for p in body] == ["Warehouse Lighting", "Office Retrofit"]
        assert body[0]["productsUsed"] == ["p1"]
        assert body[1]["additionalMediaUrls"] == []

        resp = client.get(f"/api/projects/{older.id}%0A")
        assert resp.status_code == 200
        assert resp.json()["completedDate"] == "2024-05"

    def test_unknown_project(self, client):
        resp = client.get("/api/projects/missing")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Project not found"}


class TestHeroImages:

    def test_carousel_order(self, client, repo):
        repo.create_hero_image({"title": "Second", "image_url": "/2.png", "order": 2})
        repo.create_hero_image({"title": "First", "image_url": "/1.png", "order": 1})
        repo.create_hero_image({"title": "First (new)", "image_url": "/1b.png", "order": 1})

        body = client.get("/api/hero-images").json()
        assert [h["title"] for h in body] == ["First (new)", "First", "Second"]
        assert body[0]["isActive"] is True

    def test_get_and_unknown(self, client, repo):
        hero = repo.create_hero_image({"title": "Banner", "image_url": "/b.png"})
        assert client.get(f"/api/hero-images/{hero.id}").json()["order"] == 0
        resp = client.get("/api/hero-images/missing")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Hero image not found"}


class TestSiteSettings:

    def test_created_empty_on_first_read(self, client):
        body = client.get("/api/site-settings").json()
        assert body["id"] == "default_settings"
        assert body["phoneNumber"] is None
        assert client.get("/api/site-settings").json()["id"] == "default_settings"
