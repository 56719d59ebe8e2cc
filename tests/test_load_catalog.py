"""
Bulk loader: column parsing and upsert by id.
"""
import math

import pandas as pd

from scripts.load_catalog import load_frame, parse_bool, parse_list


class TestParsing:

    def test_parse_list(self):
        assert parse_list(["a", "b"]) == ["a", "b"]
        assert parse_list('["Voltage: 12V", "Length: 5m"]') == ["Voltage: 12V", "Length: 5m"]
        assert parse_list("light, driver") == ["light", "driver"]
        assert parse_list("https://img.example.com/x.png") == ["https://img.example.com/x.png"]
        assert parse_list("") is None
        assert parse_list(None) is None
        assert parse_list(math.nan) is None

    def test_parse_bool(self):
        assert parse_bool(True) is True
        assert parse_bool("yes") is True
        assert parse_bool("false") is False
        assert parse_bool(math.nan, default=True) is True


class TestLoadFrame:

    def test_inserts_then_updates_by_id(self, db, repo):
        df = pd.DataFrame([
            {"id": "led-1", "name": "LED Strip", "description": "Strip", "categorySlug": "light",
             "imageUrl": "/s.png", "specificationList": "Voltage: 12V, Length: 5m", "inStock": "true"},
            {"id": None, "name": "Conduit", "description": "PVC", "categorySlug": "pvc-pipe",
             "imageUrl": "/c.png", "specificationList": None, "inStock": "no"},
        ])
        assert load_frame(db, "products", df) == 2

        products = repo.list_products()
        assert [p.name for p in products] == ["LED Strip", "Conduit"]
        assert products[0].id == "led-1"
        assert products[0].specification_list == ["Voltage: 12V", "Length: 5m"]
        assert products[1].in_stock is False

        load_frame(db, "products", pd.DataFrame([{"id": "led-1", "name": "LED Strip v2"}]))
        updated = repo.get_product("led-1")
        assert updated.name == "LED Strip v2"
        assert updated.description == "Strip"
        assert len(repo.list_products()) == 2

    def test_accessories(self, db, repo):
        df = pd.DataFrame([
            {"name": "Wire Nuts", "modelNumber": "WN-100", "description": "Connectors",
             "imageUrl": "/w.png", "compatibleWith": ["light", "metal-box"]},
        ])
        load_frame(db, "accessories", df)
        acc = repo.list_accessories()[0]
        assert acc.model_number == "WN-100"
        assert acc.compatible_with == ["light", "metal-box"]
