"""Tests for catalog loading and lookups."""

import json

import pytest
from pydantic import ValidationError

from ethos.catalog import Catalog
from ethos.config import settings
from ethos.models import Category, Stance, TagKey


def make_record(id: str, name: str = None, category: str = "APPAREL", facts: list = None) -> dict:
    """Create a raw catalog record."""
    return {
        "id": id,
        "name": name or id.title(),
        "category": category,
        "facts": facts if facts is not None else [
            {"tag_key": "ethical_sourcing", "stance": "supports", "confidence": 0.8},
        ],
    }


def make_catalog_data() -> dict:
    return {
        "companies": [
            make_record("kotn", "Kotn"),
            make_record("shein", "SHEIN"),
            make_record("eska", "ESKA", category="GROCERY"),
            make_record("starbucks", "Starbucks", category="RESTAURANT"),
        ]
    }


class TestCatalogLoading:
    """Tests for building catalogs from raw data."""

    def test_from_dict(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert len(catalog) == 4
        kotn = catalog.get("kotn")
        assert kotn.facts[0].tag_key == TagKey.ETHICAL_SOURCING
        assert kotn.facts[0].stance == Stance.SUPPORTS

    def test_core_facts_use_plain_tag_keys(self):
        catalog = Catalog.from_dict(make_catalog_data())
        fact = catalog.get("kotn").core_facts()[0]
        assert fact.tag_key == "ethical_sourcing"
        assert fact.confidence == 0.8

    def test_rejects_out_of_range_confidence(self):
        data = {"companies": [make_record("bad", facts=[
            {"tag_key": "lgbtq", "stance": "supports", "confidence": 5.0},
        ])]}
        with pytest.raises(ValidationError):
            Catalog.from_dict(data)

    def test_rejects_unknown_tag(self):
        data = {"companies": [make_record("bad", facts=[
            {"tag_key": "russia_ukraine", "stance": "supports", "confidence": 0.5},
        ])]}
        with pytest.raises(ValidationError):
            Catalog.from_dict(data)

    def test_rejects_unknown_stance(self):
        data = {"companies": [make_record("bad", facts=[
            {"tag_key": "lgbtq", "stance": "boycotted", "confidence": 0.5},
        ])]}
        with pytest.raises(ValidationError):
            Catalog.from_dict(data)

    def test_rejects_duplicate_ids(self):
        data = {"companies": [make_record("kotn"), make_record("kotn")]}
        with pytest.raises(ValueError, match="Duplicate"):
            Catalog.from_dict(data)

    def test_rejects_missing_companies(self):
        with pytest.raises(ValueError):
            Catalog.from_dict({"items": []})

    def test_from_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(make_catalog_data()), encoding="utf-8")
        catalog = Catalog.from_file(path)
        assert [c.id for c in catalog] == ["kotn", "shein", "eska", "starbucks"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Catalog.from_file(tmp_path / "missing.json")

    def test_sample_catalog_loads(self):
        catalog = Catalog.from_file(settings.catalog_path)
        assert len(catalog) > 0
        assert catalog.get("shein") is not None


class TestCatalogLookups:
    """Tests for lookups and search."""

    def test_get_unknown(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert catalog.get("nope") is None

    def test_by_category(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert [c.id for c in catalog.by_category(Category.APPAREL)] == ["kotn", "shein"]
        assert [c.id for c in catalog.by_category("GROCERY")] == ["eska"]

    def test_search_by_name_is_case_insensitive(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert [c.id for c in catalog.search("sHeIn")] == ["shein"]

    def test_search_by_category(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert [c.id for c in catalog.search("apparel")] == ["kotn", "shein"]

    def test_blank_search_returns_first_companies(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert len(catalog.search("   ")) == 4
        assert [c.id for c in catalog.search("", limit=2)] == ["kotn", "shein"]

    def test_search_without_matches(self):
        catalog = Catalog.from_dict(make_catalog_data())
        assert catalog.search("zzz") == []

    def test_companies_returns_copy(self):
        catalog = Catalog.from_dict(make_catalog_data())
        catalog.companies.clear()
        assert len(catalog) == 4
