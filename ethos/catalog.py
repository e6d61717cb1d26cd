"""Company catalog loaded from JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ethos.models import Category, Company

logger = logging.getLogger(__name__)


class Catalog:
    """In-memory collection of companies with their facts and sources.

    Records are validated on load, so facts reaching the scorer have
    in-range confidence and recognized tags and stances.
    """

    def __init__(self, companies: list[Company]):
        self._companies: list[Company] = []
        self._by_id: dict[str, Company] = {}

        for company in companies:
            if company.id in self._by_id:
                raise ValueError(f"Duplicate company id in catalog: {company.id}")
            self._by_id[company.id] = company
            self._companies.append(company)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Catalog":
        """Build a catalog from ``{"companies": [...]}``."""
        if not isinstance(data, dict) or "companies" not in data:
            raise ValueError("Catalog data must be an object with a 'companies' list")
        companies = [Company.model_validate(record) for record in data["companies"]]
        return cls(companies)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Catalog":
        """Load a catalog JSON file."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data)
        logger.info(f"Loaded {len(catalog)} companies from {path}")
        return catalog

    def __len__(self) -> int:
        return len(self._companies)

    def __iter__(self):
        return iter(self._companies)

    @property
    def companies(self) -> list[Company]:
        return list(self._companies)

    def get(self, company_id: str) -> Optional[Company]:
        return self._by_id.get(company_id)

    def by_category(self, category: Union[Category, str]) -> list[Company]:
        category = Category(category)
        return [c for c in self._companies if c.category == category]

    def search(self, query: str, limit: int = 20) -> list[Company]:
        """Case-insensitive match on company name or category.

        A blank query returns the first ``limit`` companies.
        """
        q = query.strip().lower()
        if not q:
            return self._companies[:limit]

        matches = [
            c for c in self._companies
            if q in c.name.lower() or q in c.category.value.lower()
        ]
        return matches[:limit]
