from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from euro_alternatives.models import Product

ALL_CATEGORY = "All"
ALL_TITLE = "All Alternatives"


class FilterKind(str, Enum):
    CATEGORY = "category"
    COUNTRY = "country"
    SEARCH = "search"


def filter_by_category(products: Iterable[Product], category: str) -> list[Product]:
    if category == ALL_CATEGORY:
        return list(products)
    return [product for product in products if product.category == category]


def filter_by_country(products: Iterable[Product], country: str) -> list[Product]:
    target = country.strip()
    return [product for product in products if target in product.countries]


def filter_by_search(products: Iterable[Product], term: str) -> list[Product]:
    needle = term.lower()
    if not needle:
        return list(products)
    return [
        product
        for product in products
        if needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.alternative_to.lower()
    ]


@dataclass(frozen=True, slots=True)
class FilterState:
    """The single active filter. Category, country and search are exclusive."""

    kind: FilterKind = FilterKind.CATEGORY
    value: str = ALL_CATEGORY

    @classmethod
    def category(cls, name: str) -> "FilterState":
        return cls(FilterKind.CATEGORY, name)

    @classmethod
    def country(cls, name: str) -> "FilterState":
        return cls(FilterKind.COUNTRY, name)

    @classmethod
    def search(cls, term: str) -> "FilterState":
        return cls(FilterKind.SEARCH, term)

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        country: str | None = None,
        q: str | None = None,
    ) -> "FilterState":
        if q is not None:
            return cls.search(q)
        if country:
            return cls.country(country)
        if category:
            return cls.category(category)
        return cls()

    @property
    def title(self) -> str:
        if self.kind is FilterKind.COUNTRY:
            return f"Made in {self.value}"
        if self.kind is FilterKind.SEARCH:
            return f'Search: "{self.value}"'
        if self.value == ALL_CATEGORY:
            return ALL_TITLE
        return self.value

    @property
    def search_term(self) -> str:
        return self.value if self.kind is FilterKind.SEARCH else ""

    def apply(self, products: Iterable[Product]) -> list[Product]:
        if self.kind is FilterKind.COUNTRY:
            return filter_by_country(products, self.value)
        if self.kind is FilterKind.SEARCH:
            return filter_by_search(products, self.value)
        return filter_by_category(products, self.value)
