from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable
from urllib.parse import urlencode

from euro_alternatives.countries import flag_url
from euro_alternatives.filters import ALL_CATEGORY, FilterKind, FilterState
from euro_alternatives.models import Product

LinkBuilder = Callable[[FilterState], str]


def query_link(state: FilterState) -> str:
    """Link into the web app directory page for ``state``."""
    if state.kind is FilterKind.CATEGORY and state.value == ALL_CATEGORY:
        return "/"
    key = "q" if state.kind is FilterKind.SEARCH else state.kind.value
    return f"/?{urlencode({key: state.value})}"


def category_names(products: Iterable[Product]) -> list[str]:
    distinct = {product.category for product in products}
    distinct.discard(ALL_CATEGORY)
    return [ALL_CATEGORY, *sorted(distinct)]


def country_names(products: Iterable[Product]) -> list[str]:
    return sorted({country for product in products for country in product.countries})


@dataclass(frozen=True, slots=True)
class SidebarEntry:
    label: str
    state: FilterState
    href: str
    active: bool = False
    flag_url: str | None = None


@dataclass(slots=True)
class Sidebar:
    categories: list[SidebarEntry] = field(default_factory=list)
    countries: list[SidebarEntry] = field(default_factory=list)

    @property
    def active_entries(self) -> list[SidebarEntry]:
        return [entry for entry in (*self.categories, *self.countries) if entry.active]


def build_sidebar(
    products: list[Product],
    current: FilterState,
    link_for: LinkBuilder = query_link,
) -> Sidebar:
    categories = []
    for name in category_names(products):
        state = FilterState.category(name)
        categories.append(SidebarEntry(label=name, state=state, href=link_for(state), active=state == current))

    countries = []
    for name in country_names(products):
        state = FilterState.country(name)
        countries.append(
            SidebarEntry(
                label=name,
                state=state,
                href=link_for(state),
                active=state == current,
                flag_url=flag_url(name),
            )
        )
    return Sidebar(categories=categories, countries=countries)
