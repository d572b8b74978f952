from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Sequence
from urllib.parse import urlencode, urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from euro_alternatives.config import TEMPLATE_DIR
from euro_alternatives.countries import LIST_FLAG_SIZE, flag_url
from euro_alternatives.filters import FilterState
from euro_alternatives.models import Product

FAVICON_SERVICE_URL = "https://www.google.com/s2/favicons"
CARD_LOGO_SIZE = 128
EMPTY_MESSAGE = "No results found matching your criteria."

ENVIRONMENT = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def logo_hostname(link: str) -> str:
    """Hostname used for the favicon lookup; the raw link when it is not an absolute URL."""
    try:
        parsed = urlsplit(link)
        hostname = parsed.hostname
    except ValueError:
        return link
    if not parsed.scheme or not hostname:
        return link
    return hostname.replace("www.", "", 1)


def logo_url(link: str, size: int = CARD_LOGO_SIZE) -> str:
    return f"{FAVICON_SERVICE_URL}?{urlencode({'domain': logo_hostname(link), 'sz': size})}"


def detail_url(product_id: str) -> str:
    return f"product.html?{urlencode({'id': product_id})}"


def json_script_literal(value: object) -> str:
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def count_label(count: int) -> str:
    return f"{count} result{'' if count == 1 else 's'}"


@dataclass(frozen=True, slots=True)
class CountryBadge:
    name: str
    flag_url: str


@dataclass(frozen=True, slots=True)
class Card:
    product: Product
    logo_url: str
    initial: str
    detail_url: str
    countries: tuple[CountryBadge, ...]

    @property
    def search_fields(self) -> dict[str, str]:
        """Lowercased searchable fields, emitted as one ``data-*`` attribute each."""
        product = self.product
        return {
            "name": product.name.lower(),
            "description": product.description.lower(),
            "alternative": product.alternative_to.lower(),
        }


@dataclass(slots=True)
class GridView:
    title: str
    cards: list[Card] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def count_label(self) -> str:
        return count_label(self.count)


def build_card(product: Product) -> Card:
    return Card(
        product=product,
        logo_url=logo_url(product.link),
        initial=product.name[:1],
        detail_url=detail_url(product.id),
        countries=tuple(CountryBadge(name, flag_url(name, LIST_FLAG_SIZE)) for name in product.countries),
    )


def render_grid(products: Sequence[Product], state: FilterState) -> GridView:
    return GridView(title=state.title, cards=[build_card(product) for product in products])


def grid_html(view: GridView) -> str:
    return ENVIRONMENT.get_template("_grid.html").render(grid=view, empty_message=EMPTY_MESSAGE)
