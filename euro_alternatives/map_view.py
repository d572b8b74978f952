"""
Country-level aggregation for the map page.

Each product is placed on the centroid of its primary (first listed)
country, so a "France/Germany" product only counts towards France here.
Countries without a known centroid get no marker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable

from euro_alternatives.countries import MAP_FLAG_SIZE, country_centroid, flag_url
from euro_alternatives.models import Product
from euro_alternatives.render import ENVIRONMENT, detail_url, logo_url

logger = logging.getLogger(__name__)

MAP_CENTER: tuple[float, float] = (50.0, 10.0)
MAP_ZOOM = 4
MARKER_BASE_SIZE = 30
MARKER_SIZE_STEP = 2
POPUP_LOGO_SIZE = 64


def marker_size(count: int) -> int:
    return MARKER_BASE_SIZE + count * MARKER_SIZE_STEP


@dataclass(frozen=True, slots=True)
class PopupItem:
    name: str
    category: str
    logo_url: str
    detail_url: str


@dataclass(slots=True)
class Marker:
    country: str
    lat: float
    lng: float
    flag_url: str
    items: list[PopupItem] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def size(self) -> int:
        return marker_size(self.count)

    @property
    def anchor(self) -> float:
        return self.size / 2

    @property
    def popup_html(self) -> str:
        return ENVIRONMENT.get_template("_map_popup.html").render(marker=self)


def group_by_primary_country(products: Iterable[Product]) -> dict[str, list[Product]]:
    grouped: dict[str, list[Product]] = {}
    for product in products:
        grouped.setdefault(product.primary_country, []).append(product)
    return grouped


def build_markers(products: Iterable[Product]) -> list[Marker]:
    markers: list[Marker] = []
    for country, members in group_by_primary_country(products).items():
        coords = country_centroid(country)
        if coords is None:
            logger.debug(f"No centroid for {country!r}; skipping {len(members)} products")
            continue
        lat, lng = coords
        markers.append(
            Marker(
                country=country,
                lat=lat,
                lng=lng,
                flag_url=flag_url(country, MAP_FLAG_SIZE),
                items=[
                    PopupItem(
                        name=product.name,
                        category=product.category,
                        logo_url=logo_url(product.link, POPUP_LOGO_SIZE),
                        detail_url=detail_url(product.id),
                    )
                    for product in members
                ],
            )
        )
    return markers


def marker_payload(markers: list[Marker]) -> list[dict[str, object]]:
    return [
        {
            "country": marker.country,
            "lat": marker.lat,
            "lng": marker.lng,
            "count": marker.count,
            "size": marker.size,
            "anchor": marker.anchor,
            "popup_html": marker.popup_html,
        }
        for marker in markers
    ]
