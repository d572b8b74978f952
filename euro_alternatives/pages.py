"""Template contexts shared by the web app and the static site builder."""

from __future__ import annotations

from euro_alternatives.filters import FilterState
from euro_alternatives.map_view import MAP_CENTER, MAP_ZOOM, build_markers, marker_payload
from euro_alternatives.models import Product
from euro_alternatives.render import (
    EMPTY_MESSAGE,
    build_card,
    grid_html,
    json_script_literal,
    render_grid,
)
from euro_alternatives.sidebar import LinkBuilder, build_sidebar, query_link
from euro_alternatives.theme import TILE_ATTRIBUTION, TILE_LAYERS, TOGGLE_LABELS, ThemeController


def chrome_context(
    theme: ThemeController,
    *,
    static_mode: bool,
    asset_base: str,
    home_href: str,
    map_href: str,
    toggle_href: str = "",
) -> dict[str, object]:
    return {
        "theme": theme,
        "static_mode": static_mode,
        "asset_base": asset_base,
        "home_href": home_href,
        "map_href": map_href,
        "toggle_href": toggle_href,
        "toggle_labels_json": json_script_literal(TOGGLE_LABELS),
    }


def directory_context(
    products: list[Product],
    state: FilterState,
    link_for: LinkBuilder = query_link,
    live_search: bool = False,
) -> dict[str, object]:
    grid = render_grid(state.apply(products), state)
    return {
        "grid": grid,
        "grid_markup": grid_html(grid),
        "sidebar": build_sidebar(products, state, link_for),
        "search_term": state.search_term,
        "live_search": live_search,
        "empty_message": EMPTY_MESSAGE,
    }


def map_context(products: list[Product]) -> dict[str, object]:
    markers = build_markers(products)
    return {
        "markers": markers,
        "marker_count": len(markers),
        "product_count": sum(marker.count for marker in markers),
        "markers_json": json_script_literal(marker_payload(markers)),
        "tile_layers_json": json_script_literal(TILE_LAYERS),
        "tile_attribution_json": json_script_literal(TILE_ATTRIBUTION),
        "center_json": json_script_literal(list(MAP_CENTER)),
        "zoom": MAP_ZOOM,
    }


def catalog_payload(products: list[Product]) -> list[dict[str, object]]:
    payload: list[dict[str, object]] = []
    for product in products:
        card = build_card(product)
        item = product.to_dict()
        item["logo_url"] = card.logo_url
        item["countries"] = [{"name": badge.name, "flag_url": badge.flag_url} for badge in card.countries]
        payload.append(item)
    return payload
