from __future__ import annotations

import logging
from pathlib import Path
import re
import shutil
from urllib.parse import urlencode

from euro_alternatives.config import STATIC_DIR
from euro_alternatives.dataset import load_products
from euro_alternatives.filters import ALL_CATEGORY, FilterKind, FilterState
from euro_alternatives.pages import catalog_payload, chrome_context, directory_context, map_context
from euro_alternatives.render import ENVIRONMENT, json_script_literal
from euro_alternatives.sidebar import category_names, country_names
from euro_alternatives.theme import MemoryStore, ThemeController

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"
MAP_PAGE = "map.html"
PRODUCT_PAGE = "product.html"


def build_static_site(data_file: Path, site_dir: Path) -> list[Path]:
    products = load_products(data_file)
    site_dir.mkdir(parents=True, exist_ok=True)
    assets_dir = site_dir / "assets"
    assets_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(STATIC_DIR / "style.css", assets_dir / "style.css")

    written: list[Path] = [assets_dir / "style.css"]
    chrome = chrome_context(
        ThemeController(MemoryStore()),
        static_mode=True,
        asset_base="./assets",
        home_href=INDEX_PAGE,
        map_href=MAP_PAGE,
    )

    states = [FilterState()]
    states.extend(FilterState.category(name) for name in category_names(products) if name != ALL_CATEGORY)
    states.extend(FilterState.country(name) for name in country_names(products))
    links = StaticLinks(states)
    for state in states:
        context = {
            **chrome,
            **directory_context(products, state, link_for=links, live_search=state == FilterState()),
        }
        written.append(_write_page(site_dir / links(state), "index.html", context))

    written.append(_write_page(site_dir / MAP_PAGE, "map.html", {**chrome, **map_context(products)}))
    written.append(
        _write_page(
            site_dir / PRODUCT_PAGE,
            "product.html",
            {**chrome, "card": None, "catalog_json": json_script_literal(catalog_payload(products))},
        )
    )

    logger.info(f"Built {len(written)} files for {len(products)} products in {site_dir}")
    return written


def static_link(state: FilterState) -> str:
    """Relative file name of the pre-rendered page for ``state``."""
    if state.kind is FilterKind.SEARCH:
        return f"{INDEX_PAGE}?{urlencode({'q': state.value})}"
    if state.kind is FilterKind.CATEGORY and state.value == ALL_CATEGORY:
        return INDEX_PAGE
    return f"{state.kind.value}-{slugify(state.value)}.html"


class StaticLinks:
    """Page file names for a set of filter states, one distinct file per state.

    Labels that slugify to the same name keep the first file name; later ones
    get a numeric suffix (``category-cloud-storage-2.html``).
    """

    def __init__(self, states: list[FilterState]) -> None:
        self._pages: dict[FilterState, str] = {}
        taken: set[str] = set()
        for state in states:
            if state.kind is FilterKind.SEARCH or state in self._pages:
                continue
            page = static_link(state)
            if page in taken:
                stem = page.removesuffix(".html")
                suffix = 2
                while f"{stem}-{suffix}.html" in taken:
                    suffix += 1
                page = f"{stem}-{suffix}.html"
                logger.warning(f"Page name for {state.kind.value} {state.value!r} collides, using {page}")
            taken.add(page)
            self._pages[state] = page

    def __call__(self, state: FilterState) -> str:
        return self._pages.get(state) or static_link(state)


def slugify(value: str) -> str:
    normalized = re.sub(r"[^a-z0-9]+", "-", value.casefold()).strip("-")
    return normalized or "untitled"


def _write_page(path: Path, template_name: str, context: dict[str, object]) -> Path:
    html_output = ENVIRONMENT.get_template(template_name).render(**context)
    path.write_text(html_output, encoding="utf-8")
    logger.debug(f"Wrote {path}")
    return path
