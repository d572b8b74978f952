from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from euro_alternatives.config import STATIC_DIR, Settings
from euro_alternatives.dataset import load_products
from euro_alternatives.filters import FilterState
from euro_alternatives.pages import chrome_context, directory_context, map_context
from euro_alternatives.render import ENVIRONMENT, build_card
from euro_alternatives.theme import CookieStore, ThemeController

logger = logging.getLogger(__name__)

TEMPLATES = Jinja2Templates(env=ENVIRONMENT)


def create_app(data_file: Path) -> FastAPI:
    app = FastAPI(title="EuroAlternatives")
    app.state.data_file = data_file
    app.state.products = load_products(data_file)
    app.mount("/assets", StaticFiles(directory=str(STATIC_DIR)), name="assets")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/")
    def directory(
        request: Request,
        category: str | None = None,
        country: str | None = None,
        q: str | None = None,
    ):
        state = FilterState.from_query(category=category, country=country, q=q)
        context = {
            **_chrome(request),
            **directory_context(app.state.products, state),
        }
        return TEMPLATES.TemplateResponse(request=request, name="index.html", context=context)

    @app.get("/map")
    def map_page(request: Request):
        context = {**_chrome(request), **map_context(app.state.products)}
        return TEMPLATES.TemplateResponse(request=request, name="map.html", context=context)

    @app.get("/product.html")
    def product_detail(request: Request, product_id: str = Query(alias="id")):
        product = next((item for item in app.state.products if item.id == product_id), None)
        if product is None:
            raise HTTPException(status_code=404, detail="Alternative not found")
        context = {**_chrome(request), "card": build_card(product), "catalog_json": ""}
        return TEMPLATES.TemplateResponse(request=request, name="product.html", context=context)

    @app.get("/theme/toggle")
    def toggle_theme(request: Request, next_url: str = Query("/", alias="next")):
        store = CookieStore(request.cookies)
        theme = ThemeController(store)
        theme.toggle()
        response = RedirectResponse(url=_safe_next(next_url), status_code=303)
        store.apply(response)
        return response

    @app.get("/api/alternatives")
    def alternatives(
        category: str | None = None,
        country: str | None = None,
        q: str | None = None,
    ) -> dict[str, object]:
        state = FilterState.from_query(category=category, country=country, q=q)
        items = state.apply(app.state.products)
        return {
            "title": state.title,
            "count": len(items),
            "items": [item.to_dict() for item in items],
        }

    return app


def _chrome(request: Request) -> dict[str, object]:
    current = request.url.path
    if request.url.query:
        current = f"{current}?{request.url.query}"
    return chrome_context(
        ThemeController(CookieStore(request.cookies)),
        static_mode=False,
        asset_base="/assets",
        home_href="/",
        map_href="/map",
        toggle_href=f"/theme/toggle?{urlencode({'next': current})}",
    )


def _safe_next(target: str) -> str:
    if not target.startswith("/") or target.startswith("//") or "\\" in target:
        return "/"
    return target


app = create_app(data_file=Settings.from_env().data_file)
