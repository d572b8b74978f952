from __future__ import annotations

from typing import Mapping, Protocol

from fastapi import Response

THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"
THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

TILE_LAYERS: dict[str, str] = {
    LIGHT: "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
    DARK: "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
}
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OSM</a> contributors '
    '&copy; <a href="https://carto.com/attributions">CARTO</a>'
)
TOGGLE_LABELS: dict[str, str] = {LIGHT: "🌙", DARK: "☀️"}


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class CookieStore:
    """Reads request cookies; writes are held until ``apply`` puts them on a response."""

    def __init__(self, cookies: Mapping[str, str]) -> None:
        self.cookies = cookies
        self.pending: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self.pending:
            return self.pending[key]
        return self.cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self.pending[key] = value

    def apply(self, response: Response) -> None:
        for key, value in self.pending.items():
            response.set_cookie(key, value, max_age=THEME_COOKIE_MAX_AGE, samesite="lax")


class ThemeController:
    def __init__(self, store: PreferenceStore, page_theme: str | None = None) -> None:
        self.store = store
        stored = store.get(THEME_KEY)
        self.theme = DARK if DARK in (stored, page_theme) else LIGHT

    @property
    def is_dark(self) -> bool:
        return self.theme == DARK

    @property
    def tile_url(self) -> str:
        return TILE_LAYERS[self.theme]

    @property
    def toggle_label(self) -> str:
        return TOGGLE_LABELS[self.theme]

    def toggle(self) -> str:
        self.theme = LIGHT if self.is_dark else DARK
        self.store.set(THEME_KEY, self.theme)
        return self.theme
