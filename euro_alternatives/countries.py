from __future__ import annotations

from typing import Final

DEFAULT_FLAG_CODE: Final[str] = "eu"
FLAG_CDN_URL: Final[str] = "https://flagcdn.com"
LIST_FLAG_SIZE: Final[str] = "24x18"
MAP_FLAG_SIZE: Final[str] = "16x12"

# One table for list badges and map popups.
COUNTRY_CODES: Final[dict[str, str]] = {
    "Austria": "at",
    "Belgium": "be",
    "Bulgaria": "bg",
    "Cyprus": "cy",
    "Czech Republic": "cz",
    "Denmark": "dk",
    "Estonia": "ee",
    "Finland": "fi",
    "France": "fr",
    "Germany": "de",
    "Greece": "gr",
    "Hungary": "hu",
    "Iceland": "is",
    "Ireland": "ie",
    "Italy": "it",
    "Latvia": "lv",
    "Liechtenstein": "li",
    "Lithuania": "lt",
    "Luxembourg": "lu",
    "Malta": "mt",
    "Netherlands": "nl",
    "Norway": "no",
    "Poland": "pl",
    "Portugal": "pt",
    "Romania": "ro",
    "Slovakia": "sk",
    "Slovenia": "si",
    "Spain": "es",
    "Sweden": "se",
    "Switzerland": "ch",
    "UAE": "ae",
    "UK": "gb",
}

_CODES_BY_FOLDED_NAME: Final[dict[str, str]] = {name.casefold(): code for name, code in COUNTRY_CODES.items()}

COUNTRY_CENTROIDS: Final[dict[str, tuple[float, float]]] = {
    "France": (46.2276, 2.2137),
    "Germany": (51.1657, 10.4515),
    "UK": (55.3781, -3.4360),
    "Italy": (41.8719, 12.5674),
    "Spain": (40.4637, -3.7492),
    "Sweden": (60.1282, 18.6435),
    "Netherlands": (52.1326, 5.2913),
    "Switzerland": (46.8182, 8.2275),
    "Belgium": (50.5039, 4.4699),
    "Austria": (47.5162, 14.5501),
    "Denmark": (56.2639, 9.5018),
    "Norway": (60.4720, 8.4689),
    "Finland": (61.9241, 25.7482),
    "Ireland": (53.1424, -7.6921),
    "Portugal": (39.3999, -8.2245),
    "Poland": (51.9194, 19.1451),
    "Czech Republic": (49.8175, 15.4730),
    "Estonia": (58.5953, 25.0136),
    "Lithuania": (55.1694, 23.8813),
    "Latvia": (56.8796, 24.6032),
    "Slovakia": (48.6690, 19.6990),
    "Slovenia": (46.1512, 14.9955),
    "Hungary": (47.1625, 19.5033),
    "Romania": (45.9432, 24.9668),
    "Bulgaria": (42.7339, 25.4858),
    "Greece": (39.0742, 21.8243),
    "Luxembourg": (49.8153, 6.1296),
    "Liechtenstein": (47.1660, 9.5554),
    "Malta": (35.9375, 14.3754),
    "Cyprus": (35.1264, 33.4299),
    "Iceland": (64.9631, -19.0208),
}


def flag_code(country: str | None) -> str:
    if not country:
        return DEFAULT_FLAG_CODE
    return _CODES_BY_FOLDED_NAME.get(country.strip().casefold(), DEFAULT_FLAG_CODE)


def flag_url(country: str | None, size: str = LIST_FLAG_SIZE) -> str:
    return f"{FLAG_CDN_URL}/{size}/{flag_code(country)}.png"


def country_centroid(country: str) -> tuple[float, float] | None:
    return COUNTRY_CENTROIDS.get(country)
