from __future__ import annotations

from dataclasses import dataclass, field

COUNTRY_SEPARATOR = "/"


def split_countries(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(COUNTRY_SEPARATOR) if part.strip())


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    category: str
    countries: tuple[str, ...] = field(default_factory=tuple)
    alternative_to: str = ""
    description: str = ""
    link: str = ""

    @property
    def primary_country(self) -> str:
        return self.countries[0] if self.countries else ""

    @property
    def country_label(self) -> str:
        return COUNTRY_SEPARATOR.join(self.countries)

    @classmethod
    def from_dict(cls, payload: dict[str, object]) -> "Product":
        """Build a product from a dataset record.

        Accepts either a ``countries`` list or the legacy ``country`` field,
        where several countries are joined with ``/``.
        """
        raw_countries = payload.get("countries")
        if isinstance(raw_countries, (list, tuple)):
            countries = tuple(str(item).strip() for item in raw_countries if str(item).strip())
        else:
            countries = split_countries(str(payload.get("country") or ""))

        alternative_to = payload.get("alternativeTo", payload.get("alternative_to"))
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            category=str(payload.get("category") or ""),
            countries=countries,
            alternative_to=str(alternative_to or ""),
            description=str(payload.get("description") or ""),
            link=str(payload.get("link") or ""),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "countries": list(self.countries),
            "alternativeTo": self.alternative_to,
            "description": self.description,
            "link": self.link,
        }
