from urllib.parse import parse_qs, urlparse

from euro_alternatives.filters import FilterState
from euro_alternatives.models import Product
from euro_alternatives.render import (
    build_card,
    count_label,
    detail_url,
    grid_html,
    json_script_literal,
    logo_hostname,
    logo_url,
    render_grid,
)
from tests.conftest import make_soup


def test_logo_hostname_strips_www() -> None:
    assert logo_hostname("https://www.qwant.com/search") == "qwant.com"
    assert logo_hostname("https://proton.me/mail") == "proton.me"


def test_logo_hostname_falls_back_to_raw_link() -> None:
    assert logo_hostname("not a url") == "not a url"
    assert logo_hostname("qwant.com") == "qwant.com"
    assert logo_hostname("") == ""
    assert logo_hostname("http://[::1") == "http://[::1"


def test_logo_url_uses_favicon_service() -> None:
    parsed = urlparse(logo_url("https://www.deepl.com", size=64))

    assert parsed.netloc == "www.google.com"
    assert parse_qs(parsed.query) == {"domain": ["deepl.com"], "sz": ["64"]}


def test_detail_url_keys_by_id() -> None:
    assert detail_url("proton-mail") == "product.html?id=proton-mail"


def test_count_label_pluralises() -> None:
    assert count_label(0) == "0 results"
    assert count_label(1) == "1 result"
    assert count_label(2) == "2 results"


def test_render_grid_preserves_order_and_title(products) -> None:
    state = FilterState.country("France")

    view = render_grid(state.apply(products), state)

    assert view.title == "Made in France"
    assert view.count == 2
    assert [card.product.id for card in view.cards] == ["qwant", "airbus"]


def test_empty_grid_renders_single_placeholder() -> None:
    view = render_grid([], FilterState.search("zzz"))

    soup = make_soup(grid_html(view))

    assert view.count == 0
    assert view.count_label == "0 results"
    assert soup.select(".card") == []
    placeholders = soup.select(".empty-state")
    assert len(placeholders) == 1
    assert "No results found" in placeholders[0].get_text()


def test_card_markup_lists_every_country(products) -> None:
    airbus = next(product for product in products if product.id == "airbus")

    soup = make_soup(grid_html(render_grid([airbus], FilterState())))

    card = soup.select_one(".card")
    assert card.select_one("h2").get_text() == "Airbus"
    assert card.select_one(".card-category").get_text() == "Aerospace"
    assert "Replaces Boeing" in card.select_one(".alternative-to").get_text(" ", strip=True)
    assert [img["alt"] for img in card.select(".country-flag")] == ["France", "Germany"]
    assert len(card.select(".country-separator")) == 1
    assert card.select_one("a.card-body")["href"] == "product.html?id=airbus"
    visit = card.select_one("a.btn")
    assert visit["href"] == "https://www.airbus.com"
    assert visit["target"] == "_blank"


def test_malformed_link_still_renders_card(products) -> None:
    soup = make_soup(grid_html(render_grid(products, FilterState())))

    cards = soup.select(".card")
    assert len(cards) == len(products)
    atlantis = cards[-1]
    logo = atlantis.select_one(".card-logo img")
    assert "domain=not+a+url" in logo["src"]
    assert logo["data-initial"] == "A"
    assert atlantis.select_one(".country-flag")["src"].endswith("/eu.png")


def test_card_search_fields_are_lowercased_separately(products) -> None:
    card = build_card(products[0])

    assert card.search_fields == {
        "name": "proton mail",
        "description": "encrypted email hosted in switzerland.",
        "alternative": "gmail",
    }


def test_card_search_fields_keep_sharp_s() -> None:
    card = build_card(Product(id="s", name="Straße", category="Maps", description="x", link="https://strasse.de"))

    assert card.search_fields["name"] == "straße"
    assert "Straße".lower() in card.search_fields["name"]


def test_grid_markup_emits_one_attribute_per_search_field(products) -> None:
    soup = make_soup(grid_html(render_grid(products[:1], FilterState())))

    card = soup.select_one(".card")
    assert card["data-name"] == "proton mail"
    assert card["data-description"] == "encrypted email hosted in switzerland."
    assert card["data-alternative"] == "gmail"
    assert not card.has_attr("data-search")


def test_markup_is_escaped() -> None:
    product = Product(id="x", name="<script>", category="A&B", countries=("France",), link="https://x.eu")

    html = grid_html(render_grid([product], FilterState()))

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_json_script_literal_escapes_closing_tags() -> None:
    assert json_script_literal({"html": "</script>"}) == '{"html": "<\\/script>"}'
