from euro_alternatives.filters import FilterState
from euro_alternatives.sidebar import build_sidebar, category_names, country_names, query_link


def test_category_names_force_all_first(products) -> None:
    names = category_names(products)

    distinct = {product.category for product in products}
    assert len(names) == len(distinct) + 1
    assert names[0] == "All"
    assert names[1:] == sorted(distinct)
    assert names == ["All", "Aerospace", "Email", "Productivity", "Search Engine"]


def test_country_names_split_multi_country_records(products) -> None:
    assert country_names(products) == ["Atlantis", "France", "Germany", "Switzerland"]


def test_build_sidebar_marks_all_active_by_default(products) -> None:
    sidebar = build_sidebar(products, FilterState())

    assert [entry.label for entry in sidebar.active_entries] == ["All"]
    assert sidebar.categories[0].href == "/"


def test_build_sidebar_active_state_is_exclusive(products) -> None:
    sidebar = build_sidebar(products, FilterState.country("Germany"))

    active = sidebar.active_entries
    assert len(active) == 1
    assert active[0].label == "Germany"
    assert not any(entry.active for entry in sidebar.categories)


def test_build_sidebar_search_clears_active_entries(products) -> None:
    sidebar = build_sidebar(products, FilterState.search("mail"))

    assert sidebar.active_entries == []


def test_build_sidebar_country_entries_have_flags(products) -> None:
    sidebar = build_sidebar(products, FilterState())

    flags = {entry.label: entry.flag_url for entry in sidebar.countries}
    assert flags["France"] == "https://flagcdn.com/24x18/fr.png"
    assert flags["Atlantis"] == "https://flagcdn.com/24x18/eu.png"
    assert all(entry.flag_url is None for entry in sidebar.categories)


def test_build_sidebar_uses_injected_link_builder(products) -> None:
    sidebar = build_sidebar(products, FilterState(), link_for=lambda state: f"#{state.kind.value}:{state.value}")

    assert sidebar.countries[1].href == "#country:France"
    assert sidebar.categories[2].href == "#category:Email"


def test_query_link_encodes_values() -> None:
    assert query_link(FilterState.category("Search Engine")) == "/?category=Search+Engine"
    assert query_link(FilterState.country("Czech Republic")) == "/?country=Czech+Republic"
    assert query_link(FilterState.search("a&b")) == "/?q=a%26b"
