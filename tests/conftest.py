"""Shared fixtures for directory tests."""

import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from euro_alternatives.dataset import parse_products


def make_soup(html):
    """Helper to create a BeautifulSoup object from HTML string."""
    return BeautifulSoup(html, "html.parser")


# ---------------------------------------------------------------------------
# Sample dataset
# ---------------------------------------------------------------------------

SAMPLE_RECORDS = [
    {
        "id": "proton-mail",
        "name": "Proton Mail",
        "category": "Email",
        "country": "Switzerland",
        "alternativeTo": "Gmail",
        "description": "Encrypted email hosted in Switzerland.",
        "link": "https://proton.me/mail",
    },
    {
        "id": "qwant",
        "name": "Qwant",
        "category": "Search Engine",
        "country": "France",
        "alternativeTo": "Google Search",
        "description": "Privacy-focused search engine.",
        "link": "https://www.qwant.com",
    },
    {
        "id": "airbus",
        "name": "Airbus",
        "category": "Aerospace",
        "country": "France/Germany",
        "alternativeTo": "Boeing",
        "description": "Commercial aircraft built across Europe.",
        "link": "https://www.airbus.com",
    },
    {
        "id": "tuta",
        "name": "Tuta",
        "category": "Email",
        "country": "Germany",
        "alternativeTo": "Outlook",
        "description": "Encrypted mail and CALENDAR.",
        "link": "https://tuta.com",
    },
    {
        "id": "local-shop",
        "name": "Atlantis Apps",
        "category": "Productivity",
        "country": "Atlantis",
        "alternativeTo": "Notion",
        "description": "Workspace from a country with no map entry.",
        "link": "not a url",
    },
]


@pytest.fixture
def sample_records():
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def products(sample_records):
    return parse_products(sample_records)


@pytest.fixture
def data_file(tmp_path: Path, sample_records) -> Path:
    path = tmp_path / "data" / "alternatives.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path
