"""
Loading and fetching of the product dataset.

The dataset is a JSON array of product records. It is read whole and
never mutated; callers receive fresh lists of frozen ``Product`` objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import time
from typing import Callable, Iterable

import requests

from euro_alternatives.models import Product

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {"Accept": "application/json"}
MAX_RETRIES = 3
RETRY_BACKOFF = 2  # seconds, doubles each retry
REQUEST_TIMEOUT = 15


class DatasetError(ValueError):
    """Raised when a dataset cannot be fetched or does not validate."""


def load_products(path: Path) -> list[Product]:
    if not path.exists():
        logger.info(f"No dataset at {path}; starting with an empty catalogue")
        return []

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{path} is not valid JSON: {exc}") from exc

    products = parse_products(payload)
    logger.info(f"Loaded {len(products)} products from {path}")
    return products


def parse_products(payload: object) -> list[Product]:
    if not isinstance(payload, list):
        raise DatasetError("Dataset must be a JSON array of records")

    products: list[Product] = []
    seen_ids: set[str] = set()
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DatasetError(f"Record {index} is not an object")
        missing = [key for key in ("id", "name") if item.get(key) in (None, "")]
        if missing:
            raise DatasetError(f"Record {index} is missing {', '.join(missing)}")

        product = Product.from_dict(item)
        if product.id in seen_ids:
            raise DatasetError(f"Duplicate product id: {product.id}")
        seen_ids.add(product.id)
        products.append(product)
    return products


def save_products(products: Iterable[Product], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    records = [product.to_dict() for product in products]
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Saved {len(records)} products to {path}")


def fetch_products(
    url: str,
    retries: int = MAX_RETRIES,
    sleeper: Callable[[float], None] = time.sleep,
) -> list[Product]:
    """Download a dataset and validate it. Retries with backoff."""
    for attempt in range(retries):
        try:
            response = requests.get(url, headers=REQUEST_HEADERS, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            wait = RETRY_BACKOFF * (2**attempt)
            logger.warning(f"Attempt {attempt + 1}/{retries} failed for {url}: {exc}")
            if attempt < retries - 1:
                logger.info(f"Retrying in {wait}s...")
                sleeper(wait)
            continue
        return parse_products(payload)

    logger.error(f"All {retries} attempts failed for {url}")
    raise DatasetError(f"Could not fetch dataset from {url}")
