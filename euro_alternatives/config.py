from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_FILE = BASE_DIR / "data" / "alternatives.json"
DEFAULT_SITE_DIR = BASE_DIR / "site"
TEMPLATE_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

ENV_PREFIX = "EUROALT_"
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file(base_dir: Path, filename: str = ".env") -> None:
    """Export the ``EUROALT_*`` lines of a local .env file. Variables already set win."""
    env_path = base_dir / filename
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().removeprefix("export ").partition("=")
        key = key.strip()
        if sep and key.startswith(ENV_PREFIX):
            os.environ.setdefault(key, value.strip().strip("\"'"))


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    # getLevelName maps known names to their int value
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


@dataclass(slots=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    site_dir: Path = DEFAULT_SITE_DIR
    dataset_url: str = ""
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        data_file = os.getenv(f"{ENV_PREFIX}DATA_FILE", "").strip()
        site_dir = os.getenv(f"{ENV_PREFIX}SITE_DIR", "").strip()
        return cls(
            data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
            site_dir=Path(site_dir) if site_dir else DEFAULT_SITE_DIR,
            dataset_url=os.getenv(f"{ENV_PREFIX}DATASET_URL", "").strip(),
            log_level=_log_level(os.getenv(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )
