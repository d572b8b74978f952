from argparse import ArgumentParser
import logging
from pathlib import Path

import uvicorn

from euro_alternatives.config import BASE_DIR, Settings, load_env_file
from euro_alternatives.dataset import DatasetError, fetch_products, save_products
from euro_alternatives.site_builder import build_static_site

logger = logging.getLogger("euro_alternatives")


def build_site(data_file: Path, site_dir: Path) -> list[Path]:
    return build_static_site(data_file, site_dir)


def fetch_data(url: str, data_file: Path) -> int:
    products = fetch_products(url)
    save_products(products, data_file)
    return len(products)


def serve(host: str, port: int) -> None:
    uvicorn.run("euro_alternatives.web_app:app", host=host, port=port)


def main(argv: list[str] | None = None) -> int:
    load_env_file(BASE_DIR)
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = ArgumentParser(description="European alternatives directory CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build-site", help="Render the static site from the dataset")
    build.add_argument("--data-file", type=Path, default=settings.data_file)
    build.add_argument("--site-dir", type=Path, default=settings.site_dir)

    fetch = sub.add_parser("fetch-data", help="Download, validate and save a dataset")
    fetch.add_argument(
        "--url",
        default=settings.dataset_url,
        required=not settings.dataset_url,
        help="Dataset URL (defaults to EUROALT_DATASET_URL)",
    )
    fetch.add_argument("--data-file", type=Path, default=settings.data_file)

    run = sub.add_parser("serve", help="Run the web app")
    run.add_argument("--host", default="127.0.0.1")
    run.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    try:
        if args.command == "build-site":
            written = build_site(args.data_file, args.site_dir)
            print(f"Site built at {args.site_dir / 'index.html'} ({len(written)} files)")
            return 0
        if args.command == "fetch-data":
            count = fetch_data(args.url, args.data_file)
            print(f"Saved {count} alternatives to {args.data_file}")
            return 0
        if args.command == "serve":
            serve(args.host, args.port)
            return 0
    except DatasetError as exc:
        logger.error(f"Dataset error: {exc}")
        return 1
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
