"""Main entry point for the rental listings site."""

import argparse
import json
import logging
import sys

from rental_listings.config import Settings
from rental_listings.data import DEMO_PROPERTIES, SITEMAP_CITIES
from rental_listings.db import ListingQueryService
from rental_listings.logging import configure_logging, get_logger
from rental_listings.models import FilterCriteria
from rental_listings.seo.sitemap import build_sitemap, render_sitemap_xml

logger = get_logger(__name__)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rental Listings - UK rental property demo site"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--serve",
        action="store_true",
        help="Start the web server",
    )
    mode.add_argument(
        "--stats",
        action="store_true",
        help="Print summary statistics as JSON",
    )
    mode.add_argument(
        "--list",
        action="store_true",
        help="Print listings matching the filter options as JSON",
    )
    mode.add_argument(
        "--show",
        metavar="ID",
        help="Print a single listing as JSON",
    )
    mode.add_argument(
        "--sitemap",
        action="store_true",
        help="Print sitemap.xml",
    )
    parser.add_argument("--city", help="With --list: city name (case-insensitive)")
    parser.add_argument("--bedrooms", type=_non_negative_int, help="With --list: minimum bedrooms")
    parser.add_argument("--bathrooms", type=_non_negative_int, help="With --list: minimum bathrooms")
    parser.add_argument("--max-price", type=int, help="With --list: maximum monthly rent")
    parser.add_argument(
        "--no-prerender",
        action="store_true",
        help="With --serve: skip rendering featured pages at startup",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    return parser


def run_query(args: argparse.Namespace, service: ListingQueryService, settings: Settings) -> int:
    """Run a one-shot query command. Returns the process exit code."""
    if args.stats:
        _print_json(service.get_stats().model_dump(mode="json"))
    elif args.show is not None:
        record = service.get_property(args.show)
        if record is None:
            print(f"Property not found: {args.show}", file=sys.stderr)
            return 1
        _print_json(record.model_dump(mode="json"))
    elif args.sitemap:
        entries = build_sitemap(settings.base_url, service.list_all_ids(), SITEMAP_CITIES)
        sys.stdout.write(render_sitemap_xml(entries))
    else:
        criteria = FilterCriteria(
            city=args.city,
            min_bedrooms=args.bedrooms,
            min_bathrooms=args.bathrooms,
            max_price=args.max_price,
        )
        _print_json([r.model_dump(mode="json") for r in service.list_properties(criteria)])
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    configure_logging(json_output=False, level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = Settings()
    except Exception as e:
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}", file=sys.stderr)
        print("Check the RENTAL_LISTINGS_* variables in your environment or .env file.", file=sys.stderr)
        sys.exit(1)

    if args.serve:
        import uvicorn

        from rental_listings.web.app import create_app

        app = create_app(
            settings,
            prerender=not args.no_prerender,
            log_level=logging.DEBUG if args.debug else logging.INFO,
        )
        logger.info(
            "starting_rental_listings",
            host=settings.web_host,
            port=settings.web_port,
            simulate_latency=settings.simulate_latency,
        )
        uvicorn.run(app, host=settings.web_host, port=settings.web_port, log_level="info")
        return

    service = ListingQueryService(DEMO_PROPERTIES, featured_ids=settings.get_featured_ids())
    sys.exit(run_query(args, service, settings))


if __name__ == "__main__":
    main()
