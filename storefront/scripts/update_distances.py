"""
Refresh road distances in storefront/data/cities.py from the Google Distance
Matrix API.

Requires GOOGLE_MAPS_API_KEY (environment or .env) with the Distance Matrix
API enabled. Cities the API cannot answer for keep their previous distance.

Examples:
  update-distances
  update-distances --dry-run
  update-distances --city Nakuru --city "Murang'a"
  python -m storefront.scripts.update_distances --origin "Imaara Mall, Nairobi, Kenya"
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import httpx

from storefront.core.config import settings
from storefront.core.logging_config import configure_logging
from storefront.data.cities import KENYAN_CITIES
from storefront.services.distance_matrix import DistanceMatrixClient
from storefront.services.distance_refresh import (
    TABLE_MODULE_PATH,
    RefreshResult,
    apply_refresh,
    merge_targets,
    refresh_table,
    write_table_module,
)

logger = logging.getLogger(__name__)


async def run_refresh(
    api_key: str,
    origin: str,
    names: Optional[Sequence[str]] = None,
    delay: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RefreshResult:
    targets = merge_targets(KENYAN_CITIES, names)

    logger.info(f"Origin: {origin}")
    logger.info(f"Cities: {len(targets)}")
    logger.info("─" * 50)

    async with DistanceMatrixClient(api_key, origin=origin, transport=transport) as client:
        result = await refresh_table(targets, client.road_distance_km, delay=delay)

    logger.info("─" * 50)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Refresh shipping distances from the Distance Matrix API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--origin",
        default=settings.ORIGIN_ADDRESS,
        help="Address all distances are measured from"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=TABLE_MODULE_PATH,
        help="Table module to rewrite"
    )
    parser.add_argument(
        "--city",
        action="append",
        dest="cities",
        metavar="NAME",
        help="Only refresh this city (repeatable); unknown names are added"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report distances without writing the table"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    api_key = settings.GOOGLE_MAPS_API_KEY
    if not api_key:
        logger.error("GOOGLE_MAPS_API_KEY is not set")
        return 1

    result = asyncio.run(run_refresh(api_key, args.origin, args.cities))
    table = apply_refresh(KENYAN_CITIES, result.cities)

    if args.dry_run:
        logger.info(f"Dry run: {len(result.updated)} updated, {len(result.degraded)} kept, nothing written")
        return 0

    write_table_module(table, args.output, origin=args.origin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
