"""Refresh the reference table of road distances.

Entries are updated one by one: a city the distance service answers for gets
its new distance, a city it fails on keeps the distance it already had. The
resulting table is always complete and in the same order as the input.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Sequence

from storefront.core.config import settings
from storefront.schemas.shipping import CityDistance

logger = logging.getLogger(__name__)

TABLE_MODULE_PATH = Path(__file__).resolve().parent.parent / "data" / "cities.py"

DistanceLookup = Callable[[str], Awaitable[Optional[int]]]


@dataclass
class RefreshResult:
    cities: List[CityDistance] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    degraded: List[str] = field(default_factory=list)


def merge_targets(
    current: Sequence[CityDistance],
    names: Optional[Sequence[str]] = None,
) -> List[CityDistance]:
    """Entries to refresh: the whole table, or just the named cities.

    A name missing from the table becomes a new entry seeded with the
    default distance, so a failed lookup still leaves a usable value.
    """
    if not names:
        return list(current)

    by_name = {city.name.lower(): city for city in current}
    targets = []
    seen = set()
    for name in names:
        name = name.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        targets.append(
            by_name.get(name.lower())
            or CityDistance(name=name, distance_km=settings.DEFAULT_DISTANCE_KM)
        )
    return targets


async def refresh_table(
    cities: Sequence[CityDistance],
    lookup: DistanceLookup,
    delay: Optional[float] = None,
) -> RefreshResult:
    if delay is None:
        delay = settings.REFRESH_DELAY_MS / 1000

    result = RefreshResult()
    for index, city in enumerate(cities):
        km = await lookup(city.name)
        if km is not None:
            logger.info(f"  ✓  {city.name:<20} {km} km")
            result.cities.append(CityDistance(name=city.name, distance_km=km))
            result.updated.append(city.name)
        else:
            logger.info(f"  ~  {city.name:<20} {city.distance_km} km  (kept existing)")
            result.cities.append(city)
            result.degraded.append(city.name)

        if delay and index < len(cities) - 1:
            await asyncio.sleep(delay)

    if result.degraded:
        logger.warning(
            f"{len(result.degraded)} city/cities kept previous distances: {', '.join(result.degraded)}"
        )
    return result


def apply_refresh(current: Sequence[CityDistance], refreshed: Sequence[CityDistance]) -> List[CityDistance]:
    """Overlay refreshed entries on the full table; new cities go at the end."""
    updates = {city.name.lower(): city for city in refreshed}
    table = [updates.pop(city.name.lower(), city) for city in current]
    table.extend(city for city in refreshed if city.name.lower() in updates)
    return table


def render_table_module(cities: Sequence[CityDistance], origin: Optional[str] = None) -> str:
    origin = origin or settings.ORIGIN_ADDRESS
    lines = [
        '"""',
        "Road distances from the origin (km).",
        "",
        f"Measured from: {origin}",
        "Regenerated by `update-distances`; edit by hand only to add or rename cities.",
        '"""',
        "",
        "from storefront.schemas.shipping import CityDistance",
        "",
        "KENYAN_CITIES = (",
    ]
    lines.extend(
        f"    CityDistance(name={city.name!r}, distance_km={city.distance_km}),"
        for city in cities
    )
    lines.append(")")
    return "\n".join(lines) + "\n"


def write_table_module(
    cities: Sequence[CityDistance],
    path: Path = TABLE_MODULE_PATH,
    origin: Optional[str] = None,
) -> Path:
    path = Path(path)
    path.write_text(render_table_module(cities, origin), encoding="utf-8")
    logger.info(f"{path} updated with {len(cities)} cities")
    return path
