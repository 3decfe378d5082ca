"""Earthquake list scraped from the ARSO recent earthquakes table."""
import logging
import math
from typing import List, Optional, Union

import httpx
from bs4 import BeautifulSoup

from arso.models.earthquake import Potres

logger = logging.getLogger(__name__)

ROW_SELECTOR = "#glavna td.vsebina table tr"

# 1-based cell positions within a table row
DATE_COLUMN = 1
LAT_COLUMN = 2
LON_COLUMN = 3
MAGNITUDE_COLUMN = 4
LOCATION_COLUMN = 6


def _cell_text(row, column: int) -> str:
    cell = row.select_one(f"td:nth-child({column})")
    return cell.get_text().strip() if cell is not None else ""


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_earthquakes(html: Union[str, bytes]) -> List[Potres]:
    """
    Extract earthquake records from the ARSO table page.

    Rows whose magnitude cell is not a number, or is not strictly positive,
    are skipped (header rows fall out this way too). Coordinates that do not
    parse are reported as 0.0. Document order is preserved.
    """
    soup = BeautifulSoup(html, "html.parser")
    potresi = []
    for row in soup.select(ROW_SELECTOR):
        magnitude = _parse_float(_cell_text(row, MAGNITUDE_COLUMN))
        if magnitude is None or not magnitude > 0:
            continue
        potresi.append(Potres(
            magnitude=magnitude,
            lat=_parse_float(_cell_text(row, LAT_COLUMN)) or 0.0,
            lon=_parse_float(_cell_text(row, LON_COLUMN)) or 0.0,
            date=_cell_text(row, DATE_COLUMN),
            location=_cell_text(row, LOCATION_COLUMN),
        ))
    return potresi


class EarthquakeService:
    """Fetches and parses the earthquake page."""

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url

    async def fetch(self) -> List[Potres]:
        """
        Return the currently published earthquakes.

        An upstream failure degrades to an empty list; the error is logged.
        """
        try:
            resp = await self.client.get(self.url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Earthquake page fetch failed: %s", e, extra={"url": self.url})
            return []

        potresi = parse_earthquakes(resp.content)
        logger.debug("Parsed %d earthquakes", len(potresi))
        return potresi
