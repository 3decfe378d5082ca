"""Weather station observations from the ARSO per-station XML feeds."""
import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Union
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from arso.models.station import Postaja, StationFailure, StationScan
from arso.utils.privacy import obfuscate_station_id, station_lookup_path

logger = logging.getLogger(__name__)

LINK_SELECTOR = "td:nth-child(2) > a"

XML_SUFFIX = ".xml"
# Links containing these are media assets or the secondary language variant
EXCLUDED_MARKERS = ("media", "_si_")

ROOT_TAG = "data"
OBSERVATION_TAG = "metData"

# XML element -> (field, kind); optional fields stay None when absent
_FIELDS = {
    "domain_meteosiId": ("id", "str"),
    "domain_longTitle": ("title", "str"),
    "domain_lat": ("lat", "float"),
    "domain_lon": ("lon", "float"),
    "domain_altitude": ("altitude", "float"),
    "tsUpdated_RFC822": ("issued", "str"),
    "t": ("temp", "float"),
    "ff_val": ("wind", "float?"),
    "dd_icon": ("wind_direction", "str?"),
    "rh": ("rh", "float?"),
    "p": ("pressure", "float?"),
    "nn_shortText": ("sky", "str?"),
    "tsValid_issued_UTC": ("valid", "str"),
}


def is_station_document(href: str) -> bool:
    """True for links to a station's XML feed that should be fetched."""
    if not href.endswith(XML_SUFFIX):
        return False
    return not any(marker in href for marker in EXCLUDED_MARKERS)


def discover_links(html: Union[str, bytes]) -> List[str]:
    """Return hrefs of the station links on the index page, in page order."""
    soup = BeautifulSoup(html, "html.parser")
    return [a["href"] for a in soup.select(LINK_SELECTOR) if a.has_attr("href")]


def _coerce(text: Optional[str], kind: str):
    text = (text or "").strip()
    if kind.startswith("float"):
        try:
            return float(text)
        except ValueError:
            return None if kind.endswith("?") else 0.0
    if not text and kind.endswith("?"):
        return None
    return text


def parse_station(document: Union[str, bytes]) -> Postaja:
    """
    Decode one station XML document.

    The result carries the raw upstream identifier. Documents that are not
    well-formed, declare an unknown encoding, or whose root is not <data>,
    decode to an empty record; values that fail to coerce fall back to
    their zero value.
    """
    try:
        root = ET.fromstring(document)
    except (ET.ParseError, LookupError, ValueError) as e:
        logger.warning("Unparseable station document: %s", e)
        return Postaja()
    if root.tag != ROOT_TAG:
        return Postaja()
    observation = root.find(OBSERVATION_TAG)
    if observation is None:
        return Postaja()

    values = {}
    for tag, (field, kind) in _FIELDS.items():
        element = observation.find(tag)
        if element is None:
            continue
        value = _coerce(element.text, kind)
        if value is not None:
            values[field] = value
    return Postaja(**values)


def _failure(url: str, error: BaseException) -> StationFailure:
    return StationFailure(url=url, error=str(error) or type(error).__name__)


class StationService:
    """Scans the station index and fetches every linked station document."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        index_url: str,
        host: str,
        automated_marker: str = "observationAms",
        max_concurrency: int = 8,
    ):
        self.client = client
        self.index_url = index_url
        self.host = host
        self.automated_marker = automated_marker
        self.max_concurrency = max(1, max_concurrency)

    async def _fetch_station(
        self,
        href: str,
        semaphore: asyncio.Semaphore,
    ) -> Union[Postaja, StationFailure, None]:
        try:
            url = urljoin(self.host, href)
        except ValueError as e:
            logger.warning("Station link unresolvable: %s", e, extra={"href": href})
            return _failure(href, e)

        async with semaphore:
            try:
                resp = await self.client.get(url)
                resp.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning("Station fetch failed: %s", e, extra={"url": url})
                return _failure(url, e)

        station = parse_station(resp.content)
        if not station.title:
            logger.debug("Discarding station document without title", extra={"url": url})
            return None

        token = obfuscate_station_id(station.id)
        return station.model_copy(update={
            "id": token,
            "url": station_lookup_path(token),
            "auto": self.automated_marker in url,
        })

    async def scan(self) -> StationScan:
        """
        Fetch the index and every station document it links to.

        Index failure yields an empty scan. A failed station is recorded in
        ``failures`` and the remaining stations are still returned, in the
        order they were discovered.
        """
        try:
            resp = await self.client.get(self.index_url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Station index fetch failed: %s", e, extra={"url": self.index_url})
            return StationScan()

        hrefs = []
        for href in discover_links(resp.content):
            if not is_station_document(href):
                logger.info("Skip %s", href)
                continue
            hrefs.append(href)

        # Created per scan so it binds to the running loop
        semaphore = asyncio.Semaphore(self.max_concurrency)
        results = await asyncio.gather(
            *(self._fetch_station(href, semaphore) for href in hrefs),
            return_exceptions=True,
        )

        scan = StationScan()
        for href, result in zip(hrefs, results):
            if isinstance(result, Exception):
                logger.error("Station processing failed: %s", result, extra={"href": href})
                scan.failures.append(_failure(href, result))
            elif isinstance(result, BaseException):
                raise result
            elif isinstance(result, StationFailure):
                scan.failures.append(result)
            elif result is not None:
                scan.stations.append(result)

        logger.info(
            "Station scan finished",
            extra={"links": len(hrefs), "stations": len(scan.stations), "failures": len(scan.failures)},
        )
        return scan

    async def find(self, token: str) -> Optional[Postaja]:
        """Rescan all stations and return the one with the given opaque identifier."""
        scan = await self.scan()
        for station in scan.stations:
            if station.id == token:
                return station
        return None
