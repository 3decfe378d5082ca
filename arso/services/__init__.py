from .earthquakes import EarthquakeService, parse_earthquakes
from .stations import StationService, discover_links, is_station_document, parse_station
from .http import build_client

__all__ = [
    "EarthquakeService",
    "parse_earthquakes",
    "StationService",
    "discover_links",
    "is_station_document",
    "parse_station",
    "build_client",
]
