from .privacy import obfuscate_station_id, station_lookup_path
from .xml import XMLResponse, model_to_element, render_xml

__all__ = [
    "obfuscate_station_id",
    "station_lookup_path",
    "XMLResponse",
    "model_to_element",
    "render_xml",
]
