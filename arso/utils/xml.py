"""XML rendering of record lists."""
import xml.etree.ElementTree as ET
from typing import Any, Iterable

from pydantic import BaseModel
from starlette.responses import Response


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def model_to_element(record: BaseModel, tag: str = None) -> ET.Element:
    """
    Build an element for one record.

    Child element names are the record's public (aliased) field names.
    Fields that are None are left out, mirroring the JSON output.
    """
    element = ET.Element(tag or type(record).__name__)
    for name, value in record.model_dump(by_alias=True, exclude_none=True).items():
        child = ET.SubElement(element, name)
        child.text = _text(value)
    return element


def render_xml(root_tag: str, records: Iterable[BaseModel]) -> bytes:
    """Render records as children of a single root element."""
    root = ET.Element(root_tag)
    for record in records:
        root.append(model_to_element(record))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


class XMLResponse(Response):
    media_type = "application/xml"
