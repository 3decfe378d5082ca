"""Tests for earthquake table parsing and retrieval."""
import pytest
from pydantic import ValidationError

from arso.services.earthquakes import EarthquakeService, parse_earthquakes
from tests.upstream import EARTHQUAKE_URL, earthquake_page


def test_parse_example_row():
    """A positive magnitude row is published with its four companion fields."""
    html = earthquake_page([["2024-01-01", "46.1", "14.5", "2.3", "III", "Ljubljana"]])

    potresi = parse_earthquakes(html)

    assert len(potresi) == 1
    data = potresi[0].model_dump(by_alias=True)
    assert data == {
        "Magnituda": 2.3,
        "Lat": 46.1,
        "Lon": 14.5,
        "Datum": "2024-01-01",
        "Lokacija": "Ljubljana",
    }
    assert list(data.keys()) == ["Magnituda", "Lat", "Lon", "Datum", "Lokacija"]


@pytest.mark.parametrize("magnitude", ["0", "0.0", "-1.2", "abc", "", "nan"])
def test_rows_without_positive_magnitude_are_skipped(magnitude):
    html = earthquake_page([
        ["2024-01-01", "46.1", "14.5", magnitude, "", "Kranj"],
        ["2024-01-02", "45.9", "15.0", "1.1", "", "Novo mesto"],
    ])

    potresi = parse_earthquakes(html)

    assert [p.location for p in potresi] == ["Novo mesto"]


def test_document_order_preserved():
    html = earthquake_page([
        ["2024-01-03 10:00", "46.3", "13.6", "1.9", "", "Bovec"],
        ["2024-01-02 09:00", "45.5", "14.1", "0.8", "", "Ilirska Bistrica"],
        ["2024-01-01 08:00", "46.5", "15.6", "3.0", "IV", "Maribor"],
    ])

    potresi = parse_earthquakes(html)

    assert [p.location for p in potresi] == ["Bovec", "Ilirska Bistrica", "Maribor"]
    assert [p.magnitude for p in potresi] == [1.9, 0.8, 3.0]


def test_unparseable_coordinates_default_to_zero():
    html = earthquake_page([["2024-01-01", "n/a", "", "1.5", "", "Celje"]])

    potres = parse_earthquakes(html)[0]

    assert potres.lat == 0.0
    assert potres.lon == 0.0
    assert potres.location == "Celje"


def test_rows_outside_content_table_are_ignored():
    html = """<html><body>
    <table><tr><td>2024-01-01</td><td>46</td><td>14</td><td>5.0</td><td></td><td>Elsewhere</td></tr></table>
    </body></html>"""

    assert parse_earthquakes(html) == []


def test_records_are_immutable():
    potres = parse_earthquakes(earthquake_page([["d", "46", "14", "1.0", "", "Bled"]]))[0]

    with pytest.raises(ValidationError):
        potres.magnitude = 2.0


@pytest.mark.asyncio
async def test_fetch_parses_upstream_page(upstream, http_client):
    upstream.add(EARTHQUAKE_URL, earthquake_page([["2024-01-01", "46.1", "14.5", "2.3", "", "Ljubljana"]]))
    service = EarthquakeService(http_client, EARTHQUAKE_URL)

    potresi = await service.fetch()

    assert [p.location for p in potresi] == ["Ljubljana"]
    assert upstream.requested == [EARTHQUAKE_URL]


@pytest.mark.asyncio
async def test_fetch_transport_error_returns_empty(upstream, http_client):
    upstream.fail(EARTHQUAKE_URL)
    service = EarthquakeService(http_client, EARTHQUAKE_URL)

    assert await service.fetch() == []


@pytest.mark.asyncio
async def test_fetch_server_error_returns_empty(upstream, http_client):
    upstream.add(EARTHQUAKE_URL, "oops", status=503)
    service = EarthquakeService(http_client, EARTHQUAKE_URL)

    assert await service.fetch() == []
