"""Earthquake data models."""
from pydantic import BaseModel, Field


class Potres(BaseModel):
    """A single reported seismic event, as listed on the ARSO earthquake page."""

    magnitude: float = Field(..., alias="Magnituda", gt=0, description="Local magnitude")
    lat: float = Field(0.0, alias="Lat", description="Epicentre latitude")
    lon: float = Field(0.0, alias="Lon", description="Epicentre longitude")
    date: str = Field("", alias="Datum", description="Date and time as published")
    location: str = Field("", alias="Lokacija", description="Nearest place name")

    class Config:
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "Magnituda": 2.3,
                "Lat": 46.1,
                "Lon": 14.5,
                "Datum": "2024-01-01",
                "Lokacija": "Ljubljana",
            }
        }
