"""Weather station data models."""
from typing import List, Optional
from pydantic import BaseModel, Field


class Postaja(BaseModel):
    """Latest observation of one weather station, decoded from its XML feed."""

    id: str = Field("", alias="ID", description="Opaque station identifier")
    title: str = Field("", alias="Title", description="Station long title")
    lat: float = Field(0.0, alias="Lat")
    lon: float = Field(0.0, alias="Lon")
    altitude: float = Field(0.0, alias="Altitude", description="Metres above sea level")
    issued: str = Field("", alias="Issued", description="Update time (RFC 822)")
    temp: float = Field(0.0, alias="Temp", description="Air temperature in Celsius")
    wind: Optional[float] = Field(None, alias="Wind", description="Wind speed")
    wind_direction: Optional[str] = Field(None, alias="WindDirection")
    rh: Optional[float] = Field(None, alias="RH", description="Relative humidity")
    pressure: Optional[float] = Field(None, alias="Pressure")
    sky: Optional[str] = Field(None, alias="Sky", description="Short sky description")
    valid: str = Field("", alias="Valid", description="Observation validity time (UTC)")
    url: str = Field("", alias="URL", description="Lookup path for this station")
    auto: bool = Field(False, alias="Auto", description="Automated station")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "ID": "1c0b5b9a8a0f1dbf4ed0f4a2b2d1b6a1",
                "Title": "Ljubljana - Bežigrad",
                "Lat": 46.0655,
                "Lon": 14.5124,
                "Altitude": 299,
                "Issued": "Mon, 01 Jan 2024 10:30:00 CET",
                "Temp": 3.4,
                "Wind": 1.2,
                "WindDirection": "SW",
                "RH": 86,
                "Pressure": 1021,
                "Sky": "oblačno",
                "Valid": "01.01.2024 9:30 UTC",
                "URL": "/vreme/1c0b5b9a8a0f1dbf4ed0f4a2b2d1b6a1",
                "Auto": False,
            }
        }


class StationFailure(BaseModel):
    """A station document that could not be fetched."""

    url: str
    error: str


class StationScan(BaseModel):
    """Result of one pass over the station index."""

    stations: List[Postaja] = Field(default_factory=list)
    failures: List[StationFailure] = Field(default_factory=list)
