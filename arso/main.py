"""FastAPI main application."""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import httpx
from fastapi import FastAPI, Response
from fastapi.responses import JSONResponse

from arso.config import Settings, settings as default_settings
from arso.logging_config import configure_logging
from arso.models import Postaja, Potres, StatusResponse
from arso.services import EarthquakeService, StationService, build_client
from arso.static import ListingStaticFiles
from arso.storage import ResponseCache, ResponseCacheMiddleware
from arso.utils import XMLResponse, render_xml

logger = logging.getLogger(__name__)

# Routes served through the response cache
CACHED_PREFIXES = ("/potresi.", "/postaje.", "/vreme/")
FAILED_STATIONS_HEADER = "X-Failed-Stations"


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
    cache: Optional[ResponseCache] = None,
) -> FastAPI:
    """
    Build the application.

    The HTTP client and response cache are created from ``settings`` unless
    supplied. A client passed in is left open on shutdown; one built here is
    closed with the app.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)

    owns_client = client is None
    if client is None:
        client = build_client(settings)
    if cache is None:
        cache = ResponseCache(ttl=settings.cache_ttl_seconds, sweep_interval=settings.cache_sweep_seconds)

    earthquake_service = EarthquakeService(client, settings.earthquake_url)
    station_service = StationService(
        client,
        index_url=settings.station_index_url,
        host=settings.station_host,
        automated_marker=settings.automated_marker,
        max_concurrency=settings.max_concurrency,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving on port %s", settings.port, extra={"static_dir": settings.static_dir})
        yield
        if owns_client:
            await client.aclose()

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.cache = cache
    app.state.earthquakes = earthquake_service
    app.state.stations = station_service

    app.add_middleware(ResponseCacheMiddleware, cache=cache, prefixes=CACHED_PREFIXES)

    @app.get("/healthz", tags=["health"])
    async def health():
        """Liveness check, never cached."""
        return {"status": "ok"}

    @app.get("/potresi.json", response_model=List[Potres], tags=["potresi"])
    async def potresi_json():
        """Recent earthquakes as JSON."""
        return await earthquake_service.fetch()

    @app.get("/potresi.xml", response_class=XMLResponse, tags=["potresi"])
    async def potresi_xml():
        """Recent earthquakes as XML."""
        potresi = await earthquake_service.fetch()
        return XMLResponse(content=render_xml("Potresi", potresi))

    @app.get(
        "/postaje.json",
        response_model=List[Postaja],
        response_model_exclude_none=True,
        tags=["postaje"],
    )
    async def postaje_json(response: Response):
        """
        Latest observation of every station.

        Stations whose document could not be fetched are left out; their
        number is reported in the X-Failed-Stations header.
        """
        scan = await station_service.scan()
        response.headers[FAILED_STATIONS_HEADER] = str(len(scan.failures))
        return scan.stations

    @app.get("/postaje.xml", response_class=XMLResponse, tags=["postaje"])
    async def postaje_xml():
        """Latest observation of every station as XML."""
        scan = await station_service.scan()
        return XMLResponse(
            content=render_xml("Postaje", scan.stations),
            headers={FAILED_STATIONS_HEADER: str(len(scan.failures))},
        )

    @app.get(
        "/vreme/{postaja}",
        response_model=Postaja,
        response_model_exclude_none=True,
        responses={404: {"model": StatusResponse}},
        tags=["postaje"],
    )
    async def vreme(postaja: str):
        """Look up one station by its opaque identifier."""
        station = await station_service.find(postaja)
        if station is None:
            return JSONResponse(
                status_code=404,
                content=StatusResponse(status=f"Not found: {postaja}").model_dump(by_alias=True),
            )
        return station

    # Mounted last so the API routes take precedence
    app.mount(
        "/",
        ListingStaticFiles(
            directory=settings.static_dir,
            html=True,
            check_dir=False,
            listing=settings.static_listing,
        ),
        name="static",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
