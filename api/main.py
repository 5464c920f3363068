"""
FastAPI application for the Crime Data Proxy API.

Forwards requests to the Brottsplatskartan events API and relays the
(optionally reshaped) response. Auto-generated OpenAPI documentation is
served at /api-docs.

Success responses are JSON; error responses are plain text.
"""

from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from models import CrimeEvent, first_event, headlines
from sources.crime.providers.base import CrimeDataProvider
from sources.crime.providers.brottsplatskartan_provider import BrottsplatskartanProvider
from utils import log
from utils.session import RequestSession

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

CITY_REQUIRED = "City query parameter is required"
CRIME_DATA_ERROR = "An error occurred while fetching crime data."
CRIME_LOCATIONS_ERROR = "An error occurred while fetching crime locations data."

TEXT_400 = {400: {"description": "Missing city query parameter", "content": {"text/plain": {}}}}
TEXT_500 = {500: {"description": "Server error while fetching crime data.", "content": {"text/plain": {}}}}

# city is read from request.query_params; missing or empty is a plain-text 400
CITY_PARAMETER = {
    "parameters": [{
        "in": "query",
        "name": "city",
        "required": True,
        "schema": {"type": "string"},
        "description": "The name of the city to search crimes for",
    }]
}

router = APIRouter()


def get_provider(request: Request) -> CrimeDataProvider:
    return request.app.state.provider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ----------------------------------------------------------------
# Fixed-location Endpoints
# ----------------------------------------------------------------

@router.get(
    "/crime",
    response_model=List[CrimeEvent],
    responses=TEXT_500,
    tags=["Crimes"],
    summary="Retrieve a list of crimes",
)
def get_crimes(
    provider: CrimeDataProvider = Depends(get_provider),
    cfg: Settings = Depends(get_settings),
):
    """A list of recent crimes from the default location (Helsingborg)."""
    result = provider.get_events(cfg.DEFAULT_LOCATION, cfg.RESULT_LIMIT)
    if not result.ok:
        return PlainTextResponse(CRIME_DATA_ERROR, status_code=500)

    logger.info(f"/crime: {len(result.events)} events for {cfg.DEFAULT_LOCATION}")
    return JSONResponse(result.events)


@router.get(
    "/crimes/locations",
    response_model=List[Optional[str]],
    responses=TEXT_500,
    tags=["Crimes"],
    summary="Retrieve crime headlines",
)
def get_crime_headlines(
    provider: CrimeDataProvider = Depends(get_provider),
    cfg: Settings = Depends(get_settings),
):
    """Returns an array of crime headlines from the default location, in upstream order."""
    result = provider.get_events(cfg.DEFAULT_LOCATION, cfg.RESULT_LIMIT)
    if not result.ok:
        return PlainTextResponse(CRIME_LOCATIONS_ERROR, status_code=500)

    titles = headlines(result.events)
    logger.info(f"/crimes/locations: {len(titles)} headlines: {titles}")
    return JSONResponse(titles)


# ----------------------------------------------------------------
# City Endpoints
# ----------------------------------------------------------------

@router.get(
    "/crimes/search",
    response_model=List[CrimeEvent],
    responses={**TEXT_400, **TEXT_500},
    openapi_extra=CITY_PARAMETER,
    tags=["Crimes"],
    summary="Get crimes by city",
)
def search_crimes(
    request: Request,
    provider: CrimeDataProvider = Depends(get_provider),
    cfg: Settings = Depends(get_settings),
):
    """
    Returns a list of crime events for the specified city.

    - **city**: City name (required), e.g. `malmo`
    """
    city = request.query_params.get("city")
    if not city:
        logger.warning("/crimes/search: missing city parameter")
        return PlainTextResponse(CITY_REQUIRED, status_code=400)

    result = provider.get_events(city, cfg.RESULT_LIMIT)
    if not result.ok:
        return PlainTextResponse(CRIME_DATA_ERROR, status_code=500)

    logger.info(f"/crimes/search: {len(result.events)} events for {city}")
    return JSONResponse(result.events)


@router.get(
    "/crimes/latest",
    response_model=Optional[CrimeEvent],
    responses={**TEXT_400, **TEXT_500},
    openapi_extra=CITY_PARAMETER,
    tags=["Crimes"],
    summary="Get latest crime by city",
)
def latest_crime(
    request: Request,
    provider: CrimeDataProvider = Depends(get_provider),
    cfg: Settings = Depends(get_settings),
):
    """
    Returns the most recent crime event for the specified city.

    The body is a single object, or `null` when the upstream has no events.
    """
    city = request.query_params.get("city")
    if not city:
        logger.warning("/crimes/latest: missing city parameter")
        return PlainTextResponse(CITY_REQUIRED, status_code=400)

    result = provider.get_events(city, cfg.RESULT_LIMIT)
    if not result.ok:
        return PlainTextResponse(CRIME_DATA_ERROR, status_code=500)

    logger.info(f"/crimes/latest: {len(result.events)} events for {city}, returning first")
    return JSONResponse(first_event(result.events))


# ----------------------------------------------------------------
# Application
# ----------------------------------------------------------------

def create_app(settings: Optional[Settings] = None, provider: Optional[CrimeDataProvider] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Server configuration (defaults to api.config.settings)
        provider: Upstream provider (defaults to Brottsplatskartan)

    Returns:
        Configured FastAPI app
    """
    cfg = settings or default_settings
    if provider is None:
        provider = BrottsplatskartanProvider(
            base_url=cfg.UPSTREAM_BASE_URL,
            session=RequestSession(timeout=cfg.UPSTREAM_TIMEOUT),
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.provider.close()
        logger.info("Upstream session closed")

    app = FastAPI(
        title=cfg.API_TITLE,
        description=cfg.API_DESCRIPTION,
        version=cfg.API_VERSION,
        docs_url=cfg.DOCS_URL,
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = cfg
    app.state.provider = provider
    app.include_router(router)
    return app


def serve(settings: Optional[Settings] = None):
    """Start the server on the configured host and fixed port."""
    import uvicorn

    cfg = settings or default_settings
    log.setup_logging(cfg.LOG_LEVEL)
    log.banner(cfg.API_TITLE, [
        ("Listening", f"http://{cfg.HOST}:{cfg.PORT}"),
        ("Docs", cfg.DOCS_URL),
        ("Upstream", cfg.UPSTREAM_BASE_URL),
    ])
    uvicorn.run(
        create_app(cfg),
        host=cfg.HOST,
        port=cfg.PORT,
        log_level=cfg.LOG_LEVEL.lower(),
    )


app = create_app()


if __name__ == "__main__":
    serve()
