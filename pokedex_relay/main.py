# pokedex_relay/main.py
"""
Main entrypoint for the Pokédex relay.

``create_app`` assembles the FastAPI application from an explicit
``Settings`` object: logging, CORS, response headers, the error
handler and the catalogue routes.  A module-level ``app`` built from
the environment is provided for ASGI servers, e.g.::

    uvicorn pokedex_relay.main:app
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .catalog.errors import RelayError
from .catalog.pokeapi_service import PokeApiService
from .catalog.schemas import ErrorBody
from .config import Settings
from .logging_config import setup_logging
from .middleware import SecurityHeadersMiddleware


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[PokeApiService] = None,
) -> FastAPI:
    """Create and configure the relay application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this instance.  Read from the environment
        when omitted.
    service : Optional[PokeApiService]
        PokéAPI client used by the routes.  Built from ``settings``
        when omitted.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    if settings is None:
        settings = Settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description=(
            "Read-only relay in front of PokéAPI. Validates input, forwards "
            "requests and normalises upstream failures."
        ),
        version=settings.api_version,
    )
    app.state.settings = settings
    app.state.pokeapi_service = service or PokeApiService(
        settings.pokeapi_base_url, settings.upstream_timeout_seconds
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    # Added last so it wraps CORS preflight responses too.
    app.add_middleware(SecurityHeadersMiddleware, allowed_origin=settings.client_url)

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
        body = ErrorBody(message=exc.message, error=exc.error)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "Pokédex relay live"}

    app.include_router(catalog_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
