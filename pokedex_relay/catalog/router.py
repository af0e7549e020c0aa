"""
Route definitions for the Pokémon catalogue.

Endpoints under /api:
- GET  /pokemons        : first page (100 entries) of the PokéAPI listing
- GET  /pokemon/{name}  : detail record for one Pokémon

Successful responses are the upstream JSON, untouched.  Every failure
is turned into a ``RelayError`` here, at the handler boundary, and
logged; clients only ever see the categorised ``{message, error}``
body rendered by the handler registered in ``main.create_app``.
"""

from __future__ import annotations

import logging
import re
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .errors import (
    InternalError,
    InvalidInputError,
    NotFoundError,
    TransportError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from .pokeapi_service import PokeApiService
from .schemas import DetailRecord, ErrorBody, ListingEntry


logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[a-zA-Z0-9-]+")
NAME_MAX_LENGTH = 50

_ERROR_RESPONSES = {
    502: {"model": ErrorBody},
    503: {"model": ErrorBody},
    500: {"model": ErrorBody},
}

router = APIRouter(prefix="/api", tags=["pokemon"])


def is_valid_pokemon_name(name: str) -> bool:
    """Letters, digits and hyphens only, 1 to 50 characters."""
    return 0 < len(name) <= NAME_MAX_LENGTH and NAME_PATTERN.fullmatch(name) is not None


def normalize_pokemon_name(raw: str) -> str:
    """Lower-case and trim ``raw``, then validate it.

    Raises ``InvalidInputError`` when the normalised name is rejected.
    """
    name = raw.lower().strip()
    if not is_valid_pokemon_name(name):
        raise InvalidInputError()
    return name


def get_pokeapi_service(request: Request) -> PokeApiService:
    return request.app.state.pokeapi_service


@router.get(
    "/pokemons",
    response_model=List[ListingEntry],
    responses=_ERROR_RESPONSES,
)
def list_pokemons(service: PokeApiService = Depends(get_pokeapi_service)) -> JSONResponse:
    try:
        response = JSONResponse(content=service.list_pokemon())
    except UpstreamStatusError as exc:
        logger.error("Error fetching pokemon list: %s", exc)
        raise UpstreamError() from exc
    except UpstreamUnavailableError as exc:
        logger.error("Error fetching pokemon list: %s", exc)
        raise TransportError() from exc
    except Exception as exc:
        logger.exception("Unexpected error fetching pokemon list")
        raise InternalError() from exc
    return response


@router.get(
    "/pokemon/{name}",
    response_model=DetailRecord,
    responses={400: {"model": ErrorBody}, 404: {"model": ErrorBody}, **_ERROR_RESPONSES},
)
def get_pokemon(
    name: str,
    service: PokeApiService = Depends(get_pokeapi_service),
) -> JSONResponse:
    try:
        pokemon_name = normalize_pokemon_name(name)
    except InvalidInputError:
        logger.warning("Rejected pokemon name %r", name)
        raise

    try:
        response = JSONResponse(content=service.get_pokemon(pokemon_name))
    except UpstreamStatusError as exc:
        logger.error("Error fetching pokemon %s: %s", pokemon_name, exc)
        if exc.status_code == 404:
            raise NotFoundError(pokemon_name) from exc
        raise UpstreamError() from exc
    except UpstreamUnavailableError as exc:
        logger.error("Error fetching pokemon %s: %s", pokemon_name, exc)
        raise TransportError() from exc
    except Exception as exc:
        logger.exception("Unexpected error fetching pokemon %s", pokemon_name)
        raise InternalError() from exc
    return response
