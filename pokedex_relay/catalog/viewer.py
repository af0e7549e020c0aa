"""
Client-side helpers for browsing the catalogue through the relay.

``RelayViewClient`` performs one request per navigation and reports
the outcome as a ``ViewState``: ``Loading`` before the request is
issued, then either ``Failed`` or ``Loaded``.  The remaining functions
turn a listing or a ``DetailRecord`` into display values (filtered
listings, capitalised names, type colours, metric measurements and the
sprite to show).
"""

from __future__ import annotations

import logging
import re
import urllib.parse
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .errors import UpstreamStatusError, UpstreamUnavailableError
from .pokeapi_service import http_get_json
from .schemas import DetailRecord, ErrorBody, ListingEntry, Sprites


logger = logging.getLogger(__name__)

T = TypeVar("T")

LISTING_ERROR = "Failed to load pokemon list. Please try again."
DETAIL_ERROR = "Failed to fetch Pokémon details"

DEFAULT_TYPE_COLOR = "#95A5A6"
TYPE_COLORS = {
    "fire": "#FF5733",
    "water": "#3498DB",
    "grass": "#27AE60",
    "electric": "#F1C40F",
    "psychic": "#E91E63",
    "ice": "#85C1E9",
    "dragon": "#8E44AD",
    "dark": "#34495E",
    "fairy": "#FF69B4",
    "fighting": "#E74C3C",
    "poison": "#9B59B6",
    "ground": "#D4AC0D",
    "flying": "#AED6F1",
    "bug": "#58D68D",
    "rock": "#85929E",
    "ghost": "#BB8FCE",
    "steel": "#85929E",
    "normal": DEFAULT_TYPE_COLOR,
}

_listing_adapter = TypeAdapter(List[ListingEntry])


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str
    # None when the relay could not be reached at all.
    status_code: Optional[int] = None


@dataclass(frozen=True)
class Loaded(Generic[T]):
    value: T


ViewState = Union[Loading, Failed, Loaded[T]]


class RelayViewClient:
    """Fetch catalogue data from a running relay."""

    def __init__(self, base_url: str = "http://localhost:5000", timeout: float = 5.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def initial_state(self) -> Loading:
        return Loading()

    def load_listing(self) -> Union[Failed, Loaded[List[ListingEntry]]]:
        try:
            data = http_get_json(f"{self.base_url}/api/pokemons", self.timeout)
            entries = _listing_adapter.validate_python(data)
        except UpstreamStatusError as exc:
            logger.error("Error fetching pokemon list: %s", exc)
            return Failed(_relay_message(exc, LISTING_ERROR), exc.status_code)
        except (UpstreamUnavailableError, ValueError) as exc:
            logger.error("Error fetching pokemon list: %s", exc)
            return Failed(LISTING_ERROR)
        return Loaded(entries)

    def load_detail(self, name: str) -> Union[Failed, Loaded[DetailRecord]]:
        url = f"{self.base_url}/api/pokemon/{urllib.parse.quote(name, safe='')}"
        try:
            detail = DetailRecord.model_validate(http_get_json(url, self.timeout))
        except UpstreamStatusError as exc:
            logger.error("Error fetching pokemon %s: %s", name, exc)
            return Failed(_relay_message(exc, DETAIL_ERROR), exc.status_code)
        except (UpstreamUnavailableError, ValueError) as exc:
            logger.error("Error fetching pokemon %s: %s", name, exc)
            return Failed(DETAIL_ERROR)
        return Loaded(detail)


def _relay_message(exc: UpstreamStatusError, fallback: str) -> str:
    """``message`` of the relay's error body, or ``fallback`` without one."""
    try:
        return ErrorBody.model_validate(exc.payload).message
    except ValidationError:
        return fallback


def filter_listings(entries: Iterable[ListingEntry], query: str) -> List[ListingEntry]:
    """Keep entries whose name contains ``query``, ignoring case.

    A blank query keeps everything.  Order is preserved.
    """
    needle = query.strip().lower()
    if not needle:
        return list(entries)
    return [entry for entry in entries if needle in entry.name.lower()]


def display_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def format_dex_number(pokemon_id: int) -> str:
    return f"#{pokemon_id:03d}"


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def format_stat_name(stat_name: str) -> str:
    """``special-attack`` -> ``Special Attack``."""
    return re.sub(r"\b\w", lambda m: m.group().upper(), stat_name.replace("-", " "))


# PokéAPI reports height in decimetres and weight in hectograms.
def height_meters(detail: DetailRecord) -> str:
    return f"{detail.height / 10:.1f} m"


def weight_kilograms(detail: DetailRecord) -> str:
    return f"{detail.weight / 10:.1f} kg"


def has_shiny(sprites: Sprites) -> bool:
    return bool(sprites.front_shiny)


def sprite_url(sprites: Sprites, shiny: bool = False) -> Optional[str]:
    """Sprite to display, or ``None`` when there is no artwork.

    Asking for shiny without one falls back to the default sprite.
    """
    if shiny and sprites.front_shiny:
        return sprites.front_shiny
    return sprites.front_default
