"""
Pydantic schema definitions for the Pokémon catalogue.

``ListingEntry`` and ``DetailRecord`` mirror the two records returned
by PokéAPI.  The relay uses them to check that an upstream payload has
the expected shape; the JSON sent back to clients is always the
upstream body itself, so fields not declared here (PokéAPI returns
many) are simply ignored during validation and still reach the client.
``ErrorBody`` is the relay's own failure payload.
"""

from typing import List, Optional

from pydantic import BaseModel


class NamedResource(BaseModel):
    """A ``{name, url}`` reference to another PokéAPI resource."""

    name: str
    url: str


class ListingEntry(NamedResource):
    """One entry of the paginated ``/pokemon`` listing."""


class AbilitySlot(BaseModel):
    ability: NamedResource
    is_hidden: bool


class TypeSlot(BaseModel):
    type: NamedResource


class StatName(BaseModel):
    name: str


class StatSlot(BaseModel):
    base_stat: int
    stat: StatName


class Sprites(BaseModel):
    """Sprite URLs for a Pokémon.

    Any sprite can be missing (or ``null``): PokéAPI has no artwork for
    some forms, and shiny or back sprites are often absent.  Callers must check
    them before use.
    """

    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    back_default: Optional[str] = None


class DetailRecord(BaseModel):
    """Per-Pokémon detail record as returned by ``/pokemon/{name}``.

    ``height`` is expressed in decimetres and ``weight`` in hectograms,
    exactly as PokéAPI reports them.
    """

    id: int
    name: str
    height: int
    weight: int
    abilities: List[AbilitySlot]
    types: List[TypeSlot]
    stats: List[StatSlot]
    sprites: Sprites


class ErrorBody(BaseModel):
    """Failure payload returned by every relay endpoint."""

    message: str
    error: str
