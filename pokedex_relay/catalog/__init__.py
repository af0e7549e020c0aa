"""
Catalog package for the Pokédex relay.

This package contains the schemas, the PokéAPI client and the route
definitions that expose a small read-only REST API for browsing
Pokémon: a listing of the first hundred entries and a detail record
per name.  The ``viewer`` module holds the client-side helpers used to
consume that API and present its records.
"""

from .router import router as catalog_router  # noqa: F401
