"""Pokédex relay: a read-only FastAPI front for PokéAPI."""
