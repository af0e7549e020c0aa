"""
PokéAPI integration for the catalogue.

This module performs the outbound calls made by the relay.  It exposes
``PokeApiService`` with two methods:

* ``list_pokemon()``: fetch the first ``LISTING_LIMIT`` entries of the
  ``/pokemon`` listing and return its ``results`` array.

* ``get_pokemon()``: fetch the detail record of one Pokémon by name.

Both validate the upstream payload against the schemas in
``schemas.py`` and return the JSON exactly as received.  Nothing is
cached and nothing is retried: every call is one GET with a bounded
timeout.  Failures are reported with the exceptions from ``errors.py``
so that callers can tell "the upstream answered with an error" apart
from "the upstream never answered".
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, List

from pydantic import TypeAdapter

from .errors import UpstreamStatusError, UpstreamUnavailableError
from .schemas import DetailRecord, ListingEntry


logger = logging.getLogger(__name__)

# Page size requested from the listing endpoint.  Pagination beyond the
# first page is not supported.
LISTING_LIMIT = 100

USER_AGENT = "pokedex-relay/1.0 (+https://pokeapi.co)"

_listing_adapter = TypeAdapter(List[ListingEntry])


def http_get_json(url: str, timeout: float) -> Any:
    """Perform an HTTP GET and return the parsed JSON body.

    Raises
    ------
    UpstreamStatusError
        The server replied with an error status (4xx/5xx).
    UpstreamUnavailableError
        No reply was received: connection refused, DNS failure,
        timeout or a body cut off mid-read.
    ValueError
        The body is not valid JSON, or holds NaN or Infinity.
    """
    request = urllib.request.Request(
        url,
        headers={
            'User-Agent': USER_AGENT,
            'Accept': 'application/json',
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            data = response.read().decode('utf-8')
    except urllib.error.HTTPError as exc:
        # HTTPError subclasses URLError, so it has to be matched first.
        raise UpstreamStatusError(exc.code, url, _read_error_payload(exc)) from exc
    except urllib.error.URLError as exc:
        raise UpstreamUnavailableError(url, str(exc.reason)) from exc
    except (TimeoutError, ConnectionError, http.client.IncompleteRead) as exc:
        raise UpstreamUnavailableError(url, str(exc) or type(exc).__name__) from exc
    return _loads(data)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} in JSON body")


def _loads(data: str) -> Any:
    # NaN and Infinity are not JSON and cannot be sent back to clients.
    return json.loads(data, parse_constant=_reject_constant)


def _read_error_payload(exc: urllib.error.HTTPError) -> Any:
    """Decoded JSON body of an error reply, or ``None`` if there is none."""
    try:
        body = exc.read()
    except (OSError, http.client.HTTPException) as read_exc:
        logger.debug("Could not read error body from %s: %s", exc.filename, read_exc)
        return None
    if not body:
        return None
    try:
        return _loads(body.decode('utf-8'))
    except ValueError:
        return None


class PokeApiService:
    """Thin client for the PokéAPI endpoints used by the relay."""

    def __init__(self, base_url: str, timeout: float) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def list_pokemon(self) -> List[Dict[str, Any]]:
        """Return the upstream ``results`` array for the first page."""
        query = urllib.parse.urlencode({'limit': LISTING_LIMIT})
        url = f"{self.base_url}/pokemon?{query}"
        data = http_get_json(url, self.timeout)
        results = data['results']
        _listing_adapter.validate_python(results)
        logger.debug("Fetched %d pokemon from %s", len(results), url)
        return results

    def get_pokemon(self, name: str) -> Dict[str, Any]:
        """Return the upstream detail record for ``name``.

        ``name`` is expected to be validated by the caller already.
        """
        url = f"{self.base_url}/pokemon/{urllib.parse.quote(name, safe='')}"
        data = http_get_json(url, self.timeout)
        DetailRecord.model_validate(data)
        return data
