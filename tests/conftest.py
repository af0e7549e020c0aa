"""Shared fixtures: a fake PokéAPI behind ``urllib.request.urlopen``."""

from __future__ import annotations

import copy
import io
import json
import urllib.error
import urllib.request
from collections.abc import Iterator
from email.message import Message
from typing import Any

import pytest
from fastapi.testclient import TestClient

from pokedex_relay.config import Settings
from pokedex_relay.main import create_app

BASE_URL = "https://pokeapi.test/api/v2"
CLIENT_URL = "http://localhost:3000"

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "abilities": [
        {
            "ability": {"name": "static", "url": "https://pokeapi.co/api/v2/ability/9/"},
            "is_hidden": False,
            "slot": 1,
        },
        {
            "ability": {"name": "lightning-rod", "url": "https://pokeapi.co/api/v2/ability/31/"},
            "is_hidden": True,
            "slot": 3,
        },
    ],
    "types": [
        {"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.co/api/v2/type/13/"}},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "https://pokeapi.co/api/v2/stat/1/"}},
        {
            "base_stat": 50,
            "effort": 0,
            "stat": {"name": "special-attack", "url": "https://pokeapi.co/api/v2/stat/4/"},
        },
    ],
    "sprites": {
        "front_default": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/25.png",
        "front_shiny": "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/shiny/25.png",
        "back_default": None,
    },
}

LISTING = {
    "count": 1302,
    "next": f"{BASE_URL}/pokemon?offset=100&limit=100",
    "previous": None,
    "results": [
        {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"},
        {"name": "ivysaur", "url": "https://pokeapi.co/api/v2/pokemon/2/"},
        {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon/25/"},
    ],
}


def http_error(url: str, status: int, body: Any = None) -> urllib.error.HTTPError:
    raw = b"" if body is None else json.dumps(body).encode("utf-8")
    return urllib.error.HTTPError(url, status, "error", Message(), io.BytesIO(raw))


class FakeResponse:
    status = 200

    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info: Any) -> bool:
        return False


class FakeUpstream:
    """Maps URLs to a JSON payload, raw bytes or an exception to raise."""

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.calls: list[tuple[str, float | None]] = []

    def add(self, url: str, outcome: Any) -> None:
        self.routes[url] = outcome

    def fail(self, url: str, status: int, body: Any = None) -> None:
        self.routes[url] = http_error(url, status, body)

    def urlopen(self, request: urllib.request.Request, timeout: float | None = None) -> FakeResponse:
        url = request.full_url
        self.calls.append((url, timeout))
        if url not in self.routes:
            raise http_error(url, 404)
        outcome = self.routes[url]
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, bytes):
            return FakeResponse(outcome)
        return FakeResponse(json.dumps(outcome).encode("utf-8"))


@pytest.fixture
def upstream(monkeypatch: pytest.MonkeyPatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr(urllib.request, "urlopen", fake.urlopen)
    return fake


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        client_url=CLIENT_URL,
        pokeapi_base_url=BASE_URL,
        upstream_timeout_seconds=2.5,
    )


@pytest.fixture
def client(settings: Settings, upstream: FakeUpstream) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def pikachu() -> dict[str, Any]:
    return copy.deepcopy(PIKACHU)


@pytest.fixture
def listing() -> dict[str, Any]:
    return copy.deepcopy(LISTING)
