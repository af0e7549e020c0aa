"""
Configuration for the Pokédex relay.

``Settings`` is read from the environment (and an optional ``.env``
file) exactly once, when the application is built.  The resulting
object is frozen and handed explicitly to ``create_app``; route
handlers and services receive the values they need from it instead of
reading ``os.environ`` themselves.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Relay settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    project_name: str = "Pokédex Relay"
    api_version: str = "1.0.0"

    # Single origin allowed to call the relay from a browser.
    client_url: str = Field(
        default="http://localhost:3000",
        description="Origin permitted for cross-origin requests",
    )

    host: str = Field(default="0.0.0.0", description="HTTP server host")
    port: int = Field(default=5000, description="HTTP server port")
    log_level: str = Field(default="INFO", description="Logging level")

    pokeapi_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL of the upstream PokéAPI",
    )
    upstream_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout applied to every outbound PokéAPI request",
    )
