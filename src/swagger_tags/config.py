"""Package configuration.

Settings are read from ``SWAGGER_TAGS_*`` environment variables and an
optional ``.env`` file, with pydantic validating the values.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PRIMITIVE_TYPES = [
    "string",
    "integer",
    "number",
    "boolean",
    "array",
    "object",
    "file",
    "long",
    "float",
    "double",
    "byte",
    "date",
    "void",
]


class Settings(BaseSettings):
    """Knobs shared by the parsers and both serializers."""

    model_config = SettingsConfigDict(env_prefix="SWAGGER_TAGS_", env_file=".env", extra="ignore")

    primitive_types: list[str] = PRIMITIVE_TYPES
    produces: list[str] = ["application/json", "application/xml"]
    notes_line_break: str = "<br>"
    format_values: list[str] = ["json", "xml"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
