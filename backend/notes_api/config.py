"""
Notes API — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads NOTES_API_* environment variables (or a .env
       file), validates types/ranges, and returns a `Settings` object.
Who:   Built once by the server entry point and handed to create_app().
When:  At process startup, before the application is constructed.

Design Decision:
    There is no module-level `settings` singleton. The composition root
    (notes_api.main.create_app) receives a Settings instance explicitly, so
    tests can build apps with different settings side by side.
"""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from notes_api.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default, so an empty environment produces a working
    server on port 8080. The CORS policy is deliberately not configurable:
    see notes_api.middleware.cors.DEFAULT_CORS_HEADERS.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "NOTES_API_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment, failing with a readable error.

    What:  Wraps Settings() so startup code deals with one exception type.
    Why:   A raw pydantic ValidationError dump is hard to read in a
           container log. ConfigurationError carries a short message plus the
           offending fields in its context.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            "Invalid configuration: " + ", ".join(fields),
            context={"errors": e.errors()},
        ) from e
