"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so local
overrides never need to be exported by hand.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    currency: str = "AED"
    currency_decimals: int = 0
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        decimals = env.get("SERVEST_CURRENCY_DECIMALS", "0")
        try:
            currency_decimals = int(decimals)
        except ValueError:
            msg = f"SERVEST_CURRENCY_DECIMALS must be an integer, got {decimals!r}"
            raise ValueError(msg) from None
        origins = env.get("SERVEST_CORS_ORIGINS")
        return cls(
            currency=env.get("SERVEST_CURRENCY", "AED").upper(),
            currency_decimals=currency_decimals,
            log_level=env.get("SERVEST_LOG_LEVEL", "INFO").upper(),
            cors_origins=_split_origins(origins) if origins else DEFAULT_CORS_ORIGINS,
        )


def get_settings() -> Settings:
    """Build settings from ``.env`` and the process environment."""
    load_dotenv()
    return Settings.from_env()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
