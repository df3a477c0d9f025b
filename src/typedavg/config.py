# runtime settings read from the environment (optionally from a local .env file)
# defaults reproduce a typical desktop platform: 32-bit int, quiet logging

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()  # a local .env is optional, real environment variables take precedence

SUPPORTED_INT_BITS = (16, 32, 64)

class ConfigError(ValueError):
    # single error type for bad settings, raised before any exercise runs
    pass

@dataclass(frozen=True)
class Settings:
    int_bits: int = 32
    log_level: str = "WARNING"

def load_settings() -> Settings:
    raw_bits = os.getenv("TYPEDAVG_INT_BITS", "32")
    try:
        int_bits = int(raw_bits)
    except ValueError as exc:
        raise ConfigError(f"TYPEDAVG_INT_BITS must be an integer (got {raw_bits!r})") from exc
    if int_bits not in SUPPORTED_INT_BITS:
        raise ConfigError(f"TYPEDAVG_INT_BITS must be one of {SUPPORTED_INT_BITS} (got {int_bits})")

    log_level = os.getenv("TYPEDAVG_LOG_LEVEL", "WARNING").upper()
    # fail when the level is unknown to avoid silently logging nothing
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"TYPEDAVG_LOG_LEVEL is not a logging level (got {log_level!r})")

    return Settings(int_bits=int_bits, log_level=log_level)
