"""
Service configuration and logging setup.

Configuration is a validated Pydantic model loaded from an optional YAML
file, with ``ORBITS_*`` environment variables layered on top.
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

ENV_OVERRIDES = {
    "ORBITS_HOST": "host",
    "ORBITS_PORT": "port",
    "ORBITS_LOG_LEVEL": "log_level",
}


class ServiceConfig(BaseModel):
    """Validated configuration for the HTTP service."""

    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535, description="Port to bind")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    title: str = "Hohmann Transfer API"

    model_config = {"extra": "forbid"}

    @classmethod
    def from_yaml(cls, path: str) -> "ServiceConfig":
        """Load and validate config from a YAML file."""
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
        return cls.model_validate(raw)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "ServiceConfig":
        """Load config from ``path`` (if given) and apply environment overrides."""
        raw = {}
        if path is not None:
            raw = cls.from_yaml(path).model_dump()
        for var, field in ENV_OVERRIDES.items():
            value = os.environ.get(var)
            if value:
                raw[field] = value.upper() if field == "log_level" else value
        return cls.model_validate(raw)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
