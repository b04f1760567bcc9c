"""
Model settings — defaults applied while building a model.

The package reads no files and no environment variables. An embedding
application loads its own configuration and hands the relevant mapping
to ``load_settings``, which validates it into a ``ModelSettings``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when model settings are invalid."""


class ModelSettings(BaseModel):
    """Defaults used by ``Model`` and its elements.

    Attributes:
        default_environment:     Environment for deployment nodes created
                                 without one.
        health_check_interval:   Seconds between polls when a health check
                                 is added without an interval.
        health_check_timeout:    Seconds before a poll fails when a health
                                 check is added without a timeout.
        replicate_relationships: Whether placing an element copies its
                                 relationships onto sibling instances.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_environment: str = Field(default="Default", min_length=1)
    health_check_interval: int = Field(default=60, ge=0)
    health_check_timeout: int = Field(default=0, ge=0)
    replicate_relationships: bool = True


def load_settings(data: Mapping[str, Any] | None = None) -> ModelSettings:
    """Validate a settings mapping.

    Args:
        data: Settings keyed by field name. None gives the defaults.

    Returns:
        Validated, immutable settings.

    Raises:
        ConfigError: If ``data`` is not a mapping or holds invalid values.
    """
    if data is None:
        return ModelSettings()

    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected a mapping of model settings, got {type(data).__name__}")

    try:
        settings = ModelSettings.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid model settings: {e}") from e

    logger.debug("Loaded model settings: %s", settings.model_dump())
    return settings
