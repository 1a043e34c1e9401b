"""
Environment-driven configuration.

Reads settings from the process environment (and a .env file, if present)
and resolves them into an immutable EngineConfig.

Variables:
    TENSOR_SRS_WEIGHTS            comma-separated 17/19/21 weights (default: FSRS-6 defaults)
    TENSOR_SRS_ENABLE_SHORT_TERM  true/false (default: true)
    TENSOR_SRS_RELEARNING_STEPS   relearning step count (default: 1)
    TENSOR_SRS_DEFAULT_R_TARGET   retention target without signals (default: 0.9)
    TENSOR_SRS_BASE_STRENGTH      adaptive retention strength (default: 0.5)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from tensor_srs.errors import InvalidParameter
from tensor_srs.fsrs.constants import BASE_ADAPTIVE_STRENGTH, DEFAULT_R_TARGET
from tensor_srs.fsrs.params import EngineConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "TENSOR_SRS_"


class TensorSettings(BaseModel):
    """Raw settings, validated but not yet migrated."""
    weights: Optional[list[float]] = Field(default=None, description="17, 19 or 21 weights")
    enable_short_term: bool = True
    relearning_steps: int = Field(default=1, ge=0)
    default_r_target: float = Field(default=DEFAULT_R_TARGET, gt=0.0, lt=1.0)
    base_strength: float = Field(default=BASE_ADAPTIVE_STRENGTH, ge=0.0, le=1.0)

    @field_validator("weights", mode="before")
    @classmethod
    def split_weights(cls, value):
        """Accept a comma-separated string as well as a list."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


def _read_env() -> dict:
    keys = {
        "weights": "WEIGHTS",
        "enable_short_term": "ENABLE_SHORT_TERM",
        "relearning_steps": "RELEARNING_STEPS",
        "default_r_target": "DEFAULT_R_TARGET",
        "base_strength": "BASE_STRENGTH",
    }
    raw = {}
    for field_name, suffix in keys.items():
        value = os.getenv(ENV_PREFIX + suffix)
        if value is not None and value != "":
            raw[field_name] = value
    return raw


def load_settings(use_dotenv: bool = True) -> TensorSettings:
    """
    Load settings from the environment.

    Args:
        use_dotenv: Also read a .env file from the working directory

    Raises:
        InvalidParameter: a variable is present but invalid
    """
    if use_dotenv:
        load_dotenv()

    try:
        settings = TensorSettings(**_read_env())
    except ValidationError as e:
        raise InvalidParameter(f"Invalid {ENV_PREFIX}* configuration: {e}") from e

    logger.info(
        "Loaded engine settings: weights=%s short_term=%s relearning_steps=%d",
        "custom" if settings.weights is not None else "default",
        settings.enable_short_term,
        settings.relearning_steps,
    )
    return settings


def build_engine_config(settings: TensorSettings) -> EngineConfig:
    """Migrate and clip the configured weights into an EngineConfig."""
    return EngineConfig.from_weights(
        settings.weights,
        num_relearning_steps=settings.relearning_steps,
        enable_short_term=settings.enable_short_term,
        default_r_target=settings.default_r_target,
        base_strength=settings.base_strength,
    )


def load_engine_config(use_dotenv: bool = True) -> EngineConfig:
    """Settings from the environment, resolved into an EngineConfig."""
    return build_engine_config(load_settings(use_dotenv=use_dotenv))
