"""
Solver configuration.

Values come from defaults, then ADVENT_* environment variables, then CLI
flags (see advent.cli).
"""

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "ADVENT_"

# Strategy names accepted for range-mode evaluation of the seed almanac
RANGE_STRATEGIES = ("intervals", "vectorized")


class SolverConfig(BaseModel):
    """Configuration for running puzzle solvers."""

    # Range mode: "intervals" splits whole ranges, "vectorized" maps every seed
    range_strategy: Literal["intervals", "vectorized"] = "intervals"

    # Seeds evaluated per vectorised batch
    chunk_size: int = Field(default=1 << 20, gt=0)

    # Logging
    log_level: str = "WARNING"

    class Config:
        extra = "forbid"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "SolverConfig":
        """
        Build a config from ADVENT_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit values; None entries are ignored

        Returns:
            Validated SolverConfig
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
