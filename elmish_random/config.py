"""
Configuration: which Source factories fall back to when none is given.

Read from the process environment (and an optional .env file):

    ELMISH_RANDOM_SOURCE   ambient | deterministic | simple_seeded
    ELMISH_RANDOM_SEED     integer, required unless SOURCE is ambient

With nothing set the default is `random.random`.
"""

from __future__ import annotations

import os
import random
from typing import Dict, Literal, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .sources import DeterministicSource, Source, simple_seeded

SOURCE_ENV = "ELMISH_RANDOM_SOURCE"
SEED_ENV = "ELMISH_RANDOM_SEED"


class ConfigError(Exception):
    """Raised when the environment holds an unusable configuration."""

    def __init__(self, variable: str, detail: str) -> None:
        self.variable = variable
        self.detail = detail
        super().__init__(f"[CONFIG:{variable}] {detail}")


class RandomConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["ambient", "deterministic", "simple_seeded"] = "ambient"
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _seed_required(self) -> "RandomConfig":
        if self.source != "ambient" and self.seed is None:
            raise ValueError(f"source={self.source!r} requires a seed")
        return self


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_config(env_file: Optional[str] = None) -> RandomConfig:
    """
    Build a RandomConfig from the environment.

    If `env_file` is given it is read; otherwise a `.env` in the working
    directory is read when present. Only the ELMISH_RANDOM_* keys are taken
    from the file and os.environ is never written. Variables already set in
    the process environment win over the file.
    """
    settings = _read_settings(env_file if env_file is not None else ".env")

    source = settings[SOURCE_ENV].strip() or "ambient"
    raw_seed = settings[SEED_ENV].strip()

    seed: Optional[int] = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ConfigError(SEED_ENV, f"not an integer: {raw_seed!r}") from None

    try:
        return RandomConfig(source=source, seed=seed)
    except ValidationError as exc:
        raise ConfigError(SOURCE_ENV, str(exc)) from exc


def _read_settings(path: str) -> Dict[str, str]:
    """Process environment over file values, for our two keys only."""
    file_values = dotenv_values(path) if os.path.exists(path) else {}
    settings: Dict[str, str] = {}
    for key in (SOURCE_ENV, SEED_ENV):
        value = os.environ.get(key)
        if value is None:
            value = file_values.get(key)
        settings[key] = value or ""
    return settings


def build_source(config: RandomConfig) -> Source[float]:
    """Turn a RandomConfig into a unit-interval Source."""
    if config.source == "deterministic":
        return DeterministicSource(config.seed)
    if config.source == "simple_seeded":
        return simple_seeded(config.seed)
    return random.random


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default: Optional[Source[float]] = None


def default_source() -> Source[float]:
    """
    Return the default Source, resolving it from the environment once.

    An unusable configuration falls back to `random.random` with a warning,
    so factories never fail on account of the environment.
    """
    global _default
    if _default is None:
        try:
            _default = build_source(load_config())
        except ConfigError as exc:
            print(f"WARN: {exc}; falling back to random.random")
            _default = random.random
    return _default


def set_default_source(source: Source[float]) -> None:
    global _default
    _default = source


def reset_default_source() -> None:
    """Forget the cached default; the next lookup re-reads the environment."""
    global _default
    _default = None


def resolve_source(source: Optional[Source[float]]) -> Source[float]:
    return default_source() if source is None else source
