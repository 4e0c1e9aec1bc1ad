"""Typed application settings with Pydantic validation."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .llm.constants import (
    API_KEY_ENV,
    BASE_URL_ENV,
    DEFAULT_LLM_BASE_URL,
    DEFAULT_LLM_MODEL,
    DEFAULT_LLM_TEMPERATURE,
    MODEL_ENV,
)
from .llm.errors import ConfigurationError

MIN_WIDTH_PCT = 15
MAX_WIDTH_PCT = 50
MIN_HEIGHT_PCT = 15
MAX_HEIGHT_PCT = 60
DEFAULT_PANEL_PCT = 35

DEFAULT_PREFILL = (
    "I want to evaluate how different ride-hailing vehicle quotas "
    "(from 1,000 to 10,000) affect road traffic congestion in Hong Kong."
)


class LLMSettings(BaseModel):
    """Settings for connecting to the chat-completion service."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    base_url: str = Field(DEFAULT_LLM_BASE_URL, alias="api_base")
    model: str = DEFAULT_LLM_MODEL
    api_key: str | None = None
    temperature: float = DEFAULT_LLM_TEMPERATURE
    timeout_minutes: int = Field(60, ge=1)
    max_retries: int = Field(0, ge=0)

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, value: str | None) -> str:
        """Strip whitespace and trailing slashes; blank means the default."""
        if value is None:
            return DEFAULT_LLM_BASE_URL
        text = str(value).strip().rstrip("/")
        return text or DEFAULT_LLM_BASE_URL

    @field_validator("api_key", mode="before")
    @classmethod
    def _normalize_api_key(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("temperature", mode="before")
    @classmethod
    def _normalize_temperature(cls, value: float | str | None) -> float:
        """Coerce *value* to the supported temperature range."""
        if value is None:
            return DEFAULT_LLM_TEMPERATURE
        if isinstance(value, bool):
            raise TypeError("Boolean is not a valid temperature value")
        if isinstance(value, str):
            raw = value.strip()
            if not raw:
                return DEFAULT_LLM_TEMPERATURE
            try:
                parsed = float(raw)
            except ValueError:  # pragma: no cover - delegated to Pydantic
                return value
        else:
            parsed = float(value)
        return min(max(parsed, 0.0), 2.0)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        defaults: LLMSettings | None = None,
    ) -> LLMSettings:
        """Build settings from *environ* (defaults to :data:`os.environ`).

        Values from *defaults* are used unless the environment overrides them.
        Raises :class:`ConfigurationError` when the API key is absent so the
        failure is detected before any network call.
        """
        env = os.environ if environ is None else environ
        api_key = (env.get(API_KEY_ENV) or "").strip()
        if not api_key:
            raise ConfigurationError(f"Missing {API_KEY_ENV} env var")
        data: dict[str, object] = (
            defaults.model_dump(exclude={"api_key"}) if defaults is not None else {}
        )
        data["api_key"] = api_key
        base_url = (env.get(BASE_URL_ENV) or "").strip()
        if base_url:
            data["base_url"] = base_url
        model = (env.get(MODEL_ENV) or "").strip()
        if model:
            data["model"] = model
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid LLM settings: {exc}") from exc


def _clamp_pct(value: int | str | None, *, default: int, low: int, high: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        raise TypeError("Boolean is not a valid percentage")
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return default
        numeric = int(raw)
    else:
        numeric = int(value)
    return min(max(numeric, low), high)


class UISettings(BaseModel):
    """Settings related to the chat panel and its host window."""

    model_config = ConfigDict(validate_assignment=True)

    width_pct: int = DEFAULT_PANEL_PCT
    height_pct: int = DEFAULT_PANEL_PCT
    frame_interval_ms: int = Field(33, ge=1)
    prefill: str = DEFAULT_PREFILL
    window_width: int = 1280
    window_height: int = 800

    @field_validator("width_pct", mode="before")
    @classmethod
    def _normalize_width_pct(cls, value: int | str | None) -> int:
        return _clamp_pct(
            value, default=DEFAULT_PANEL_PCT, low=MIN_WIDTH_PCT, high=MAX_WIDTH_PCT
        )

    @field_validator("height_pct", mode="before")
    @classmethod
    def _normalize_height_pct(cls, value: int | str | None) -> int:
        return _clamp_pct(
            value, default=DEFAULT_PANEL_PCT, low=MIN_HEIGHT_PCT, high=MAX_HEIGHT_PCT
        )


class AppSettings(BaseModel):
    """Aggregate settings for the application.

    ``llm`` here carries only the non-secret knobs; the credential is always
    read from the environment when a request is made.
    """

    model_config = ConfigDict(validate_assignment=True)

    llm: LLMSettings = Field(default_factory=LLMSettings)
    ui: UISettings = Field(default_factory=UISettings)


def load_app_settings(path: str | Path) -> AppSettings:
    """Load :class:`AppSettings` from *path* with validation.

    Format is detected by file extension: ``.toml`` uses :mod:`tomllib`,
    everything else is treated as JSON.  Validation errors are wrapped into
    :class:`ValueError`.
    """
    p = Path(path)
    with p.open("rb") as fh:
        data = tomllib.load(fh) if p.suffix.lower() == ".toml" else json.load(fh)
    try:
        return AppSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
