"""Client settings loaded from a YAML file or the environment."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from darksky.constants import (
    DEFAULT_TIMEOUT,
    SUPPORTED_EXCLUDES,
    SUPPORTED_LANGUAGES,
    SUPPORTED_UNITS,
)
from darksky.options import ExcludeOption, ExtendOption, LanguageOption, Option, UnitOption

ENV_PREFIX = "DARKSKY_"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def _load_dotenv() -> None:
    # Variables already set in the environment win over the .env file
    load_dotenv(find_dotenv(usecwd=True))


class ClientSettings(BaseModel):
    """Settings for a DarkSkyClient.

    ``language``, ``units``, ``exclude`` and ``extend`` become options
    applied to every query made by a client built with
    DarkSkyClient.from_settings.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("darksky.yaml"),
        Path("~/.config/darksky/config.yaml").expanduser(),
    ]

    secret: str = Field(..., min_length=1, description="Dark Sky API secret key")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="HTTP timeout (seconds)")
    language: str | None = Field(None, description="Language of summaries")
    units: str | None = Field(None, description="Unit system of returned values")
    exclude: list[str] = Field(default_factory=list, description="Sections to leave out")
    extend: bool = Field(False, description="Return 168 hours of hourly data")

    # ---- validators ----
    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str | None) -> str | None:
        if v is not None and v.lower() not in SUPPORTED_LANGUAGES:
            raise ValueError(f"unsupported language: {v}")
        return v.lower() if v else v

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: str | None) -> str | None:
        if v is not None and v.lower() not in SUPPORTED_UNITS:
            raise ValueError(f"unsupported units: {v}")
        return v.lower() if v else v

    @field_validator("exclude", mode="before")
    @classmethod
    def split_exclude(cls, v: object) -> object:
        # Environment values arrive as "minutely,hourly"
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @model_validator(mode="after")
    def check_exclude(self) -> ClientSettings:
        lowered = [s.lower() for s in self.exclude]
        unknown = [s for s in lowered if s not in SUPPORTED_EXCLUDES]
        if unknown:
            raise ValueError(f"unsupported exclude values: {', '.join(unknown)}")
        if len(set(lowered)) != len(lowered):
            raise ValueError("exclude values must be unique")
        return self

    # ---- convenience methods ----
    def options(self) -> tuple[Option, ...]:
        """Build the query options these settings describe.

        Returns:
            Options in a fixed order: language, units, exclude, extend
        """
        opts: list[Option] = []
        if self.language:
            opts.append(LanguageOption(self.language))
        if self.units:
            opts.append(UnitOption(self.units))
        if self.exclude:
            opts.append(ExcludeOption(*self.exclude))
        if self.extend:
            opts.append(ExtendOption())
        return tuple(opts)

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from DARKSKY_* environment variables.

        Recognized variables are DARKSKY_SECRET, DARKSKY_TIMEOUT,
        DARKSKY_LANGUAGE, DARKSKY_UNITS, DARKSKY_EXCLUDE (comma separated)
        and DARKSKY_EXTEND.

        Raises:
            RuntimeError: If the resulting settings are invalid
        """
        _load_dotenv()
        data = {
            name.lower(): os.environ[f"{ENV_PREFIX}{name}"]
            for name in ("SECRET", "TIMEOUT", "LANGUAGE", "UNITS", "EXCLUDE", "EXTEND")
            if f"{ENV_PREFIX}{name}" in os.environ
        }
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

    @classmethod
    def load(cls, path: Path | None = None) -> ClientSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ClientSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        _load_dotenv()

        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("DARKSKY_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from DARKSKY_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create darksky.yaml or set DARKSKY_CONFIG."
                    )

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
