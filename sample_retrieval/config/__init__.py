"""
Configuration for sample retrieval.
There are three levels of configuration in order of priority
1. cli options
2. yaml config file
3. environment variables
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration with support for:
    - Environment variables
    - YAML configuration file
    - CLI argument overrides

    Precedence: CLI args > YAML config > Environment variables > Defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="SAMPLE_RETRIEVAL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ===== Submission service =====
    webin_rest_uri: str = Field(
        default="https://www.ebi.ac.uk/ena/submit/drop-box/",
        description="Base URI of the production submission REST service.",
    )
    webin_rest_test_uri: str = Field(
        default="https://wwwdev.ebi.ac.uk/ena/submit/drop-box/",
        description="Base URI of the test submission REST service.",
    )
    test_mode: bool = Field(
        default=False,
        description="When true, requests are sent to the test service.",
    )
    webin_username: str = Field(
        default="",
        description="Submission account used to authenticate requests.",
    )
    webin_password: SecretStr = Field(
        default=SecretStr(""),
        description="Password of the submission account.",
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Connect/read timeout (seconds) for service requests.",
    )

    # ===== Retry policy =====
    retry_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts made for a request before giving up.",
    )
    retry_backoff_multiplier: float = Field(
        default=1.0,
        ge=0,
        description="Multiplier (seconds) of the exponential backoff between attempts.",
    )
    retry_backoff_max: float = Field(
        default=8.0,
        ge=0,
        description="Upper bound (seconds) on a single backoff delay.",
    )

    # ===== Logging =====
    log_level: str = Field(
        default="INFO",
        description="Log level used by the command line interface.",
    )

    @field_validator("webin_rest_uri", "webin_rest_test_uri")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else f"{value}/"

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> Settings:
        """
        Load settings from a YAML file.

        The YAML file values will override defaults and environment variables.

        Parameters
        ----------
        yaml_path : Path
            Path to YAML configuration file

        Returns
        -------
        Settings
            Configured settings instance
        """
        if not yaml_path.exists():
            raise FileNotFoundError(f"Settings file not found: {yaml_path}")

        with yaml_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}

        if not isinstance(data, dict):
            raise ValueError("Settings YAML must contain a mapping at the root")

        return cls(**data)

    def merge_overrides(self, overrides: Dict[str, Any]) -> Settings:
        """
        Create a new Settings instance with specific values overridden.

        Values are re-validated, so overrides go through the same coercion
        as environment variables and YAML values.
        """
        overrides = {key: value for key, value in (overrides or {}).items() if value is not None}
        if not overrides:
            return self

        data = self.model_dump()
        data.update(overrides)
        return type(self)(**data)

    @property
    def rest_uri(self) -> str:
        """Base URI selected by ``test_mode``."""
        return self.webin_rest_test_uri if self.test_mode else self.webin_rest_uri


def load_settings(
    yaml_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    env_file: Optional[str] = ".env",
) -> Settings:
    """
    Load settings with proper precedence handling.

    Precedence order (highest to lowest):
    1. Overrides (typically from CLI args)
    2. YAML config file
    3. Environment variables
    4. Defaults

    Parameters
    ----------
    yaml_path : Path, optional
        Path to YAML configuration file
    overrides : dict, optional
        Dictionary of override values (typically from CLI)
    env_file : str, optional
        Environment file loaded before reading environment variables

    Returns
    -------
    Settings
        Configured settings instance
    """
    if env_file:
        load_dotenv(env_file)

    settings = Settings()

    if yaml_path is not None:
        yaml_settings = Settings.from_yaml(yaml_path)
        settings = settings.merge_overrides(
            yaml_settings.model_dump(exclude_unset=True)
        )

    if overrides:
        settings = settings.merge_overrides(overrides)

    return settings


__all__ = ["Settings", "load_settings"]
