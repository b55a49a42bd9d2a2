from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from .constants import (
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_BASE_URL,
    ENV_KROKI_URL,
    KROKI_URL_DEFAULT,
)


class ConfigError(ValueError):
    """Raised when a required setting is missing or empty."""


@dataclass(frozen=True)
class FrappeConfig:
    base_url: str
    api_key: str
    api_secret: str
    kroki_url: str = KROKI_URL_DEFAULT
    timeout: Optional[float] = None

    @property
    def authorization(self) -> str:
        """Value of the Authorization header for Frappe token auth."""
        return f"token {self.api_key}:{self.api_secret}"


def load_config(
    env_file: Path,
    *,
    environ: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> FrappeConfig:
    """Read Frappe settings from `env_file`.

    Variables already present in the process environment win over the file,
    the same precedence `load_dotenv()` applies.
    """
    if not env_file.is_file():
        raise FileNotFoundError(f"Error loading {env_file} file")

    values: dict[str, Optional[str]] = dict(dotenv_values(env_file))
    env = os.environ if environ is None else environ
    for key in (ENV_BASE_URL, ENV_API_KEY, ENV_API_SECRET, ENV_KROKI_URL):
        if env.get(key):
            values[key] = env[key]

    missing = [
        key
        for key in (ENV_BASE_URL, ENV_API_KEY, ENV_API_SECRET)
        if not (values.get(key) or "").strip()
    ]
    if missing:
        raise ConfigError(f"missing required setting(s) in {env_file}: {', '.join(missing)}")

    return FrappeConfig(
        base_url=str(values[ENV_BASE_URL]).strip().rstrip("/"),
        api_key=str(values[ENV_API_KEY]).strip(),
        api_secret=str(values[ENV_API_SECRET]).strip(),
        kroki_url=(values.get(ENV_KROKI_URL) or KROKI_URL_DEFAULT).strip(),
        timeout=timeout,
    )
