"""
Configuration for queries_resources.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

RESOURCES_DIR_ENV_VAR = "QUERIES_RESOURCES_DIR"
CACHE_FAILURES_ENV_VAR = "QUERIES_RESOURCES_CACHE_FAILURES"


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "1", "yes", "on"}:
        return True
    if lowered in {"false", "0", "no", "off"}:
        return False
    raise ValueError(f"Expected true/false, got '{value}'")


@dataclass(frozen=True)
class ResourcesConfig:
    """Configuration for a resource registry."""
    resources_dir: Optional[Path] = None  # Read resources from this directory instead of the bundled package data
    cache_failures: bool = True  # Re-raise a failed build on every later call instead of rebuilding

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResourcesConfig":
        """
        Build a configuration from environment variables.

        QUERIES_RESOURCES_DIR sets resources_dir, QUERIES_RESOURCES_CACHE_FAILURES
        (true/false) sets cache_failures.
        """
        env = os.environ if environ is None else environ
        resources_dir = env.get(RESOURCES_DIR_ENV_VAR)
        cache_failures = env.get(CACHE_FAILURES_ENV_VAR)
        return cls(
            resources_dir=Path(resources_dir).expanduser() if resources_dir else None,
            cache_failures=_str_to_bool(cache_failures) if cache_failures else True,
        )
