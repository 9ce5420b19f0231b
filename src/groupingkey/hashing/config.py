"""Configuration for grouping-key hashing.

Priority order (highest to lowest):
1. Runtime Parameters (passed directly to functions)
2. Environment Variables (prefixed with GROUPINGKEY_)
3. Project Config ([tool.groupingkey] in pyproject.toml)
4. Defaults (hardcoded fallbacks)
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

Algorithm = Literal["md5", "sha1", "sha256", "blake2b", "identity"]


class HasherConfig(BaseModel):
    """Selects the checksum algorithm used for grouping keys.

    Changing the algorithm changes every key, so producers that must agree
    on keys have to share this setting.
    """

    algorithm: Algorithm = Field(
        default="md5",
        description="Checksum algorithm; 'identity' returns the raw terms",
    )

    verbose: bool = Field(
        default=False,
        description="Log per-batch and per-event grouping details at DEBUG",
    )

    model_config = {
        "extra": "forbid",
    }


def _load_from_pyproject_toml() -> dict[str, Any]:
    """Load configuration from [tool.groupingkey] in the nearest pyproject.toml.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    current_dir = Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if not pyproject_path.exists():
            continue
        try:
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            continue
        section = data.get("tool", {}).get("groupingkey")
        if section is not None:
            return dict(section)

    return {}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from GROUPINGKEY_* environment variables.

    Returns:
        Dictionary with config values from environment.
    """
    config: dict[str, Any] = {}

    algorithm = os.getenv("GROUPINGKEY_ALGORITHM")
    if algorithm is not None:
        config["algorithm"] = algorithm.strip().lower()

    verbose = os.getenv("GROUPINGKEY_VERBOSE")
    if verbose is not None:
        config["verbose"] = verbose.lower() in ("true", "1", "yes", "on")

    return config


def load_config(
    algorithm: Optional[str] = None,
    verbose: Optional[bool] = None,
    **kwargs: Any,
) -> HasherConfig:
    """Load configuration with hierarchical priority.

    Args:
        algorithm: Checksum algorithm override.
        verbose: Enable DEBUG logging of grouping details.
        **kwargs: Additional configuration parameters.

    Returns:
        HasherConfig instance with merged configuration.

    Raises:
        pydantic.ValidationError: If the merged values are invalid.
    """
    runtime_config: dict[str, Any] = {}
    if algorithm is not None:
        runtime_config["algorithm"] = algorithm
    if verbose is not None:
        runtime_config["verbose"] = verbose
    runtime_config.update(kwargs)

    merged_config = HasherConfig().model_dump()
    merged_config.update(_load_from_pyproject_toml())
    merged_config.update(_load_from_env())
    merged_config.update(runtime_config)

    return HasherConfig(**merged_config)
