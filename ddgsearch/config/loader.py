"""Configuration loading utilities."""

import json
from pathlib import Path

from ddgsearch.config.schema import Config


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".ddgsearch" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            print(f"Warning: Failed to load config from {path}: {e}")
            print("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError("config root must be a JSON object")

    # Move legacy top-level headers/timeout -> http.headers/http.timeoutMs
    http_cfg = data.setdefault("http", {})
    legacy_headers = data.pop("headers", None)
    if legacy_headers and "headers" not in http_cfg:
        http_cfg["headers"] = legacy_headers
    legacy_timeout = data.pop("timeout", None)
    if legacy_timeout is not None and "timeoutMs" not in http_cfg:
        http_cfg["timeoutMs"] = legacy_timeout

    # Rename search.safeSearch/timeLimit -> search.safesearch/timelimit
    search_cfg = data.setdefault("search", {})
    for legacy, current in (("safeSearch", "safesearch"), ("timeLimit", "timelimit")):
        if legacy in search_cfg:
            value = search_cfg.pop(legacy)
            search_cfg.setdefault(current, value)

    return data
