"""
Application Configuration.

Settings are loaded from YAML. The defaults ship inside the package at
httpie_lite/config/settings/application.yaml; set HTTPIE_LITE_CONFIG to the
path of another YAML file to replace them.

Usage:
    from httpie_lite.core.config import get_app_config, get_client_settings

    timeout, follow_redirects, user_agent = get_client_settings()
"""

import os
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "HTTPIE_LITE_CONFIG"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings" / "application.yaml"

_app_config: "AppConfig | None" = None


class AppConfig:
    """
    Parsed application settings.

    Each top-level YAML section is exposed as a dict attribute.
    Missing sections are empty dicts.
    """

    def __init__(self, data: dict[str, Any], path: Path):
        self.path = path
        self.client: dict[str, Any] = data.get("client") or {}
        self.logging: dict[str, Any] = data.get("logging") or {}


def find_config_file() -> Path:
    """
    Resolve the configuration file to load.

    Returns:
        Path from HTTPIE_LITE_CONFIG when set, else the packaged defaults.

    Raises:
        FileNotFoundError: If the resolved file does not exist
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    path = Path(override).expanduser() if override else DEFAULT_CONFIG_PATH

    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return path


def _load_app_config() -> AppConfig:
    """Read and parse the configuration file."""
    path = find_config_file()
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")

    config = AppConfig(data, path)
    _validate_client_section(config.client, path)
    return config


def _validate_client_section(client: Any, path: Path) -> None:
    """
    Check the client section before anything uses it.

    Raises:
        ValueError: If a value has the wrong type
    """
    if not isinstance(client, dict):
        raise ValueError(f"client section must be a mapping: {path}")

    timeout = client.get("timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ValueError(f"client.timeout must be a positive number or null, got {timeout!r}: {path}")

    follow_redirects = client.get("follow_redirects", True)
    if not isinstance(follow_redirects, bool):
        raise ValueError(f"client.follow_redirects must be true or false, got {follow_redirects!r}: {path}")

    user_agent = client.get("user_agent")
    if user_agent is not None and not isinstance(user_agent, str):
        raise ValueError(f"client.user_agent must be a string, got {user_agent!r}: {path}")


def get_app_config() -> AppConfig:
    """Get the application configuration, loading it on first use."""
    global _app_config
    if _app_config is None:
        _app_config = _load_app_config()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _app_config
    _app_config = None


def get_client_settings() -> tuple[float | None, bool, str | None]:
    """
    Get HTTP client settings.

    Returns:
        Tuple of (timeout, follow_redirects, user_agent). A timeout of None
        means the transport default applies.
    """
    client = get_app_config().client

    timeout = client.get("timeout")
    if timeout is not None:
        timeout = float(timeout)

    return timeout, client.get("follow_redirects", True), client.get("user_agent")
