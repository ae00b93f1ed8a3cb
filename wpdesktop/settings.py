# wpdesktop/settings.py
import copy
import json
from pathlib import Path
from typing import Any, Dict

LAST_LOCATION = "last_location"

DEFAULTS = {
    "server": {
        "host": "127.0.0.1",
        "port": 41050,
        "public_host": "wordpress.com",
        "public_url": "https://wordpress.com",
    },
    "links": {
        # http://<server.host> is always added in front of these
        "always_open_in_app": [
            "http://localhost",
            "http://calypso.localhost:3000/*",
            "https://public-api.wordpress.com",
            "https://wordpress.com/wp-login.php",
            "http://127.0.0.1:41050/*",
        ],
        # the server url is always added in front of these
        "never_open_in_browser": [
            "https://public-api.wordpress.com/connect/",
        ],
    },
    "window": {"width": 1200, "height": 800},
    "log": {"level": "INFO"},
    LAST_LOCATION: "/",
}

def config_dir() -> Path:
    base = Path.home() / ".config" / "wpdesktop"
    base.mkdir(parents=True, exist_ok=True)
    return base

def _config_path() -> Path:
    return config_dir() / "config.json"

def server_url(settings: Dict[str, Any]) -> str:
    server = settings["server"]
    return f"http://{server['host']}:{server['port']}"

def _merge(defaults: Dict[str, Any], stored: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in stored.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

def load_settings() -> Dict[str, Any]:
    p = _config_path()
    if not p.exists():
        p.write_text(json.dumps(DEFAULTS, indent=2))
        return copy.deepcopy(DEFAULTS)
    return _merge(DEFAULTS, json.loads(p.read_text()))

def save_settings(data: Dict[str, Any]) -> None:
    p = _config_path()
    p.write_text(json.dumps(data, indent=2))

def save_setting(key: str, value: Any) -> None:
    """Persist a single top-level key, keeping everything else on disk."""
    data = load_settings()
    data[key] = value
    save_settings(data)
