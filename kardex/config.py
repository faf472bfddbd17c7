"""Configuration helpers: data directory discovery and settings."""

import os
import pathlib

DEFAULT_SETTINGS = {
    "db_name": "kardex.db",
    "source_title_len": 15,
    "default_topic": "",
}


def get_kardex_dir() -> pathlib.Path:
    env_dir = os.environ.get("KARDEX_DIR")
    if env_dir:
        return pathlib.Path(env_dir)
    config_path = pathlib.Path.home() / ".config" / "kardex" / "config"
    if config_path.exists():
        for line in config_path.read_text().splitlines():
            line = line.strip()
            if line.startswith("DIR="):
                return pathlib.Path(line[4:].strip())
    default = pathlib.Path.home() / ".local" / "share" / "kardex"
    return default


def load_settings(kardex_dir: pathlib.Path) -> dict:
    settings_path = kardex_dir / "settings.toml"
    settings = dict(DEFAULT_SETTINGS)
    if settings_path.exists():
        settings.update(_parse_toml_simple(settings_path.read_text()))
    return settings


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser for flat key=value files."""
    result = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip()
            if v.startswith('"') and v.endswith('"'):
                v = v[1:-1]
            elif v.isdigit():
                v = int(v)
            elif v == "true":
                v = True
            elif v == "false":
                v = False
            result[k] = v
    return result
