import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcomx7.yml"
CONFIG_ENV = "GEDCOMX7_CONFIG"

DEFAULT_NUMBERING = {
    "ambiguous_anchor_role": "HUSB",
    "report_ambiguous_sex": True,
}

DEFAULT_HEADER = {
    "product": "GEDCOMX7",
    "name": "GEDCOM X to GEDCOM 7 converter",
    "version": "0.1.0",
}


class GXConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.numbering = {**DEFAULT_NUMBERING, **(data.get("numbering") or {})}
        self.header = {**DEFAULT_HEADER, **(data.get("header") or {})}
        self.schema = data.get("schema", {}) or {}
        self.debug = data.get("debug", False)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'GXConfig':
    path = config_path()
    if not path.exists():
        if os.environ.get(CONFIG_ENV):
            raise FileNotFoundError(f"Config file not found: {path}")
        return GXConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GXConfig(data)

_config_cache = None

def get_config() -> 'GXConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration (tests switch files through the env var)."""
    global _config_cache
    _config_cache = None
