import copy
import os
import logging

import yaml

from gameshelf.constants import CONFIG_DIR, CONFIG_FILE, DEFAULT_SETTINGS

# Retrieve main logger
logger = logging.getLogger("main")

# Environment variables that take precedence over the YAML file
ENV_OVERRIDES = {
    "DATABASE_URL": ("database", "url"),
    "IGDB_CLIENT_ID": ("igdb", "client_id"),
    "IGDB_ACCESS_TOKEN": ("igdb", "access_token"),
    "IGDB_CLIENT_SECRET": ("igdb", "client_secret"),
    "GAMESHELF_API_URL": ("client", "base_url"),
}

# Cache variable
_cached_settings = None


def _merge_defaults(settings):
    """Deep merge user settings over the defaults so new keys are always present"""
    merged_settings = copy.deepcopy(DEFAULT_SETTINGS)
    for section, values in settings.items():
        if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
            merged_settings[section].update(values)
        else:
            merged_settings[section] = values
    return merged_settings


def _apply_env_overrides(settings):
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            settings.setdefault(section, {})[key] = value
    return settings


def load_settings(force=False, config_file=CONFIG_FILE):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            settings = yaml.safe_load(yaml_file) or {}
        settings = _merge_defaults(settings)
    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        try:
            os.makedirs(os.path.dirname(config_file) or CONFIG_DIR, exist_ok=True)
            with open(config_file, "w") as yaml_file:
                yaml.dump(settings, yaml_file)
        except OSError as e:
            logger.warning(f"Could not write default configuration to {config_file}: {e}")

    settings = _apply_env_overrides(settings)

    _cached_settings = settings
    return settings


def get_database_url():
    return load_settings()["database"]["url"]


def get_igdb_credentials():
    """Return (client_id, access_token, client_secret) from the igdb section"""
    igdb = load_settings().get("igdb", {})
    return igdb.get("client_id") or "", igdb.get("access_token") or "", igdb.get("client_secret") or ""


def reload_conf():
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True)
