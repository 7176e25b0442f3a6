# -*- coding: utf-8 -*-
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
import yaml

from translator.utils.paths import dot_get

DRIVERS = ("memory", "json")


@dataclass
class TranslatorConfig:
    driver: str
    fallback_locale: str
    locales_dir: str
    # optional path to config yaml
    config_yaml_path: Optional[str] = None


def _load_yaml_config(path: str) -> Dict[str, Any]:
    """
    Load YAML config if path exists. Always returns a dict.
    """
    if not path or not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _yget_str(yml: Mapping[str, Any], path: str, default: str = "") -> str:
    """
    Get string value from YAML with fallback.
    Simple primitives are coerced to str, anything else yields the default.
    """
    found, v = dot_get(yml, path)
    if not found or v is None:
        return default
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float, bool)):
        return str(v)
    return default


def load_config() -> TranslatorConfig:
    load_dotenv()

    # Optional config.yml overlay
    config_yaml_path = (os.getenv("CONFIG_YAML") or "").strip()
    yml = _load_yaml_config(config_yaml_path)

    driver = (os.getenv("TRANSLATOR_DRIVER") or _yget_str(yml, "translator.driver", "json")).strip().lower()
    if driver not in DRIVERS:
        raise RuntimeError(f"TRANSLATOR_DRIVER must be one of {', '.join(DRIVERS)}, got {driver!r}")

    # Empty string is a valid locale (root scope), so only a missing env var falls through to YAML
    fallback_env = os.getenv("FALLBACK_LOCALE")
    fallback_locale = fallback_env.strip() if fallback_env is not None else _yget_str(yml, "translator.fallback_locale", "en")

    locales_dir = os.getenv("LOCALES_DIR") or _yget_str(yml, "translator.dir", "locales")

    return TranslatorConfig(
        driver=driver,
        fallback_locale=fallback_locale,
        locales_dir=locales_dir,
        config_yaml_path=config_yaml_path or None,
    )
