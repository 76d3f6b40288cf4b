# passbench/config.py
"""
User settings for PassBench.
Settings saved as JSON in %APPDATA%/PassBench/config.json (Windows) or ~/.passbench/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 16,
    "use_latin": True,
    "use_cyrillic": False,
    "use_digits": True,
    "use_special": True,
    "clipboard_clear_seconds": 20,
    "ui": "console",  # "console" or "gui"
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "PassBench")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passbench")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.debug("settings saved to %s", p)
