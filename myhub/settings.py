import json
import logging
from typing import Dict
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULTS = {"page_size": 10}


def load_settings(settings_file: Path) -> Dict:
    settings = dict(DEFAULTS)
    try:
        if settings_file.exists():
            data = json.loads(settings_file.read_text("utf-8"))
            settings.update({k: data.get(k, settings[k]) for k in settings})
    except (OSError, ValueError):
        log.warning("Couldn't read settings from '%s', using defaults.", settings_file)
        return dict(DEFAULTS)
    if not isinstance(settings["page_size"], int) or settings["page_size"] <= 0:
        settings["page_size"] = DEFAULTS["page_size"]
    return settings


def save_settings(settings_file: Path, settings: dict) -> None:
    settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
