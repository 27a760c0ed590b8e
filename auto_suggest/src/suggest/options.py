from __future__ import annotations
import json
import logging
import os
from typing import Any, Mapping, Optional

from . import config as CFG
from .models import Costs, Options

log = logging.getLogger(__name__)


def options_from_dict(data: Mapping[str, Any]) -> Options:
    """
    Build Options from a mapping using the JSON keys in config.OPTION_KEYS
    (e.g. {"costdeletion": 40, "autocorrectdisabled": true}).

    Missing keys stay unset. Unknown keys are logged and skipped.
    Raises ValueError when a value has the wrong type.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"options must be a JSON object, got {type(data).__name__}")

    opts = Options()
    for key, value in data.items():
        attr = CFG.OPTION_KEYS.get(key.lower())
        if attr is None:
            log.warning("Ignoring unknown option %r", key)
            continue
        if attr == "autocorrect_disabled":
            if not isinstance(value, bool):
                raise ValueError(f"option {key!r} must be a boolean, got {value!r}")
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"option {key!r} must be an integer, got {value!r}")
        setattr(opts, attr, value)
    return opts


def options_from_json(text: str) -> Options:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid options JSON: {e}") from e
    return options_from_dict(data)


def load_options(path: str) -> Options:
    """Read Options from a JSON file. Raises FileNotFoundError / ValueError."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    log.info("Loading options from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        return options_from_json(f.read())


def resolve_options(options: Optional[Options] = None) -> Costs:
    """Resolve sentinels to defaults. `options` itself is left untouched."""
    return (options or Options()).resolve()


def load_commands(path: str) -> list[str]:
    """One command per line; blank lines are skipped and surrounding whitespace stripped."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]
