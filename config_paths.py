import json
import os

from dictionary_store import DEFAULT_DICTIONARY_PATH
from orchestrator import POLL_TIMEOUT_MS
from screen_layout import LIST_WIDTH

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "zidian")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DICTIONARY_PATH_DEFAULT = DEFAULT_DICTIONARY_PATH
POLL_TIMEOUT_MS_DEFAULT = POLL_TIMEOUT_MS
LIST_WIDTH_DEFAULT = LIST_WIDTH
LIST_WIDTH_MIN = 4


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def load_config():
    cfg = {
        "DICTIONARY_PATH": DICTIONARY_PATH_DEFAULT,
        "POLL_TIMEOUT_MS": POLL_TIMEOUT_MS_DEFAULT,
        "LIST_WIDTH": LIST_WIDTH_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg

    if not isinstance(data, dict):
        return cfg

    path = data.get("dictionary_path")
    if isinstance(path, str) and path.strip():
        cfg["DICTIONARY_PATH"] = os.path.expanduser(path.strip())

    timeout = data.get("poll_timeout_ms")
    if _is_int(timeout) and timeout > 0:
        cfg["POLL_TIMEOUT_MS"] = timeout

    width = data.get("list_width")
    if _is_int(width) and width >= LIST_WIDTH_MIN:
        cfg["LIST_WIDTH"] = width

    return cfg
