# file_manager.py
import json
import sys
import logging
from pathlib import Path

from errors import PersistenceError
from search_config import JSON_INDENT, SAVE_ERROR_LABEL

LOGGER = logging.getLogger(__name__)


def write_json(data, path):
    out_path = Path(path)
    try:
        text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
    except (OSError, TypeError, ValueError) as e:
        raise PersistenceError(str(e)) from e


def persist(data, path) -> bool:
    """Write the full response to `path`. Failures are reported, never raised."""
    try:
        write_json(data, path)
    except PersistenceError as e:
        print(f"{SAVE_ERROR_LABEL} {e}", file=sys.stderr)
        LOGGER.warning("Could not persist response to %s: %s", path, e)
        return False

    print(f"Результати успішно збережено у файл {Path(path).name}")
    return True
