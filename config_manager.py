# config_manager.py
import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from errors import ConfigError
from search_config import CONFIG_FILE, OUTPUT_FILE

PROGRAM_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Config:
    api_key: str
    config_path: Path
    output_path: Path


def _resolve(name, base_dir: Path) -> Path:
    path = Path(name)
    if path.is_absolute():
        return path
    return base_dir / path


def load_config(filename=None, base_dir=None, output=None) -> Config:
    """
    Read the JSON config file and return an immutable Config.

    `filename` defaults to MOVIE_SEARCH_CONFIG (from the environment or .env)
    and then to config.json. Relative names resolve against `base_dir`, which
    defaults to the directory this program is installed in.
    """
    load_dotenv()
    base_dir = Path(base_dir) if base_dir else PROGRAM_DIR

    name = filename or os.getenv("MOVIE_SEARCH_CONFIG", "").strip() or CONFIG_FILE
    config_path = _resolve(name, base_dir)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"файл {config_path} не знайдено") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"некоректний JSON у файлі {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"не вдалося прочитати {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError("конфігурація має бути JSON-об'єктом")

    api_key = raw.get("apiKey")
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigError("API ключ не знайдено в конфігураційному файлі")

    output_name = output or os.getenv("MOVIE_SEARCH_OUTPUT", "").strip() or OUTPUT_FILE

    return Config(
        api_key=api_key,
        config_path=config_path,
        output_path=_resolve(output_name, base_dir),
    )
