# movie_search.py
import sys
import argparse
import logging

from config_manager import load_config
from errors import ConfigError, EmptyQueryError, MovieSearchError
from file_manager import persist
from logging_config import setup_logging
from prompt_helper import ask, require_query
from search_config import CONFIG_ERROR_LABEL, EMPTY_QUERY_MESSAGE, RUN_ERROR_LABEL
from summary_printer import display
from tmdb_manager import search_movies

LOGGER = logging.getLogger(__name__)

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movie-search",
        description="Search TMDb for a movie title and save the full response as JSON.",
    )
    parser.add_argument("--config", default=None, help="Config file (default: config.json next to the program).")
    parser.add_argument("--output", default=None, help="Response file (default: output.json next to the program).")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR (default: LOG_LEVEL or WARNING).")
    return parser

def run_search(config, input_func=input):
    query = require_query(ask(input_func=input_func))
    print(f'\nПошук фільмів за запитом: "{query}"')

    data = search_movies(query, config.api_key)

    persist(data, config.output_path)
    display(data, output_name=config.output_path.name)
    return data

def main(argv=None, input_func=input) -> int:
    args = _build_arg_parser().parse_args(argv)

    try:
        print("Запуск програми для пошуку фільмів...")
        config = load_config(args.config, output=args.output)
        # .env has been read by now, so LOG_LEVEL from it applies
        setup_logging(level=args.log_level)
        LOGGER.debug("Loaded config from %s", config.config_path)
        print("Конфігурацію успішно завантажено")
        run_search(config, input_func=input_func)
    except ConfigError as exc:
        print(f"{CONFIG_ERROR_LABEL} {exc}", file=sys.stderr)
        return 1
    except EmptyQueryError:
        print(EMPTY_QUERY_MESSAGE, file=sys.stderr)
        return 1
    except MovieSearchError as exc:
        LOGGER.debug("Search failed", exc_info=True)
        print(f"{RUN_ERROR_LABEL} {exc}", file=sys.stderr)
        return 1

    return 0

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
