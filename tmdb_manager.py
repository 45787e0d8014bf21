# tmdb_manager.py
import logging
from urllib.parse import quote

import requests

from errors import ApiError, NetworkError
from search_config import TMDB_BASE, SEARCH_PATH, LANGUAGE

LOGGER = logging.getLogger(__name__)

# characters encodeURIComponent-style quoting leaves alone
QUERY_SAFE = "-_.!~*'()"

def _status_message(response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("status_message")
    return None

def _get(url: str, session=None):
    getter = session.get if session is not None else requests.get
    try:
        # single attempt, transport defaults for timeout and redirects
        return getter(url)
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e

def build_search_url(query: str, api_key: str, language: str = LANGUAGE) -> str:
    return (
        f"{TMDB_BASE}{SEARCH_PATH}"
        f"?api_key={api_key}&query={quote(query, safe=QUERY_SAFE)}&language={language}"
    )

def search_movies(query: str, api_key: str, language: str = LANGUAGE, session=None) -> dict:
    url = build_search_url(query, api_key, language)
    r = _get(url, session=session)
    LOGGER.debug("GET %s%s -> %s", TMDB_BASE, SEARCH_PATH, r.status_code)

    if r.status_code != 200:
        raise ApiError(r.status_code, _status_message(r))

    try:
        return r.json()
    except ValueError as e:
        raise ApiError(r.status_code, f"некоректна JSON-відповідь: {e}") from e
