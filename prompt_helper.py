# prompt_helper.py
from errors import EmptyQueryError
from search_config import PROMPT_TEXT, EMPTY_QUERY_MESSAGE


def ask(prompt_text=PROMPT_TEXT, input_func=input) -> str:
    """Block for one line of user input and return it untrimmed."""
    try:
        return input_func(prompt_text)
    except EOFError:
        # stdin closed before a line arrived
        return ""


def require_query(raw: str) -> str:
    if not raw or not raw.strip():
        raise EmptyQueryError(EMPTY_QUERY_MESSAGE)
    return raw
