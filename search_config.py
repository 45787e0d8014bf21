# search_config.py
# TMDb endpoint
TMDB_BASE = "https://api.themoviedb.org/3"
SEARCH_PATH = "/search/movie"
LANGUAGE = "uk-UA"

# Files (resolved next to the program)
CONFIG_FILE = "config.json"
OUTPUT_FILE = "output.json"
JSON_INDENT = 2

# Summary layout
SUMMARY_LIMIT = 5
OVERVIEW_LIMIT = 150
SEPARATOR = "----------------------------------------------"
UNKNOWN_DATE = "Невідомо"
NO_OVERVIEW = "Опис відсутній"

# Console labels
CONFIG_ERROR_LABEL = "Помилка завантаження конфігурації:"
EMPTY_QUERY_MESSAGE = "Пошуковий запит не може бути порожнім"
RUN_ERROR_LABEL = "Помилка виконання програми:"
SAVE_ERROR_LABEL = "Помилка збереження даних:"
PROMPT_TEXT = "Введіть назву фільму для пошуку: "
