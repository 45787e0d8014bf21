# errors.py
class MovieSearchError(Exception):
    pass

class ConfigError(MovieSearchError):
    pass

class EmptyQueryError(MovieSearchError):
    pass

class ApiError(MovieSearchError):
    """TMDb answered, but not with 200."""

    def __init__(self, status_code: int, status_message=None):
        self.status_code = status_code
        self.status_message = status_message
        super().__init__(f"Помилка API: {status_code} - {status_message}")

class NetworkError(MovieSearchError):
    """No response reached us (DNS, refused connection, timeout)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Помилка мережі: {message}")

class PersistenceError(MovieSearchError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
