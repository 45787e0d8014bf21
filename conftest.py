import json

import pytest


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


def make_movie(i, **overrides):
    movie = {
        "id": 1000 + i,
        "title": f"Фільм {i}",
        "release_date": f"20{i:02d}-01-01",
        "vote_average": 7.5,
        "vote_count": 100 + i,
        "overview": f"Опис фільму {i}",
    }
    movie.update(overrides)
    return movie


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("MOVIE_SEARCH_CONFIG", "MOVIE_SEARCH_OUTPUT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"apiKey": "secret-key", "extra": 1}), encoding="utf-8")
    return path
