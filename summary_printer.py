# summary_printer.py
from search_config import (
    OUTPUT_FILE,
    SUMMARY_LIMIT,
    OVERVIEW_LIMIT,
    SEPARATOR,
    UNKNOWN_DATE,
    NO_OVERVIEW,
)


def format_overview(overview) -> str:
    if not overview:
        return NO_OVERVIEW
    # raw character cut, marker appended even for short overviews
    return overview[:OVERVIEW_LIMIT] + "..."


def format_movie(index: int, movie: dict) -> list[str]:
    return [
        f"{index}. Назва: {movie.get('title')}",
        f"   Дата виходу: {movie.get('release_date') or UNKNOWN_DATE}",
        f"   Рейтинг: {movie.get('vote_average')}/10 ({movie.get('vote_count')} голосів)",
        f"   Опис: {format_overview(movie.get('overview'))}",
    ]


def display(data: dict, output_name: str = OUTPUT_FILE, print_func=print) -> None:
    movies = data.get("results") or []

    if not movies:
        print_func("За вашим запитом не знайдено жодного фільму.")
        return

    print_func(f"\nЗнайдено {len(movies)} результатів. Показано перші {SUMMARY_LIMIT}:")
    print_func(SEPARATOR)

    for i, movie in enumerate(movies[:SUMMARY_LIMIT], start=1):
        for line in format_movie(i, movie):
            print_func(line)
        print_func(SEPARATOR)

    print_func(f"\nЗагальна кількість знайдених фільмів: {len(movies)}")
    print_func(f"Повна інформація збережена у файлі {output_name}")
