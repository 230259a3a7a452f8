from __future__ import annotations

import pytest
from pydantic import ValidationError

from keeplist.films import ALL_FILMS, Film, FilmsStore, load_films
from keeplist.shared.core.exceptions import ImmutableFieldError


def test_film_equality_ignores_title_and_description():
    a = Film(id="1", title="A", description="first", is_favorite=False)
    b = Film(id="1", title="B", description="second", is_favorite=False)
    c = Film(id="1", title="A", description="first", is_favorite=True)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != Film(id="2", title="A", description="first", is_favorite=False)
    assert len({a, b, c}) == 2


def test_with_favorite_keeps_identity_and_other_fields():
    film = ALL_FILMS[1]
    flipped = film.with_favorite(True)

    assert flipped is not film
    assert flipped.id == film.id
    assert flipped.title == film.title
    assert flipped.description == film.description
    assert flipped.is_favorite is True
    assert film.is_favorite is False


def test_identity_survives_chained_copies():
    film = ALL_FILMS[0]
    for flag in (True, False, True, True, False):
        film = film.with_favorite(flag)
    assert film.id == ALL_FILMS[0].id


def test_films_are_frozen():
    film = ALL_FILMS[0]
    with pytest.raises(ValidationError):
        film.is_favorite = True  # type: ignore[misc]


@pytest.mark.parametrize("field", ["id", "title", "description", "rating"])
def test_with_changes_rejects_fixed_or_unknown_fields(field):
    with pytest.raises(ImmutableFieldError) as excinfo:
        ALL_FILMS[0].with_changes(**{field: "x"})
    assert excinfo.value.details["fields"] == [field]


def test_seed_catalogue():
    assert [film.id for film in ALL_FILMS] == ["1", "2", "3", "4"]
    assert ALL_FILMS[1].title == "The Godfather"
    assert ALL_FILMS[3].description == "Description for The Dark Knight"
    assert not any(film.is_favorite for film in ALL_FILMS)


def test_toggle_film_two(films_store, recorder):
    films_store.subscribe(recorder)

    assert films_store.toggle("2") is True

    snapshot = films_store.snapshot()
    assert [film.id for film in snapshot] == ["1", "2", "3", "4"]
    assert [film.is_favorite for film in snapshot] == [False, True, False, False]
    assert snapshot[1].title == "The Godfather"
    assert recorder.count == 1
    assert recorder.calls[0] == snapshot


def test_update_with_current_flag_publishes_nothing(films_store, recorder):
    films_store.subscribe(recorder)

    assert films_store.update(ALL_FILMS[0], False) is False
    assert recorder.count == 0
    assert films_store.snapshot() == ALL_FILMS


def test_update_accepts_film_or_id(films_store):
    films_store.update(ALL_FILMS[2], True)
    films_store.update("4", True)
    assert [film.is_favorite for film in films_store] == [False, False, True, True]


def test_unknown_film_is_ignored(films_store, recorder):
    films_store.subscribe(recorder)

    assert films_store.toggle("99") is False
    assert films_store.update("99", True) is False
    assert recorder.count == 0


def test_toggle_twice_restores_flag(films_store):
    films_store.toggle("3")
    films_store.toggle("3")
    assert films_store.get("3").is_favorite is False


def test_load_films_from_yaml(tmp_path):
    seed = tmp_path / "films.yaml"
    seed.write_text(
        "- id: 10\n"
        "  title: Alien\n"
        "- id: 11\n"
        "  title: Heat\n"
        "  description: Crime\n"
        "  is_favorite: true\n"
        "- title: No id here\n"
        "- id: 10\n"
        "  title: Duplicate\n",
        encoding="utf-8",
    )

    films = load_films(seed)

    assert [film.id for film in films] == ["10", "11"]
    assert films[0].description == "Description for Alien"
    assert films[1].is_favorite is True
    store = FilmsStore(films)
    assert len(store) == 2


def test_load_films_falls_back_to_builtin(tmp_path):
    assert load_films(None) == ALL_FILMS
    assert load_films(tmp_path / "missing.yaml") == ALL_FILMS

    broken = tmp_path / "broken.yaml"
    broken.write_text("films: [unclosed", encoding="utf-8")
    assert load_films(broken) == ALL_FILMS

    mapping = tmp_path / "mapping.yaml"
    mapping.write_text("id: 1\n", encoding="utf-8")
    assert load_films(mapping) == ALL_FILMS

    not_utf8 = tmp_path / "latin1.yaml"
    not_utf8.write_bytes(b"- id: 1\n  title: \xff\xfe\n")
    assert load_films(not_utf8) == ALL_FILMS

    assert load_films(tmp_path) == ALL_FILMS


def test_load_films_skips_records_with_non_string_keys(tmp_path):
    seed = tmp_path / "films.yaml"
    seed.write_text(
        "- 1: x\n"
        "- id: 7\n"
        "  title: Ran\n",
        encoding="utf-8",
    )

    films = load_films(seed)

    assert [film.id for film in films] == ["7"]
    assert films[0].is_favorite is False


def test_favorite_flag_is_required():
    with pytest.raises(ValidationError):
        Film(id="9", title="Missing flag", description="none")
