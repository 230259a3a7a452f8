"""Movies list: a fixed catalogue with a favourite flag per film."""

from .catalog import ALL_FILMS, load_films
from .models import Film
from .store import FilmsStore
from .views import FilmListView, FilterMode, FilterModeState, favorites, non_favorites, select

__all__ = [
    "ALL_FILMS",
    "Film",
    "FilmListView",
    "FilmsStore",
    "FilterMode",
    "FilterModeState",
    "favorites",
    "load_films",
    "non_favorites",
    "select",
]
