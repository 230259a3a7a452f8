"""Movies page: film list with favourite toggles and a filter dropdown."""

from __future__ import annotations

from typing import Tuple

import flet as ft

from keeplist.films.models import Film
from keeplist.films.views import FilterMode
from keeplist.state.films_state import FilmsState
from keeplist.ui.theme import (
    TEXT_PLACEHOLDER, TEXT_SUBTITLE, TEXT_TITLE,
    get_favorite_color,
)


def _film_tile(state: FilmsState, film: Film) -> ft.ListTile:
    async def on_toggle(e: ft.ControlEvent) -> None:
        await state.toggle_favorite(film.id)

    return ft.ListTile(
        title=ft.Text(film.title, color=TEXT_TITLE),
        subtitle=ft.Text(film.description, color=TEXT_SUBTITLE),
        trailing=ft.IconButton(
            icon=ft.Icons.FAVORITE if film.is_favorite else ft.Icons.FAVORITE_BORDER,
            icon_color=get_favorite_color(film.is_favorite),
            tooltip="Remove from favourites" if film.is_favorite else "Add to favourites",
            on_click=on_toggle,
        ),
    )


def build_films_page(page: ft.Page, state: FilmsState) -> ft.Control:
    film_list = ft.ListView(expand=True, spacing=4)

    def _render(visible: Tuple[Film, ...]) -> None:
        if visible:
            film_list.controls = [_film_tile(state, film) for film in visible]
        else:
            film_list.controls = [ft.Text("No films to show", color=TEXT_PLACEHOLDER, italic=True)]
        try:
            page.update()
        except RuntimeError:
            # Session destroyed
            pass

    async def on_filter_change(e: ft.ControlEvent) -> None:
        await state.change_filter(FilterMode(e.control.value))

    filter_dropdown = ft.Dropdown(  # type: ignore[call-arg]
        label="Show",
        value=state.filter_mode.value.value,
        options=[ft.dropdown.Option(key=mode.value, text=mode.label) for mode in FilterMode],
        width=200,
    )
    filter_dropdown.on_change = on_filter_change  # type: ignore[assignment]

    state.view.subscribe(_render)
    _render(state.view.visible())

    return ft.Container(
        expand=True,
        padding=ft.padding.only(left=20, right=20, top=16, bottom=20),
        content=ft.Column(
            [
                ft.Row(
                    [
                        ft.Text("Movies", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                        filter_dropdown,
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                film_list,
            ],
            expand=True,
            spacing=16,
        ),
    )
