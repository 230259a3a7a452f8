from __future__ import annotations

from typing import Callable, Dict, List

import flet as ft

from keeplist.state import Store
from keeplist.ui.films_page import build_films_page
from keeplist.ui.people_page import build_people_page
from keeplist.ui.theme import (
    BG_CARD, BG_NAV, BORDER_DIVIDER, CYAN_PRIMARY,
    TEXT_BRIGHT, TEXT_MUTED,
)

NAV_ITEMS: List[Dict[str, str]] = [
    {"id": "movies", "label": "Movies", "icon": "movie"},
    {"id": "people", "label": "People", "icon": "people"},
]


def apply_shell_theme(page: ft.Page, theme_mode: str) -> None:
    """Dark-by-default theme seeded from the accent color."""
    page.theme = ft.Theme(color_scheme_seed=CYAN_PRIMARY, use_material3=True)
    page.dark_theme = ft.Theme(color_scheme_seed=CYAN_PRIMARY, use_material3=True)
    page.theme_mode = {
        "dark": ft.ThemeMode.DARK,
        "light": ft.ThemeMode.LIGHT,
    }.get(theme_mode, ft.ThemeMode.SYSTEM)
    page.padding = 0


def _nav_destinations(items: List[dict]) -> List[ft.NavigationRailDestination]:
    destinations: List[ft.NavigationRailDestination] = []
    for item in items:
        icon_name = str(item.get("icon", "list")).upper()
        icon = getattr(ft.Icons, icon_name, ft.Icons.LIST)
        destinations.append(
            ft.NavigationRailDestination(icon=icon, label=item.get("label", ""))
        )
    return destinations


def build_shell(page: ft.Page, store: Store) -> ft.View:
    apply_shell_theme(page, store.config.ui.theme_mode)

    builders: Dict[str, Callable[[], ft.Control]] = {
        "movies": lambda: build_films_page(page, store.films),
        "people": lambda: build_people_page(page, store.people),
    }
    # Pages are built once so their store subscriptions are not duplicated
    pages: Dict[str, ft.Control] = {}

    def _page_for(nav_id: str) -> ft.Control:
        if nav_id not in pages:
            pages[nav_id] = builders[nav_id]()
        return pages[nav_id]

    content_container = ft.Container(expand=True, bgcolor=BG_CARD)

    nav_rail = ft.NavigationRail(
        label_type=ft.NavigationRailLabelType.ALL,
    )
    nav_rail.bgcolor = BG_NAV
    nav_rail.indicator_color = CYAN_PRIMARY
    nav_rail.selected_label_text_style = ft.TextStyle(color=TEXT_BRIGHT)
    nav_rail.unselected_label_text_style = ft.TextStyle(color=TEXT_MUTED)
    nav_rail.min_width = 80
    nav_rail.destinations = _nav_destinations(NAV_ITEMS)
    nav_rail.selected_index = 0

    def _on_nav_change(e: ft.ControlEvent) -> None:
        idx = e.control.selected_index
        if idx is not None and 0 <= idx < len(NAV_ITEMS):
            content_container.content = _page_for(NAV_ITEMS[idx]["id"])
        page.update()

    nav_rail.on_change = _on_nav_change  # type: ignore[assignment]

    content_container.content = _page_for(NAV_ITEMS[0]["id"])

    return ft.View(
        route="/",
        controls=[
            ft.Row(
                [
                    nav_rail,
                    ft.VerticalDivider(width=1, color=BORDER_DIVIDER),
                    content_container,
                ],
                expand=True,
            )
        ],
        padding=0,
    )
