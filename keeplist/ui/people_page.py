"""People page: person list with a create/update dialog."""

from __future__ import annotations

from typing import Optional, Tuple

import flet as ft

from keeplist.people.draft import PersonDraft
from keeplist.people.models import Person
from keeplist.state.people_state import PeopleState
from keeplist.ui.theme import (
    BUTTON_ICON_ACTIVE, DELETE_ICON,
    TEXT_PLACEHOLDER, TEXT_SUBTITLE, TEXT_TITLE,
)


def open_person_dialog(page: ft.Page, state: PeopleState, person: Optional[Person] = None) -> None:
    """Show the create (``person`` None) or update dialog.

    The text fields and the draft belong to this one dialog.
    """
    draft = PersonDraft.for_update(person) if person else PersonDraft.for_create()

    name_field = ft.TextField(label="Enter name here...", value=draft.name_text, autofocus=True)
    age_field = ft.TextField(
        label="Enter age here...",
        value=draft.age_text,
        keyboard_type=ft.KeyboardType.NUMBER,
    )

    def on_name_change(e: ft.ControlEvent) -> None:
        draft.name_text = e.control.value or ""

    def on_age_change(e: ft.ControlEvent) -> None:
        draft.age_text = e.control.value or ""

    name_field.on_change = on_name_change  # type: ignore[assignment]
    age_field.on_change = on_age_change  # type: ignore[assignment]

    def close_dialog(e: Optional[ft.ControlEvent] = None) -> None:
        dialog.open = False
        page.update()

    async def submit_dialog(e: ft.ControlEvent) -> None:
        if await state.submit(draft):
            close_dialog()
        else:
            age_field.error_text = None if draft.age is not None else "Age is required"
            name_field.error_text = None if draft.name is not None else "Name is required"
            page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Update a person" if draft.is_update else "Create a person"),
        content=ft.Column([name_field, age_field], tight=True, spacing=12),
        actions=[
            ft.TextButton("Cancel", on_click=close_dialog),
            ft.TextButton("Save", on_click=submit_dialog),
        ],
    )
    if dialog not in page.overlay:
        page.overlay.append(dialog)
    dialog.open = True
    page.update()


def _person_tile(page: ft.Page, state: PeopleState, person: Person) -> ft.ListTile:
    async def on_delete(e: ft.ControlEvent) -> None:
        await state.delete(person)

    def on_edit(e: ft.ControlEvent) -> None:
        open_person_dialog(page, state, person)

    return ft.ListTile(
        title=ft.Text(person.name, color=TEXT_TITLE),
        subtitle=ft.Text(f"{person.age} years old", color=TEXT_SUBTITLE),
        on_click=on_edit,
        trailing=ft.IconButton(
            icon=ft.Icons.DELETE_OUTLINE,
            icon_color=DELETE_ICON,
            tooltip="Delete",
            on_click=on_delete,
        ),
    )


def build_people_page(page: ft.Page, state: PeopleState) -> ft.Control:
    people_list = ft.ListView(expand=True, spacing=4)

    def _render(snapshot: Tuple[Person, ...]) -> None:
        if snapshot:
            people_list.controls = [_person_tile(page, state, person) for person in snapshot]
        else:
            people_list.controls = [ft.Text("No people yet", color=TEXT_PLACEHOLDER, italic=True)]
        try:
            page.update()
        except RuntimeError:
            pass

    state.store.subscribe(_render)
    _render(state.store.snapshot())

    return ft.Container(
        expand=True,
        padding=ft.padding.only(left=20, right=20, top=16, bottom=20),
        content=ft.Column(
            [
                ft.Row(
                    [
                        ft.Text("People", size=24, weight=ft.FontWeight.W_700, color=TEXT_TITLE),
                        ft.IconButton(
                            icon=ft.Icons.PERSON_ADD,
                            icon_color=BUTTON_ICON_ACTIVE,
                            tooltip="Add a person",
                            on_click=lambda e: open_person_dialog(page, state),
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                ),
                people_list,
            ],
            expand=True,
            spacing=16,
        ),
    )
