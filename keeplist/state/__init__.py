"""Reactive state management for the keeplist UI.

Architecture:
- FilmsState: movies list store, filter mode and visible-films view
- PeopleState: people list store and create/update/delete intents
- Store: Service locator for accessing state from any component
"""

from .films_state import FilmsState
from .people_state import PeopleState
from .store import Store

__all__ = ["FilmsState", "PeopleState", "Store"]
