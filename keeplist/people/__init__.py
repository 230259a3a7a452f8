"""People list: persons created, edited and deleted by the user."""

from .draft import PersonDraft, parse_age
from .models import Person
from .store import PeopleStore

__all__ = ["Person", "PeopleStore", "PersonDraft", "parse_age"]
