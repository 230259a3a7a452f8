"""Exception classes for keeplist.

Lookup misses and incomplete dialog input are not errors here; stores and
drafts report them through return values. These exceptions mark programming
mistakes.
"""


class KeeplistError(Exception):
    """Base exception for all keeplist errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ImmutableFieldError(KeeplistError):
    """Raised when a copy-with asks to change a field that may not change"""

    def __init__(self, entity_type: str, fields: list[str]):
        details = {"entity_type": entity_type, "fields": fields}
        msg = f"{entity_type} does not allow changing {', '.join(sorted(fields))}"
        super().__init__(msg, details)


class StoreNotInitializedError(KeeplistError, RuntimeError):
    """Raised when the global store is read before ``Store.initialize()``"""

    def __init__(self) -> None:
        super().__init__("Store not initialized! Call Store.initialize() first.")


class StoreAlreadyInitializedError(KeeplistError, RuntimeError):
    """Raised when ``Store.initialize()`` runs twice"""

    def __init__(self) -> None:
        super().__init__("Store already initialized!")
