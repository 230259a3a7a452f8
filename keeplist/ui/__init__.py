"""Flet presentation layer. Renders the state layer and forwards intents."""
