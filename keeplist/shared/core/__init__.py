"""
Shared Core Module
==================

Event system, observers, configuration and exceptions.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Observers
from .observable import Listeners, ObservableValue, Subscription

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    get_config_manager,
    get_config,
    ValidationLevel,
)

# Errors
from .exceptions import (
    KeeplistError,
    ImmutableFieldError,
    StoreNotInitializedError,
    StoreAlreadyInitializedError,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Observers
    "Listeners",
    "ObservableValue",
    "Subscription",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "get_config_manager",
    "get_config",
    "ValidationLevel",
    # Errors
    "KeeplistError",
    "ImmutableFieldError",
    "StoreNotInitializedError",
    "StoreAlreadyInitializedError",
]
