"""
Keeplist Shared Kernel
======================

Code used by both the movies and the people list.

Architecture:
- core: EventBus, observers, configuration, exceptions
- domain: Entity base, identity generation, entity store
"""

__all__ = []
