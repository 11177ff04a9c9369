# src/taskdeck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends and the presentation layer swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

ConfirmFn = Callable[[str], bool]
# Presentation-side yes/no prompt: receives the question, returns the user's answer.

Clock = Callable[[], int]
# Current time in integer milliseconds since the epoch.


class KeyValueStore(Protocol):
    """
    Durable string blob store keyed by name.

    get_item returns None when the key is absent.
    set_item overwrites; it raises when the backend rejects the write.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...
