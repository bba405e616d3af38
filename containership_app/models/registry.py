"""
Process-wide container serial number allocation.
"""

from __future__ import annotations

import threading

from containership_app.config.limits import CONTAINER_ID_PREFIX


class ContainerIdRegistry:
    """
    Monotonic counter shared by every container type.

    The Nth container constructed against a registry gets sequence N,
    whatever its type, so ids read KON-C-1, KON-G-2, KON-L-3, ...
    """

    def __init__(self, start: int = 1, prefix: str = CONTAINER_ID_PREFIX) -> None:
        self._start = start
        self._next = start
        self._prefix = prefix
        self._lock = threading.Lock()

    @property
    def next_sequence(self) -> int:
        return self._next

    def next_id(self, type_code: str) -> str:
        with self._lock:
            sequence = self._next
            self._next += 1
        return f"{self._prefix}-{type_code}-{sequence}"

    def reset(self, start: int | None = None) -> None:
        with self._lock:
            if start is not None:
                self._start = start
            self._next = self._start


default_registry = ContainerIdRegistry()
