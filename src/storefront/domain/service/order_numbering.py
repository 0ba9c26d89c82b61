"""Domain service: order numbering.

Hands out sequential order ids. One generator is created by the
composition root and injected wherever orders are built, so tests can
use their own without touching shared state.
"""

from __future__ import annotations

import threading


class OrderIdGenerator:

    def __init__(self, start: int = 1) -> None:
        self._next_id = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next id; read-and-increment is atomic."""
        with self._lock:
            order_id = self._next_id
            self._next_id += 1
        return order_id
