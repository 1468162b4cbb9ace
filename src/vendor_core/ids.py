"""Identifier generators for new customers, sale records and line items."""

from __future__ import annotations

import itertools
import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def new_id() -> str:
    """Return a fresh uuid4 string."""
    return str(uuid.uuid4())


class SequentialIdGenerator:
    """Deterministic ids (``c1``, ``c2``, ...), handy for tests and fixtures."""

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
