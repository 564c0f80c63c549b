"""Unique opaque keys for blocks, spans, table rows and cells"""

from typing import Callable
from uuid import uuid4


KeyGen = Callable[[], str]


def new_key() -> str:
    """Return a fresh 32-char hex key (full uuid4). Safe to call concurrently, no counter."""
    return uuid4().hex
