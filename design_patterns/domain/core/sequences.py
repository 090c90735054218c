"""Lazy number sequences for the iterator demonstration."""
from typing import Iterator


def numbers() -> Iterator[int]:
    """Yield the fixed sequence 1, 2."""
    yield 1
    yield 2
