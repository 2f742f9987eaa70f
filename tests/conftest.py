"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest


def _split_into(data: bytes, size: int) -> list[bytes]:
    return [data[i : i + size] for i in range(0, len(data), size)]


@pytest.fixture
def split_into() -> Callable[[bytes, int], list[bytes]]:
    """Return a helper cutting *data* into chunks of *size* bytes."""
    return _split_into
