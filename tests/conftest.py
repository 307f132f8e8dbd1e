"""Pytest configuration for psd-mask tests."""

import io
from typing import Callable, Generator

import pytest


@pytest.fixture
def stream() -> Generator[Callable[[bytes], io.BytesIO], None, None]:
    """Factory of binary streams that are closed after the test."""
    streams = []

    def factory(data: bytes) -> io.BytesIO:
        fp = io.BytesIO(data)
        streams.append(fp)
        return fp

    yield factory
    for fp in streams:
        fp.close()
