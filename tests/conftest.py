"""Shared fixtures for the range and storage tests."""

import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_bytes() -> bytes:
    # 1000 bytes, every offset distinguishable modulo 256
    return bytes(i % 256 for i in range(1000))


@pytest.fixture
def sample_file(tmp_path, sample_bytes):
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path
