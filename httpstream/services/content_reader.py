from __future__ import annotations

from pathlib import Path
from typing import AsyncIterator

import anyio

from httpstream.core import settings
from httpstream.core.errors import ShortReadError


def read_content(path: str | Path, offset_start: int, content_length: int) -> bytes:
    """
    Return exactly `content_length` bytes starting at `offset_start`.

    One seek, one read. A short read raises ShortReadError instead of padding
    or retrying; open/seek/read failures propagate as OSError.
    """
    if content_length <= 0:
        return b""

    with open(path, "rb") as f:
        if offset_start > 0:
            f.seek(offset_start)
        content = f.read(content_length)

    if len(content) != content_length:
        raise ShortReadError(str(path), expected=content_length, got=len(content))
    return content


async def aread_content(path: str | Path, offset_start: int, content_length: int) -> bytes:
    if content_length <= 0:
        return b""

    async with await anyio.open_file(path, mode="rb") as f:
        if offset_start > 0:
            await f.seek(offset_start)
        content = await f.read(content_length)

    if len(content) != content_length:
        raise ShortReadError(str(path), expected=content_length, got=len(content))
    return content


async def iter_content(
    path: str | Path,
    *,
    start: int,
    count: int,
    chunk_size: int | None = None,
) -> AsyncIterator[bytes]:
    """Stream `count` bytes from `start` in chunks, for responses that must not buffer the body."""
    chunk_size = chunk_size or settings.STREAM_CHUNK_SIZE
    if count <= 0:
        return

    async with await anyio.open_file(path, mode="rb") as f:
        if start > 0:
            await f.seek(start)
        remaining = count
        while remaining > 0:
            chunk = await f.read(min(chunk_size, remaining))
            if not chunk:
                raise ShortReadError(str(path), expected=count, got=count - remaining)
            remaining -= len(chunk)
            yield chunk
