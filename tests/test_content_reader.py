import pytest

from httpstream.core.errors import ShortReadError
from httpstream.services.content_reader import aread_content, iter_content, read_content
from httpstream.services.range_resolver import resolve_range


@pytest.mark.parametrize("header", ["bytes=0-0", "bytes=200-499", "bytes=100-", "bytes=-100", None])
def test_read_matches_resolved_window(sample_file, sample_bytes, header):
    resolved = resolve_range(len(sample_bytes), None, header)
    content = read_content(sample_file, resolved.offset_start, resolved.content_length)
    assert len(content) == resolved.content_length
    assert content == sample_bytes[resolved.offset_start:resolved.offset_end + 1]


def test_zero_length_never_opens_file(tmp_path):
    assert read_content(tmp_path / "missing.bin", 0, 0) == b""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_content(tmp_path / "missing.bin", 0, 10)


def test_short_read_is_an_error(sample_file):
    with pytest.raises(ShortReadError) as excinfo:
        read_content(sample_file, 990, 20)
    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.expected == 20
    assert excinfo.value.got == 10


@pytest.mark.anyio
async def test_async_read(sample_file, sample_bytes):
    assert await aread_content(sample_file, 10, 5) == sample_bytes[10:15]
    assert await aread_content(sample_file, 0, 0) == b""
    with pytest.raises(ShortReadError):
        await aread_content(sample_file, 999, 2)


@pytest.mark.anyio
async def test_iter_content_chunks(sample_file, sample_bytes):
    chunks = [chunk async for chunk in iter_content(sample_file, start=5, count=250, chunk_size=100)]
    assert [len(c) for c in chunks] == [100, 100, 50]
    assert b"".join(chunks) == sample_bytes[5:255]


@pytest.mark.anyio
async def test_iter_content_short_file(sample_file):
    with pytest.raises(ShortReadError):
        async for _ in iter_content(sample_file, start=900, count=200, chunk_size=64):
            pass
