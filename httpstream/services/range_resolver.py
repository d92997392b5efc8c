from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from mimetypes import guess_type
from pathlib import Path
from typing import Callable, Optional, Tuple

from httpstream.core import settings
from httpstream.core.errors import (
    InvalidRangeOrder,
    MalformedRangeSpec,
    MissingRangeBounds,
    NegativeRangeBound,
    RangeError,
    UnsupportedRangeUnit,
)

logger = logging.getLogger(__name__)

RANGE_UNIT = "bytes"

MimeSniffer = Callable[[str], Optional[str]]

# A '-' glued to digits is a sign: "-5-10" -> ("-5", "10"), "-100" -> ("", "100").
_RANGE_PAIR = re.compile(r"^\s*(-?\d+)?\s*-\s*(-?\d+)?\s*$", re.ASCII)


@dataclass(frozen=True)
class ResolvedRange:
    """
    status_code: 200 for a full response, 206 once a bytes range was recognised
    offset_start / offset_end: inclusive byte window into the file
    content_length: number of bytes in the window (0 for an empty file)
    file_length: total size of the file
    mime_type: value for Content-Type
    """
    status_code: int
    offset_start: int
    offset_end: int
    content_length: int
    file_length: int
    mime_type: str

    @property
    def is_partial(self) -> bool:
        return self.status_code == 206

    @property
    def content_range(self) -> str:
        return f"{RANGE_UNIT} {self.offset_start}-{self.offset_end}/{self.file_length}"

    def header_items(self) -> list[tuple[str, str | int]]:
        return [
            ("Accept-Ranges", RANGE_UNIT),
            ("Content-Range", self.content_range),
            ("Content-Length", self.content_length),
            ("Content-Type", self.mime_type),
        ]


def guess_mime(path: str | Path) -> str | None:
    return guess_type(str(path))[0]


def resolve_mime(
    path: str | Path | None = None,
    mime_type: str | None = None,
    sniffer: MimeSniffer | None = None,
) -> str:
    """Explicit type first, then the sniffer, then the configured default."""
    if mime_type:
        return mime_type
    if sniffer is not None and path is not None:
        sniffed = sniffer(str(path))
        if sniffed:
            return sniffed
    return settings.DEFAULT_MIME_TYPE


def format_range_header(start: int, end: int | None = None) -> str:
    if start < 0:
        raise ValueError("start must be >= 0")
    if end is not None and end < start:
        raise ValueError("end must be >= start")
    return f"{RANGE_UNIT}={start}-" if end is None else f"{RANGE_UNIT}={start}-{end}"


def _split_range_header(range_header: str) -> Tuple[str, str]:
    # "bytes=0-1=junk" keeps only the first two segments
    parts = range_header.strip().split("=")
    unit = parts[0].strip()
    pair = parts[1] if len(parts) > 1 else ""
    return unit, pair


def _parse_bounds(pair: str, *, header: str) -> Tuple[Optional[int], Optional[int]]:
    if "," in pair:
        raise MalformedRangeSpec("multiple ranges are not supported", header=header)
    if not pair.strip():
        raise MissingRangeBounds("range cannot be missing both bounds", header=header)

    m = _RANGE_PAIR.match(pair)
    if not m:
        raise MalformedRangeSpec(f"invalid range spec {pair!r}", header=header)

    start_s, end_s = m.group(1), m.group(2)
    if start_s is None and end_s is None:
        raise MissingRangeBounds("range cannot be missing both bounds", header=header)

    try:
        start = int(start_s) if start_s is not None else None
        end = int(end_s) if end_s is not None else None
    except ValueError:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise MalformedRangeSpec("range bound is too large", header=header)
    if (start is not None and start < 0) or (end is not None and end < 0):
        raise NegativeRangeBound("range bounds cannot be negative", header=header)
    return start, end


def _window(start: Optional[int], end: Optional[int], *, file_length: int, header: str) -> Tuple[int, int]:
    offset_start, offset_end = 0, file_length - 1

    if start is None:
        # lone trailing number counts bytes from the end of the file
        offset_start = file_length - end
    elif end is None:
        offset_start = start
    else:
        offset_start, offset_end = start, end

    offset_start = max(offset_start, 0)
    offset_end = min(offset_end, file_length - 1)

    if file_length > 0 and offset_start > offset_end:
        raise InvalidRangeOrder(
            f"range {offset_start}-{offset_end} is not satisfiable for {file_length} bytes",
            header=header,
        )
    return offset_start, offset_end


def resolve_range(
    file_length: int,
    mime_type: str | None = None,
    range_header: str | None = None,
    tolerate_errors: bool = False,
) -> ResolvedRange:
    """
    Resolve a Range header against a file of `file_length` bytes.

    Raises a RangeError subclass for a rejected header unless `tolerate_errors`
    is set. In tolerant mode a malformed bytes range falls back to the whole
    file but still reports 206; an unsupported unit is ignored and reports 200.
    """
    if file_length < 0:
        raise ValueError("file_length must be >= 0")

    mime = mime_type or settings.DEFAULT_MIME_TYPE
    status_code = 200
    offset_start, offset_end = 0, file_length - 1

    if range_header:
        unit, pair = _split_range_header(range_header)
        if unit == RANGE_UNIT:
            try:
                start, end = _parse_bounds(pair, header=range_header)
                offset_start, offset_end = _window(start, end, file_length=file_length, header=range_header)
            except RangeError as exc:
                if not tolerate_errors:
                    raise
                logger.warning("Ignoring invalid range %r: %s", range_header, exc)
                offset_start, offset_end = 0, file_length - 1
            status_code = 206
        elif not tolerate_errors:
            raise UnsupportedRangeUnit(unit, header=range_header)
        else:
            logger.warning("Ignoring range with unsupported unit %r", unit)

    if file_length == 0:
        offset_start, offset_end, content_length = 0, 0, 0
    else:
        content_length = offset_end - offset_start + 1

    resolved = ResolvedRange(
        status_code=status_code,
        offset_start=offset_start,
        offset_end=offset_end,
        content_length=content_length,
        file_length=file_length,
        mime_type=mime,
    )
    logger.debug("Resolved range %r -> %s", range_header, resolved)
    return resolved
