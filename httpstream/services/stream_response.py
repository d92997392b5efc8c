from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Mapping, Optional

from httpstream.core import settings
from httpstream.core.headers import HeaderWriter, Headers
from httpstream.services.content_reader import aread_content, read_content
from httpstream.services.range_resolver import (
    MimeSniffer,
    ResolvedRange,
    guess_mime,
    resolve_mime,
    resolve_range,
)

BodyWriter = Callable[[bytes], object]
StatusSetter = Callable[[int], None]


def build_headers(resolved: ResolvedRange, headers: Optional[Headers] = None) -> Headers:
    """Upsert the four range headers, in order, into `headers` (or a new list)."""
    if headers is None:
        headers = Headers()
    for name, value in resolved.header_items():
        headers[name] = value
    return headers


class StreamResponse:
    """
    Range response for one file.

    The range is resolved on construction; the body is only read when
    get_content() is called, so headers can be sent before (or without) it.

    ATTENTION: multipart/x-byteranges is not supported, only a single range.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        range_header: str | None = None,
        mime_type: str | None = None,
        tolerate_errors: bool = False,
        sniffer: MimeSniffer | None = guess_mime,
        file_length: int | None = None,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.path = Path(path)

        if file_length is None:
            file_length = os.path.getsize(self.path)

        mime = resolve_mime(self.path, mime_type, sniffer)
        self.resolved = resolve_range(
            file_length,
            mime,
            range_header,
            tolerate_errors=tolerate_errors,
        )
        self.headers = build_headers(self.resolved)
        self.logger.debug(
            "%s %s -> %s (%s bytes)",
            self.path, range_header, self.resolved.status_code, self.resolved.content_length,
        )

    @classmethod
    def from_environ(cls, path: str | Path, environ: Mapping[str, str], **options) -> "StreamResponse":
        """Build from a WSGI/CGI style mapping, reading the range from HTTP_RANGE."""
        return cls(path, range_header=environ.get("HTTP_RANGE"), **options)

    # ---------- accessors ----------

    @property
    def status_code(self) -> int:
        return self.resolved.status_code

    @property
    def offset(self) -> int:
        return self.resolved.offset_start

    @property
    def length(self) -> int:
        return self.resolved.content_length

    @property
    def file_length(self) -> int:
        return self.resolved.file_length

    def get_content(self) -> bytes:
        return read_content(self.path, self.offset, self.length)

    async def aget_content(self) -> bytes:
        return await aread_content(self.path, self.offset, self.length)

    # ---------- output ----------

    def flush(
        self,
        write_header: HeaderWriter,
        write_body: BodyWriter,
        *,
        set_status: StatusSetter | None = None,
        echo_status: bool | None = None,
    ) -> None:
        """
        Push status, headers and body through caller-supplied writers, in that order.

        echo_status: also send the status as RESPONSE_CODE_HEADER
                     (defaults to settings.ECHO_RESPONSE_CODE)
        """
        if set_status is not None:
            set_status(self.status_code)
        if echo_status is None:
            echo_status = settings.ECHO_RESPONSE_CODE
        if echo_status:
            write_header(settings.RESPONSE_CODE_HEADER, str(self.status_code))

        self.headers.flush(write_header)
        write_body(self.get_content())
