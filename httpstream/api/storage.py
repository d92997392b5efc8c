from __future__ import annotations

import os
from pathlib import Path

import anyio
from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import StreamingResponse

from httpstream.core import settings
from httpstream.core.errors import RangeError
from httpstream.services.content_reader import iter_content
from httpstream.services.stream_response import StreamResponse


router = APIRouter()


def _safe_storage_path(rel_path: str) -> Path:
    base = Path(settings.STORAGE_DIR).resolve()
    target = (base / rel_path).resolve()
    if not target.is_relative_to(base):
        raise HTTPException(status_code=404, detail="not found")
    return target


@router.get(f"{settings.STORAGE_BASE_URL}/{{rel_path:path}}")
@router.head(f"{settings.STORAGE_BASE_URL}/{{rel_path:path}}")
async def get_storage_file(rel_path: str, request: Request) -> Response:
    """
    Serve files under STORAGE_DIR with HTTP Range (bytes) support.
    """
    path = _safe_storage_path(rel_path)
    try:
        stat_result = await anyio.to_thread.run_sync(os.stat, path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="not found")

    size = stat_result.st_size
    try:
        stream = StreamResponse(
            path,
            range_header=request.headers.get("range"),
            tolerate_errors=settings.TOLERATE_RANGE_ERRORS,
            file_length=size,
        )
    except RangeError:
        # Per RFC, include Content-Range: bytes */<size> for 416
        return Response(
            status_code=416,
            headers={
                "Content-Range": f"bytes */{size}",
                "Accept-Ranges": "bytes",
            },
        )

    headers = stream.headers.to_dict()
    if settings.ECHO_RESPONSE_CODE:
        headers[settings.RESPONSE_CODE_HEADER] = str(stream.status_code)

    if request.method.upper() == "HEAD":
        # HEAD returns headers only; keep behavior aligned with GET.
        return Response(status_code=stream.status_code, headers=headers)

    return StreamingResponse(
        iter_content(path, start=stream.offset, count=stream.length),
        status_code=stream.status_code,
        headers=headers,
    )
