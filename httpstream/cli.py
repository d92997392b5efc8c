"""
Resolve a Range header against a local file and emit the response it would get.

Examples:
  http-stream song.mp3 --range "bytes=0-1023" --output head.bin
  http-stream song.mp3 --range "bytes=-500" --headers-only
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from httpstream.core import settings
from httpstream.core.errors import RangeError
from httpstream.services.stream_response import StreamResponse


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="http-stream",
        description="Print the status and headers of a range response for FILE, then write its body.",
    )
    ap.add_argument("file", help="Local file to serve.")
    ap.add_argument("--range", dest="range_header", default=None, help='Range header value, e.g. "bytes=200-499".')
    ap.add_argument("--mime", default=None, help="Content-Type override (default: guessed from the file name).")
    ap.add_argument(
        "--tolerate",
        action="store_true",
        default=settings.TOLERATE_RANGE_ERRORS,
        help="Fall back to the full file instead of failing on a bad range.",
    )
    ap.add_argument(
        "--echo-status",
        action="store_true",
        default=settings.ECHO_RESPONSE_CODE,
        help=f"Also print the status as {settings.RESPONSE_CODE_HEADER}.",
    )
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--output", "-o", default=None, help="Write the body here instead of stdout.")
    out.add_argument("--headers-only", action="store_true", help="Do not read the body at all.")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format="[%(levelname)s] %(name)s: %(message)s")

    try:
        response = StreamResponse(
            args.file,
            range_header=args.range_header,
            mime_type=args.mime,
            tolerate_errors=args.tolerate,
        )
    except RangeError as e:
        print(f"Range not satisfiable: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot open {args.file}: {e}", file=sys.stderr)
        return 1

    def write_header(name: str, value: str) -> None:
        print(f"{name}: {value}", file=sys.stderr)

    print(f"HTTP {response.status_code}", file=sys.stderr)
    if args.headers_only:
        if args.echo_status:
            write_header(settings.RESPONSE_CODE_HEADER, str(response.status_code))
        response.headers.flush(write_header)
        return 0

    try:
        if args.output:
            with open(args.output, "wb") as f:
                response.flush(write_header, f.write, echo_status=args.echo_status)
        else:
            response.flush(write_header, sys.stdout.buffer.write, echo_status=args.echo_status)
            sys.stdout.buffer.flush()
    except OSError as e:
        print(f"Read failed for {args.file}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
