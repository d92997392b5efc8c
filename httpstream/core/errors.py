from __future__ import annotations


class RangeError(ValueError):
    """
    Base class for every rejected Range header.

    header: the raw header text that failed (None when unknown)
    """

    def __init__(self, message: str, *, header: str | None = None):
        super().__init__(message)
        self.header = header


class MissingRangeBounds(RangeError):
    pass


class NegativeRangeBound(RangeError):
    pass


class InvalidRangeOrder(RangeError):
    pass


class UnsupportedRangeUnit(RangeError):
    def __init__(self, unit: str, *, header: str | None = None):
        super().__init__(f"unsupported range unit {unit!r}", header=header)
        self.unit = unit


class MalformedRangeSpec(RangeError):
    pass


class ShortReadError(OSError):
    """A single read returned fewer bytes than the resolved range promised."""

    def __init__(self, path: str, *, expected: int, got: int):
        super().__init__(f"short read on {path}: expected {expected} bytes, got {got}")
        self.path = path
        self.expected = expected
        self.got = got


__all__ = [
    "RangeError",
    "MissingRangeBounds",
    "NegativeRangeBound",
    "InvalidRangeOrder",
    "UnsupportedRangeUnit",
    "MalformedRangeSpec",
    "ShortReadError",
]
