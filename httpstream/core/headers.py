from __future__ import annotations

from typing import Callable, Iterable, Iterator, Union

Scalar = Union[str, int, float, bool]
HeaderWriter = Callable[[str, str], None]


class Header:
    """
    A single response header.

    Two headers are equal when their names match exactly; a header also
    compares equal to a plain string holding its name.
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: Scalar):
        self.name = name
        self.value = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError("a header name must be a string")
        self._name = name

    @property
    def value(self) -> Scalar:
        return self._value

    @value.setter
    def value(self, value: Scalar) -> None:
        if not isinstance(value, (str, int, float, bool)):
            raise TypeError("a header value must be a scalar")
        self._value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Header):
            return other.name == self.name
        if isinstance(other, str):
            return other == self.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Header({self._name!r}, {self._value!r})"

    def to_tuple(self) -> tuple[str, Scalar]:
        return (self._name, self._value)

    @classmethod
    def from_tuple(cls, item: tuple[str, Scalar]) -> "Header":
        name, value = item
        return cls(name, value)

    def flush(self, write_header: HeaderWriter) -> None:
        write_header(self._name, str(self._value))


HeaderKey = Union[int, str, Header]


class Headers:
    """
    Ordered header list with at most one entry per name.

    Entries are addressable by position, by name or by a Header. Assigning to
    an existing name replaces the value in place; a new name is appended.
    """

    def __init__(self, items: Iterable[Header | tuple[str, Scalar]] = ()):
        self._headers: list[Header] = []
        for item in items:
            header = item if isinstance(item, Header) else Header.from_tuple(item)
            self[header.name] = header

    def index_of(self, name: str | Header) -> int:
        for index, header in enumerate(self._headers):
            if header == name:
                return index
        return -1

    def _offset(self, key: HeaderKey) -> int:
        if isinstance(key, int) and not isinstance(key, bool):
            return key if 0 <= key < len(self._headers) else -1
        return self.index_of(key)

    # ---------- container protocol ----------

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (int, str, Header)):
            return False
        return self._offset(key) != -1

    def __getitem__(self, key: HeaderKey) -> Header:
        index = self._offset(key)
        if index == -1:
            raise KeyError(key)
        return self._headers[index]

    def get(self, key: HeaderKey, default: Header | None = None) -> Header | None:
        index = self._offset(key)
        return self._headers[index] if index != -1 else default

    def __setitem__(self, key: HeaderKey, value: Header | Scalar) -> None:
        index = self._offset(key)
        if isinstance(key, int) and not isinstance(key, bool):
            if index == -1:
                raise IndexError(key)
            name = self._headers[index].name
        else:
            name = key.name if isinstance(key, Header) else key

        if not isinstance(value, Header):
            value = Header(name, value)
        elif isinstance(key, int):
            # replacing by position must not duplicate a name held elsewhere
            other = self.index_of(value.name)
            if other not in (-1, index):
                raise ValueError(f"header {value.name!r} already present at {other}")
        elif value.name != name:
            raise ValueError(f"header {value.name!r} cannot be stored under {name!r}")

        if index == -1:
            self._headers.append(value)
        else:
            self._headers[index] = value

    def __delitem__(self, key: HeaderKey) -> None:
        index = self._offset(key)
        if index == -1:
            raise KeyError(key)
        del self._headers[index]

    def __iter__(self) -> Iterator[Header]:
        return iter(list(self._headers))

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self.dump()!r})"

    # ---------- views / serialization ----------

    def items(self) -> list[tuple[str, str]]:
        return [(h.name, str(h.value)) for h in self._headers]

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def dump(self) -> list[tuple[str, Scalar]]:
        return [h.to_tuple() for h in self._headers]

    @classmethod
    def load(cls, items: Iterable[tuple[str, Scalar]]) -> "Headers":
        return cls(Header.from_tuple(tuple(item)) for item in items)

    def flush(self, write_header: HeaderWriter) -> None:
        for header in self._headers:
            header.flush(write_header)
