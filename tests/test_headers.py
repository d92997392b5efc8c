import pytest

from httpstream.core.headers import Header, Headers


def test_header_validates_name_and_value():
    with pytest.raises(TypeError):
        Header(1, "x")
    with pytest.raises(TypeError):
        Header("X-List", ["a"])
    header = Header("Content-Length", 10)
    with pytest.raises(TypeError):
        header.value = None


def test_header_equality_is_by_name():
    assert Header("Content-Type", "a") == Header("Content-Type", "b")
    assert Header("Content-Type", "a") == "Content-Type"
    assert Header("Content-Type", "a") != "content-type"


def test_set_appends_new_names_in_order():
    headers = Headers()
    headers["Accept-Ranges"] = "bytes"
    headers["Content-Length"] = 5
    assert [h.name for h in headers] == ["Accept-Ranges", "Content-Length"]
    assert len(headers) == 2


def test_set_existing_name_replaces_in_place():
    headers = Headers([("A", 1), ("B", 2), ("C", 3)])
    headers["B"] = 20
    assert headers.dump() == [("A", 1), ("B", 20), ("C", 3)]


def test_lookup_by_name_position_and_header():
    headers = Headers([("A", 1), ("B", 2)])
    assert headers["B"].value == 2
    assert headers[0].name == "A"
    assert headers[Header("B", "ignored")].value == 2
    assert headers.index_of("B") == 1
    assert headers.index_of("Z") == -1
    assert "A" in headers and 1 in headers
    assert "Z" not in headers and 5 not in headers


def test_missing_lookup():
    headers = Headers([("A", 1)])
    with pytest.raises(KeyError):
        headers["Z"]
    assert headers.get("Z") is None


def test_set_by_position_keeps_name():
    headers = Headers([("A", 1)])
    headers[0] = "one"
    assert headers.dump() == [("A", "one")]
    with pytest.raises(IndexError):
        headers[3] = "x"


def test_set_header_object():
    headers = Headers([("A", 1)])
    headers["A"] = Header("A", 9)
    assert headers["A"].value == 9


def test_delete():
    headers = Headers([("A", 1), ("B", 2)])
    del headers["A"]
    assert headers.dump() == [("B", 2)]
    with pytest.raises(KeyError):
        del headers["A"]


def test_views_stringify_values():
    headers = Headers([("Content-Length", 300), ("Content-Type", "audio/mpeg")])
    assert headers.items() == [("Content-Length", "300"), ("Content-Type", "audio/mpeg")]
    assert headers.to_dict() == {"Content-Length": "300", "Content-Type": "audio/mpeg"}


def test_dump_and_load():
    headers = Headers([("A", 1), ("B", "two")])
    restored = Headers.load(headers.dump())
    assert restored.dump() == headers.dump()
    assert Header.from_tuple(("X", 1)).to_tuple() == ("X", 1)


def test_flush_writes_in_order():
    written = []
    Headers([("A", 1), ("B", "b")]).flush(lambda name, value: written.append((name, value)))
    assert written == [("A", "1"), ("B", "b")]


def test_header_stored_under_other_name_is_rejected():
    headers = Headers([("A", 1), ("B", 2)])
    with pytest.raises(ValueError):
        headers["A"] = Header("B", 3)
    with pytest.raises(ValueError):
        headers["Z"] = Header("B", 3)
    assert headers.dump() == [("A", 1), ("B", 2)]


def test_header_set_by_position_keeps_names_unique():
    headers = Headers([("A", 1), ("B", 2)])
    with pytest.raises(ValueError):
        headers[0] = Header("B", 3)
    headers[0] = Header("C", 3)
    headers[1] = Header("B", 20)
    assert headers.dump() == [("C", 3), ("B", 20)]
