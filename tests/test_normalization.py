from __future__ import annotations

from pynetstate.ingestion.normalize import as_list, normalize_paths, normalize_technologies


def test_normalize_paths_drops_malformed_entries() -> None:
    assert normalize_paths(["/a", "", "  ", None, 5, "/b"]) == ["/a", "/b"]


def test_normalize_paths_keeps_first_duplicate() -> None:
    assert normalize_paths(["/b", "/a", "/b"]) == ["/b", "/a"]


def test_normalize_technologies() -> None:
    assert normalize_technologies(["wifi", "wifi", "", 3, "cellular"]) == {"wifi", "cellular"}


def test_as_list() -> None:
    assert as_list(("a", "b")) == ["a", "b"]
    assert as_list(["a"]) == ["a"]
    assert as_list("a") is None
    assert as_list(None) is None
