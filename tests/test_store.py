from pathlib import Path

import pytest

from filecounter.core import store as store_module
from filecounter.core.exceptions import LoadParseError, PersistError, StorageError
from filecounter.core.store import CounterStore, parse_count


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("5", 5),
        ("-3", -3),
        ("+7", 7),
        ("42\n", 42),
        ("12  \nignored second line", 12),
        ("", 0),
        ("123456789012345678901234567890", 123456789012345678901234567890),
    ],
)
def test_parse_count_accepts_integers(content: str, expected: int) -> None:
    assert parse_count(content) == expected


@pytest.mark.parametrize("content", ["abc", " 5", "1_000", "5.0", "\n5", "0x10", "٣"])
def test_parse_count_rejects_other_content(content: str) -> None:
    assert parse_count(content) is None


def test_load_missing_file_is_zero(tmp_path: Path) -> None:
    store = CounterStore(tmp_path / "count.txt")

    assert store.load() == 0
    assert not store.path.exists()


def test_load_reads_existing_value(tmp_path: Path) -> None:
    path = tmp_path / "count.txt"
    path.write_text("5", encoding="utf-8")

    assert CounterStore(path).load() == 5


def test_load_rejects_non_numeric_content(tmp_path: Path) -> None:
    path = tmp_path / "count.txt"
    path.write_text("abc", encoding="utf-8")

    with pytest.raises(LoadParseError) as excinfo:
        CounterStore(path).load()

    assert excinfo.value.path == path
    assert excinfo.value.content == "abc"
    assert "does not contain a counter value" in str(excinfo.value)


def test_load_rejects_binary_content(tmp_path: Path) -> None:
    path = tmp_path / "count.txt"
    path.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(LoadParseError):
        CounterStore(path).load()


def test_load_directory_raises_storage_error(tmp_path: Path) -> None:
    with pytest.raises(StorageError) as excinfo:
        CounterStore(tmp_path).load()

    assert not isinstance(excinfo.value, LoadParseError)


def test_persist_overwrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "count.txt"
    path.write_text("123456\nstale", encoding="utf-8")
    store = CounterStore(path)

    store.persist(-1)

    assert path.read_text(encoding="utf-8") == "-1"
    assert store.load() == -1


def test_persist_syncs_unless_disabled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    synced: list[int] = []
    monkeypatch.setattr(store_module.os, "fsync", lambda fd: synced.append(fd))

    CounterStore(tmp_path / "a.txt").persist(1)
    CounterStore(tmp_path / "b.txt", sync=False).persist(1)

    assert len(synced) == 1


def test_persist_failure_raises_persist_error(tmp_path: Path) -> None:
    store = CounterStore(tmp_path / "missing" / "count.txt")

    with pytest.raises(PersistError) as excinfo:
        store.persist(3)

    assert "Unable to write counter file" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)
