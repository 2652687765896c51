from collections.abc import Iterator
import io
import os
from pathlib import Path
import sys

import pytest
import readchar

from filecounter.core.counter import Counter
from filecounter.core.exceptions import TerminalError
from filecounter.core.session import CounterSession
from filecounter.core.store import CounterStore
from filecounter.core.terminal import StreamKeys, TerminalKeys, open_key_source, raw_mode


posix_only = pytest.mark.skipif(sys.platform == "win32", reason="termios is POSIX only")


class FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 99


@pytest.fixture
def fake_termios(monkeypatch: pytest.MonkeyPatch) -> list[tuple[int, int, list]]:
    import termios

    calls: list[tuple[int, int, list]] = []
    lflag = termios.ECHO | termios.ICANON | termios.ISIG

    monkeypatch.setattr(termios, "tcgetattr", lambda fd: [0, 0, 0, lflag, 0, 0, [b"\x00"] * 32])
    monkeypatch.setattr(
        termios, "tcsetattr", lambda fd, when, attrs: calls.append((fd, when, list(attrs)))
    )
    return calls


def test_stream_keys_read_one_character_at_a_time() -> None:
    keys = StreamKeys(io.StringIO("+-q"))

    assert [keys.read_key(), keys.read_key(), keys.read_key()] == ["+", "-", "q"]
    with pytest.raises(EOFError):
        keys.read_key()


def test_open_key_source_uses_stream_when_not_a_terminal() -> None:
    with open_key_source(io.StringIO("+")) as keys:
        assert isinstance(keys, StreamKeys)
        assert keys.interactive is False
        assert keys.read_key() == "+"


def test_open_key_source_rejects_closed_stream() -> None:
    stream = io.StringIO()
    stream.close()

    with pytest.raises(TerminalError):
        with open_key_source(stream):
            pass


@posix_only
def test_raw_mode_disables_echo_and_restores(fake_termios: list) -> None:
    import termios

    with raw_mode(FakeTty()):
        assert len(fake_termios) == 1
        raw_lflag = fake_termios[0][2][3]
        assert not raw_lflag & termios.ECHO
        assert not raw_lflag & termios.ICANON
        assert not raw_lflag & termios.ISIG
        assert fake_termios[0][2][6][termios.VMIN] == 1

    assert len(fake_termios) == 2
    restored_lflag = fake_termios[1][2][3]
    assert restored_lflag & termios.ECHO and restored_lflag & termios.ICANON
    assert restored_lflag & termios.ISIG


@posix_only
def test_raw_mode_restores_when_block_raises(fake_termios: list) -> None:
    import termios

    with pytest.raises(RuntimeError):
        with raw_mode(FakeTty()):
            raise RuntimeError("boom")

    assert len(fake_termios) == 2
    assert fake_termios[-1][2][3] & termios.ECHO


@posix_only
def test_raw_mode_on_non_terminal_raises_terminal_error() -> None:
    with pytest.raises(TerminalError):
        with raw_mode(io.StringIO()):
            pass


@posix_only
def test_open_key_source_reads_terminal_keys_from_the_stream(
    fake_termios: list, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail_readkey() -> str:
        raise AssertionError("terminal keys must come from the raw stream")

    monkeypatch.setattr(readchar, "readkey", fail_readkey)

    with open_key_source(FakeTty("+-Q")) as keys:
        assert isinstance(keys, TerminalKeys)
        assert keys.interactive is True
        assert [keys.read_key(), keys.read_key(), keys.read_key()] == ["+", "-", "Q"]

    assert len(fake_termios) == 2


@pytest.fixture
def pty_input() -> Iterator[tuple[int, io.TextIOWrapper]]:
    master, slave = os.openpty()
    stream = os.fdopen(slave, "r", encoding="utf-8")
    yield master, stream
    stream.close()
    os.close(master)


@posix_only
def test_queued_terminal_keys_are_all_counted(
    tmp_path: Path, pty_input: tuple[int, io.TextIOWrapper]
) -> None:
    master, stream = pty_input
    path = tmp_path / "count.txt"
    counter = Counter.open(CounterStore(path, sync=False))

    with open_key_source(stream) as keys:
        assert isinstance(keys, TerminalKeys)
        os.write(master, b"+" * 50 + b"-" * 5 + b"q")
        final = CounterSession(counter, keys).run()

    assert final == 45
    assert path.read_text(encoding="utf-8") == "45"


@posix_only
def test_ctrl_c_on_terminal_is_a_quit_keystroke(
    tmp_path: Path, pty_input: tuple[int, io.TextIOWrapper]
) -> None:
    master, stream = pty_input
    path = tmp_path / "count.txt"
    counter = Counter.open(CounterStore(path, sync=False))

    with open_key_source(stream) as keys:
        os.write(master, b"++\x03++q")
        final = CounterSession(counter, keys).run()

    assert final == 2
    assert path.read_text(encoding="utf-8") == "2"
