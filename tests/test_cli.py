import io

import pytest

from dequemu.cli import execute, main, render
from dequemu.emulator import DequeEmulator, TEA


def test_execute_push_and_count():
    emu = DequeEmulator()
    assert execute(emu, "push_back foo") is None
    execute(emu, "push_back foo")
    assert emu.items == ["foo", "foo"]
    assert execute(emu, "count foo") == "2"


def test_execute_unknown_command_raises():
    with pytest.raises(ValueError):
        execute(DequeEmulator(), "fly away")


def test_execute_select_requires_number():
    with pytest.raises(ValueError):
        execute(DequeEmulator(), "select x")


def test_execute_select_and_sort():
    emu = DequeEmulator()
    execute(emu, "tea")
    execute(emu, "merge_sort")
    assert emu.items == sorted(TEA)
    execute(emu, "select 3")
    assert emu.pos == 3


def test_render_empty_marks_end():
    lines = render(DequeEmulator()).splitlines()
    assert lines[0] == "> end"
    assert "size: 0" in lines


def test_render_marks_current_row():
    emu = DequeEmulator()
    execute(emu, "push_back a")
    execute(emu, "push_back b")
    execute(emu, "next")
    lines = render(emu).splitlines()
    assert lines[1].startswith(">")
    assert lines[0].startswith(" ")
    assert lines[-1] == "current: b"


def test_main_reads_commands(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("push_back x\nbogus\ncount x\nquit\npush_back y\n"))
    assert main(["--seed", "1"]) == 0
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert "size: 1" in captured.out
    assert "size: 2" not in captured.out