# tests/test_console_connector.py

from __future__ import annotations

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.connectors.console_connector import ConsoleNotifier, run_console_loop
from tasklist.core.controller import EMPTY_TASK_MESSAGE
from tasklist.core.state import AppState

from .fakes import RecordingNotifier, ScriptedInput


def test_console_session_add_empty_remove_exit(state: AppState, notifier: RecordingNotifier) -> None:
    reader = ScriptedInput(["Buy milk", "  ", "Walk dog", "/rm 1", "/exit", "never read"])
    out: list[str] = []

    run_console_loop(state, read_line=reader, write=out.append)

    assert state.storage.load() == ["Walk dog"]
    assert state.page.task_list.texts() == ["Walk dog"]
    assert notifier.alerts == [EMPTY_TASK_MESSAGE]
    assert reader.prompts == ["> "] * 5
    assert "Removed: Buy milk" in out


def test_console_stops_on_eof_and_survives_unknown_command(state: AppState) -> None:
    reader = ScriptedInput(["/bogus", "task"])
    out: list[str] = []

    run_console_loop(state, read_line=reader, write=out.append)

    assert any("Unknown command" in line for line in out)
    assert state.storage.load() == ["task"]


def test_console_reports_crashing_command(state: AppState, monkeypatch) -> None:
    from tasklist.connectors import console_connector

    def boom(state, line, emit=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(console_connector.command_registry, "handle", boom)
    out: list[str] = []

    run_console_loop(state, read_line=ScriptedInput(["/list"]), write=out.append)

    assert "Internal error while handling a command." in out


def test_console_notifier_blocks_until_enter() -> None:
    reader = ScriptedInput([""])
    out: list[str] = []

    ConsoleNotifier(read_line=reader, write=out.append, blocking=True).alert(EMPTY_TASK_MESSAGE)

    assert out == [f"[!] {EMPTY_TASK_MESSAGE}"]
    assert len(reader.prompts) == 1


def test_console_notifier_non_blocking_and_eof() -> None:
    out: list[str] = []
    reader = ScriptedInput([])

    ConsoleNotifier(read_line=reader, write=out.append, blocking=False).alert("x")
    assert reader.prompts == []

    ConsoleNotifier(read_line=reader, write=out.append, blocking=True).alert("y")
    assert out == ["[!] x", "[!] y", ""]


def test_console_with_real_notifier_and_file_storage(settings) -> None:
    reader = ScriptedInput(["", "", "first", "/exit"])
    out: list[str] = []
    notifier = ConsoleNotifier(read_line=reader, write=out.append, blocking=True)

    state = create_initial_state(notifier=notifier, settings=settings)
    state.controller.load_tasks()
    run_console_loop(state, read_line=reader, write=out.append)

    assert f"[!] {EMPTY_TASK_MESSAGE}" in out
    assert settings.storage_path.exists()

    reloaded = create_initial_state(notifier=notifier, settings=settings)
    reloaded.controller.load_tasks()
    assert reloaded.page.task_list.texts() == ["first"]


def test_ctrl_c_at_blocking_notice_exits_loop(settings) -> None:
    reader = ScriptedInput(["", KeyboardInterrupt(), "never read"])
    out: list[str] = []
    notifier = ConsoleNotifier(read_line=reader, write=out.append, blocking=True)
    state = create_initial_state(notifier=notifier, settings=settings)

    run_console_loop(state, read_line=reader, write=out.append)

    assert f"[!] {EMPTY_TASK_MESSAGE}" in out
    assert reader.prompts == ["> ", "    (press Enter to continue) "]
    assert state.page.task_list.texts() == []


def test_console_notifier_lets_ctrl_c_through() -> None:
    notifier = ConsoleNotifier(read_line=ScriptedInput([KeyboardInterrupt()]), write=lambda _: None)
    with pytest.raises(KeyboardInterrupt):
        notifier.alert("x")


def test_console_reports_failed_add_and_keeps_running(state: AppState, monkeypatch) -> None:
    calls = {"n": 0}
    real_append = state.storage.append

    def flaky_append(task: str) -> None:
        calls["n"] += 1
        if calls["n"] == 1:
            raise OSError("disk full")
        real_append(task)

    monkeypatch.setattr(state.storage, "append", flaky_append)
    out: list[str] = []

    run_console_loop(state, read_line=ScriptedInput(["lost", "kept"]), write=out.append)

    assert any("Internal error while adding the task" in line for line in out)
    assert state.storage.load() == ["kept"]
