"""Tests for PrintingProcessManager."""

import pytest

from procfake.gateway.process_manager.fake import FakeProcessManager
from procfake.gateway.process_manager.printing import PrintingProcessManager


def test_run_sync_prints_command_and_delegates(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager(results={"git status": ["clean"]})
    manager = PrintingProcessManager(fake, script_mode=False, dry_run=False)

    result = manager.run_sync(["git", "status"])

    assert result.stdout == "clean"
    assert capsys.readouterr().out == "  $ git status\n"
    fake.verify_calls(["git status"])


@pytest.mark.asyncio
async def test_run_and_start_print_commands(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager(results={"make": ["ok"], "echo hi": ["hi"]})
    manager = PrintingProcessManager(fake, script_mode=False, dry_run=False)

    await manager.run(["make"], working_directory="/repo")
    process = await manager.start(["echo", "hi"])

    assert await process.wait() == 0
    assert capsys.readouterr().out == "  $ make\n  $ echo hi\n"
    assert fake.invocations[0].working_directory == "/repo"


def test_script_mode_prints_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager(results={"ls": [""]})
    manager = PrintingProcessManager(fake, script_mode=True, dry_run=False)

    manager.run_sync(["ls"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "  $ ls\n"


def test_dry_run_marks_output(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager(results={"ls": [""]})
    manager = PrintingProcessManager(fake, script_mode=False, dry_run=True)

    manager.run_sync(["ls"])

    assert capsys.readouterr().out == "  $ ls (dry run)\n"


def test_can_run_does_not_print(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager()
    manager = PrintingProcessManager(fake, script_mode=False, dry_run=False)

    assert manager.can_run("git") is True
    assert capsys.readouterr().out == ""
    assert len(fake.can_run_calls) == 1


def test_kill_pid_prints_and_delegates(capsys: pytest.CaptureFixture[str]) -> None:
    fake = FakeProcessManager()
    manager = PrintingProcessManager(fake, script_mode=False, dry_run=False)

    assert manager.kill_pid(42, 9) is True
    assert capsys.readouterr().out == "  $ kill -9 42\n"
    assert fake.kill_pid_calls[0].pid == 42
