"""End-to-end scenarios against FakeProcessManager through the ProcessManager interface."""

import pytest

from procfake.errors import ConfigurationError, VerificationError
from procfake.gateway.process_manager.abc import ProcessManager
from procfake.gateway.process_manager.fake import FakeProcessManager


async def _current_branch(manager: ProcessManager) -> str:
    result = await manager.run(["git", "rev-parse", "--abbrev-ref", "HEAD"])
    return result.stdout.strip()


async def _commit_with_message(manager: ProcessManager, message: str) -> int:
    process = await manager.start(["git", "commit", "-F", "-"], working_directory="/repo")
    process.stdin.write(message)
    await process.stdin.close()
    return await process.wait()


@pytest.mark.asyncio
async def test_queue_exhaustion_fails_the_second_call() -> None:
    manager = FakeProcessManager()
    manager.set_results({"git status": ["clean"]})

    result = await manager.run(["git", "status"])
    assert result.stdout == "clean"
    assert result.exit_code == 0

    with pytest.raises(ConfigurationError):
        await manager.run(["git", "status"])


@pytest.mark.asyncio
async def test_started_process_streams_canned_output() -> None:
    manager = FakeProcessManager(results={"echo hi": ["hi"]})

    process = await manager.start(["echo", "hi"])

    assert [chunk async for chunk in process.stdout] == [b"hi"]
    assert await process.wait() == 0


@pytest.mark.asyncio
async def test_verify_calls_is_order_sensitive() -> None:
    manager = FakeProcessManager(results={"git status": ["clean"], "git add .": [""]})

    await manager.run(["git", "status"])
    await manager.run(["git", "add", "."])

    manager.verify_calls(["git status", "git add ."])
    with pytest.raises(VerificationError):
        manager.verify_calls(["git add .", "git status"])


@pytest.mark.asyncio
async def test_code_under_test_sees_canned_results_and_stdin_is_captured() -> None:
    received: list[str] = []
    manager = FakeProcessManager(
        stdin_results=received.append,
        results={
            "git rev-parse --abbrev-ref HEAD": ["feature\n"],
            "git commit -F -": [""],
        },
    )

    branch = await _current_branch(manager)
    exit_code = await _commit_with_message(manager, f"Work on {branch}")

    assert branch == "feature"
    assert exit_code == 0
    assert received == ["Work on feature"]
    manager.verify_calls(["git rev-parse --abbrev-ref HEAD", "git commit -F -"])
    assert manager.invocations[1].working_directory == "/repo"
