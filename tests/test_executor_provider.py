"""Tests for multi-provider executor behavior."""

import asyncio
from pathlib import Path

import pytest

from meshmint.adapters.llm.executor import (
    ClaudeExecutor,
    CodexExecutor,
    ExecutorError,
    create_executor,
)


def run(coro):
    """Helper to run async functions in sync tests."""
    return asyncio.run(coro)


class _FakeProc:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self):
        return self._stdout, self._stderr


def test_create_executor_rejects_unknown_provider():
    with pytest.raises(ValueError):
        create_executor("unknown-provider")


def test_create_executor_by_name():
    assert isinstance(create_executor("claude"), ClaudeExecutor)
    assert isinstance(create_executor(" Codex "), CodexExecutor)


def test_claude_executor_passes_model_and_system_prompt(monkeypatch):
    captured = {}

    async def fake_create_subprocess_exec(*args, **kwargs):
        captured["args"] = args
        return _FakeProc(returncode=0, stdout=b'  {"prompt": "mask"}\n')

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_create_subprocess_exec)

    response = run(ClaudeExecutor().execute("extract", system_prompt="json only", model="m1"))

    args = captured["args"]
    assert args[0:2] == ("claude", "--print")
    assert args[args.index("--model") + 1] == "m1"
    assert args[args.index("--system-prompt") + 1] == "json only"
    assert args[-1] == "extract"
    assert response == '{"prompt": "mask"}'


def test_claude_executor_nonzero_exit(monkeypatch):
    async def fake_create_subprocess_exec(*args, **kwargs):
        return _FakeProc(returncode=2, stderr=b"bad flag")

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_create_subprocess_exec)

    with pytest.raises(ExecutorError) as exc:
        run(ClaudeExecutor().execute("extract"))
    assert "bad flag" in str(exc.value)


def test_codex_executor_uses_codex_exec_and_reads_output(monkeypatch):
    captured = {}

    async def fake_create_subprocess_exec(*args, **kwargs):
        captured["args"] = args
        output_path = args[args.index("--output-last-message") + 1]
        Path(output_path).write_text("codex-result", encoding="utf-8")
        return _FakeProc(returncode=0, stdout=b"", stderr=b"")

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_create_subprocess_exec)

    response = run(
        CodexExecutor().execute(
            "hello",
            system_prompt="system-guidance",
            session_id="session-ignored",
            model="gpt-5",
        )
    )

    args = captured["args"]
    assert args[0:2] == ("codex", "exec")
    assert "gpt-5" in args
    assert "System instructions:" in args[-1]
    assert "User message:" in args[-1]
    assert response == "codex-result"
    assert not Path(args[args.index("--output-last-message") + 1]).exists()


def test_codex_executor_empty_response(monkeypatch):
    async def fake_create_subprocess_exec(*args, **kwargs):
        return _FakeProc(returncode=0)

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_create_subprocess_exec)

    with pytest.raises(ExecutorError):
        run(CodexExecutor().execute("hello"))
