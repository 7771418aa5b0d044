"""LLM CLI executors: the extractor oracle behind LLMPort."""

import asyncio
import os
import sys
import tempfile
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from meshmint.config import AI_PROVIDER


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _run_subprocess(cmd_args: List[str]) -> Tuple[asyncio.subprocess.Process, bytes, bytes]:
    """Run a subprocess command and return process/stdout/stderr."""
    proc = await asyncio.create_subprocess_exec(
        *cmd_args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate()
    return proc, stdout, stderr


class ExecutorError(RuntimeError):
    """The CLI exited non-zero, timed out, or produced nothing."""


class ClaudeExecutor:
    """Executes one-shot Claude CLI completions."""

    def __init__(self, timeout: float = 120.0):
        self.timeout = timeout

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        args = [
            "claude",
            "--print",
            "--session-id",
            session_id or str(uuid.uuid4()),
            "--output-format",
            "text",
        ]
        if model:
            args.extend(["--model", model])
        if system_prompt:
            args.extend(["--system-prompt", system_prompt])
        args.append(message)

        _log(f"[{datetime.now().isoformat()}] Executing with Claude CLI")
        try:
            proc, stdout, stderr = await asyncio.wait_for(
                _run_subprocess(args), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            raise ExecutorError(f"Timeout ({self.timeout:.0f}s)")

        if proc.returncode != 0:
            raise ExecutorError(f"Exit code {proc.returncode}: {stderr.decode()}")
        _log(f"[{datetime.now().isoformat()}] Completed")
        return stdout.decode("utf-8").strip()


class CodexExecutor:
    """Executes one-shot Codex CLI completions via ``codex exec``."""

    def __init__(self, timeout: float = 180.0):
        self.timeout = timeout

    @staticmethod
    def _compose_prompt(message: str, system_prompt: Optional[str]) -> str:
        if not system_prompt:
            return message
        # codex exec has no --system-prompt flag
        return (
            "System instructions:\n"
            f"{system_prompt}\n\n"
            "User message:\n"
            f"{message}"
        )

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        session_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        fd, output_path = tempfile.mkstemp(prefix="codex-last-", suffix=".txt")
        os.close(fd)
        out_file = Path(output_path)

        args = [
            "codex",
            "exec",
            "--color",
            "never",
            "--output-last-message",
            output_path,
        ]
        if model:
            args.extend(["--model", model])
        args.append(self._compose_prompt(message, system_prompt))

        _log(f"[{datetime.now().isoformat()}] Executing with Codex CLI")
        try:
            proc, stdout, stderr = await asyncio.wait_for(
                _run_subprocess(args), timeout=self.timeout
            )
            if proc.returncode != 0:
                err_text = stderr.decode("utf-8").strip() or stdout.decode("utf-8").strip()
                raise ExecutorError(f"Exit code {proc.returncode}: {err_text}")

            response = ""
            if out_file.exists():
                response = out_file.read_text(encoding="utf-8").strip()
            if not response:
                response = stdout.decode("utf-8").strip()
            if not response:
                raise ExecutorError("Codex returned empty response")
            _log(f"[{datetime.now().isoformat()}] Completed")
            return response
        except asyncio.TimeoutError:
            raise ExecutorError(f"Timeout ({self.timeout:.0f}s)")
        finally:
            out_file.unlink(missing_ok=True)


def create_executor(provider: Optional[str] = None):
    """Create an executor for the selected provider."""
    selected = (provider or AI_PROVIDER).strip().lower()
    if selected == "claude":
        return ClaudeExecutor()
    if selected == "codex":
        return CodexExecutor()
    raise ValueError(f"Unsupported provider: {selected}")
