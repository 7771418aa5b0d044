"""LLM adapters — Claude and Codex CLI executors."""

from meshmint.adapters.llm.executor import (
    ClaudeExecutor,
    CodexExecutor,
    ExecutorError,
    create_executor,
)

__all__ = [
    "ClaudeExecutor",
    "CodexExecutor",
    "ExecutorError",
    "create_executor",
]
