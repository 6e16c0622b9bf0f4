"""Blocking line-based console."""

from typing import Protocol


class Console(Protocol):
    """Request/response I/O: ask blocks until a line of input is available."""

    def ask(self, prompt: str) -> str: ...

    def say(self, line: str) -> None: ...


class StdioConsole:
    """Console backed by stdin and stdout."""

    def ask(self, prompt: str) -> str:
        return input(prompt)

    def say(self, line: str) -> None:
        print(line, flush=True)
