"""Pytest fixtures for optscan tests."""

from __future__ import annotations

from typing import Any
from typing import Callable

import pytest

from optscan.parser.api import OptionKind


class Recorder:
    """Collects every callback invocation in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.positionals: list[list[str]] | None = None

    def handler(self, name: str, result: int | None = 0) -> Callable[..., int | None]:
        def callback(count: int, args: list[str], data: Any) -> int | None:
            self.calls.append((name, count, list(args)))
            return result

        return callback

    def positional(self, result: int | None = 0) -> Callable[..., int | None]:
        def callback(count: int, args: list[str], data: Any) -> int | None:
            assert count == len(args)
            self.calls.append(("<positional>", count, list(args)))
            return result

        return callback

    def error(self, result: int | None = 0) -> Callable[..., int | None]:
        def callback(
            kind: OptionKind, char: str | None, name: str | None, data: Any
        ) -> int | None:
            self.calls.append(("<error>", kind, char, name))
            return result

        return callback

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
