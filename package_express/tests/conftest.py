"""Shared fixtures for Package Express tests."""

import pytest

from package_express.gateway import Gateway


class ScriptedGateway(Gateway):
    """Gateway that replays canned input lines and records every displayed line."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []

    def display(self, message: str) -> None:
        self.output.append(message)

    def read_line(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_gateway():
    """Factory: scripted_gateway("10", "abc", ...)."""
    def _make(*lines):
        return ScriptedGateway(lines)
    return _make
