from typing import NamedTuple

from . import types
from .interpreter import apply
from .types import EMPTY_STATE


class Entry(NamedTuple):
    command: str
    output: str


class Session:
    """A terminal's worth of state: the current repo, its past and a transcript."""

    def __init__(self, state: types.RepoState = EMPTY_STATE):
        self.state = state
        self.previous: list[types.RepoState] = []
        self.history: list[Entry] = []

    def run(self, line: str) -> str:
        if not line.strip():
            return ''
        result = apply(self.state, line)
        if result.state is not self.state:
            self.previous.append(self.state)
            self.state = result.state
        self.history.append(Entry(command=line, output=result.output))
        return result.output

    def undo(self) -> bool:
        if not self.previous:
            return False
        self.state = self.previous.pop()
        return True

    def commands(self) -> list[str]:
        return [entry.command for entry in self.history]
