import re
from dataclasses import dataclass
from typing import TypeAlias

from . import types
from .base import DEFAULT_MESSAGE

MESSAGE_RE = re.compile(r'-m\s+"(.+)"')


@dataclass(frozen=True)
class Init:
    pass


@dataclass(frozen=True)
class Touch:
    path: types.Path


@dataclass(frozen=True)
class Add:
    path: types.Path


@dataclass(frozen=True)
class CommitCmd:
    message: str = DEFAULT_MESSAGE


@dataclass(frozen=True)
class BranchCmd:
    name: str


@dataclass(frozen=True)
class Checkout:
    target: str


@dataclass(frozen=True)
class Log:
    pass


@dataclass(frozen=True)
class Status:
    pass


@dataclass(frozen=True)
class Reset:
    mode: str
    target: types.OID


@dataclass(frozen=True)
class Unknown:
    line: str


Command: TypeAlias = Init | Touch | Add | CommitCmd | BranchCmd | Checkout | Log | Status | Reset | Unknown


def parse_message(line: str) -> str:
    found = MESSAGE_RE.search(line)
    return found.group(1) if found else DEFAULT_MESSAGE


def parse(line: str) -> Command:
    """Turn one input line into a command, ``Unknown`` when it fits no form."""
    match line.split():
        case ['git', 'init']:
            return Init()
        case ['touch', path]:
            return Touch(path)
        case ['git', 'add', path]:
            return Add(path)
        case ['git', 'commit', *_]:
            return CommitCmd(parse_message(line))
        case ['git', 'branch', name]:
            return BranchCmd(name)
        case ['git', 'checkout', target]:
            return Checkout(target)
        case ['git', 'log']:
            return Log()
        case ['git', 'status']:
            return Status()
        case ['git', 'reset', mode, target]:
            return Reset(mode, target)
        case _:
            return Unknown(line)
