import logging
import textwrap
from typing import NamedTuple

from typing_extensions import assert_never

from . import base
from . import data
from . import types
from .commands import (
    Add, BranchCmd, Checkout, Command, CommitCmd, Init, Log, Reset, Status, Touch, Unknown, parse,
)
from .exceptions import GitSimError, NotInitializedError

logger = logging.getLogger(__name__)


class Result(NamedTuple):
    state: types.RepoState
    output: str


def apply(state: types.RepoState, line: str) -> Result:
    """Apply one command line to ``state``.

    Never raises for user input: on failure the very same ``state`` object is
    returned together with the error text.
    """
    command = parse(line)
    try:
        new_state, output = execute(state, command)
    except GitSimError as e:
        logger.debug('Rejected %r: %s', line, e)
        return Result(state, str(e))
    logger.debug('Applied %r', line)
    return Result(new_state, output)


def execute(state: types.RepoState, command: Command) -> tuple[types.RepoState, str]:
    if not state.initialized and not isinstance(command, (Init, Unknown)):
        raise NotInitializedError()

    match command:
        case Init():
            return base.init(state), 'Initialized empty Git repository.'
        case Touch(path):
            return base.touch(state, path), f'Created {path}'
        case Add(path):
            state, _ = base.add(state, path)
            return state, f'Added {path}'
        case CommitCmd(message):
            state, oid = base.commit(state, message)
            return state, f'[{oid}] {message}'
        case BranchCmd(name):
            return base.create_branch(state, name), f'Branch {name} created.'
        case Checkout(target):
            state = base.checkout(state, target)
            if state.head.type == 'branch':
                return state, f'Switched to branch {target}'
            return state, f'Detached HEAD at {target}'
        case Log():
            return state, format_log(state)
        case Status():
            return state, format_status(state)
        case Reset(mode, target):
            return base.reset(state, target, mode), f'Reset to {target} ({mode})'
        case Unknown():
            return state, 'Unknown command.'
        case _:
            assert_never(command)


def format_log(state: types.RepoState) -> str:
    entries = [f'commit {commit_.oid}\n{textwrap.indent(commit_.message, "    ")}\n'
               for commit_ in base.log(state)]
    return '\n'.join(entries) or 'No commits.'


def format_status(state: types.RepoState) -> str:
    branch = data.get_branch_name(state)
    if branch is not None:
        where = f'On branch {branch}'
    else:
        where = f'HEAD detached at {data.resolve_head(state)}'

    staged = '\n'.join(state.index) or 'None'
    working = '\n'.join(state.working_dir) or 'Empty'
    return f'{where}\n\nStaged files:\n{staged}\n\nWorking directory:\n{working}'
