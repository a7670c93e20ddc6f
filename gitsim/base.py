from typing import Iterable

from . import data
from . import types
from .exceptions import (
    AlreadyInitializedError,
    FileNotFoundInWorkingDir,
    InvalidCheckoutTarget,
    InvalidCommitError,
    NothingToCommitError,
)
from .types import Head, freeze

DEFAULT_MESSAGE = 'Commit'


def init(state: types.RepoState) -> types.RepoState:
    if state.initialized:
        raise AlreadyInitializedError()
    return state._replace(
        initialized=True,
        refs=freeze({data.DEFAULT_BRANCH: ''}),
        head=Head(type='branch', value=data.DEFAULT_BRANCH),
    )


def touch(state: types.RepoState, path: types.Path) -> types.RepoState:
    # Existing files are truncated, there is no editor to give them content
    return state._replace(working_dir=freeze({**state.working_dir, path: ''}))


def add(state: types.RepoState, path: types.Path) -> tuple[types.RepoState, types.OID]:
    if path not in state.working_dir:
        raise FileNotFoundInWorkingDir(path)
    objects, oid = data.create_blob(state.objects, state.working_dir[path])
    return state._replace(objects=objects, index=freeze({**state.index, path: oid})), oid


def commit(state: types.RepoState, message: str = DEFAULT_MESSAGE) -> tuple[types.RepoState, types.OID]:
    if not state.index:
        raise NothingToCommitError()

    objects, tree = data.create_tree(state.objects, state.index)

    HEAD = data.resolve_head(state)
    parents = [HEAD] if HEAD else []
    objects, oid = data.create_commit(objects, tree, parents, message)

    refs = state.refs
    branch = data.get_branch_name(state)
    if branch is not None:
        refs = data.update_ref(refs, branch, oid)
    # A detached HEAD stays where it is, the new commit is only reachable by id

    return state._replace(objects=objects, refs=refs, index=freeze({})), oid


def create_branch(state: types.RepoState, name: str) -> types.RepoState:
    return state._replace(refs=data.update_ref(state.refs, name, data.resolve_head(state)))


def is_branch(state: types.RepoState, name: str) -> bool:
    return bool(state.refs.get(name))


def checkout(state: types.RepoState, target: str) -> types.RepoState:
    """Move HEAD to a branch, or detach it at a commit.

    A branch without commits is not a target. Blob and tree ids are rejected
    on purpose: HEAD only ever resolves to a commit, so ``log`` and ``commit``
    can always walk it.
    """
    if is_branch(state, target):
        HEAD = Head(type='branch', value=target)
    elif data.is_commit(state.objects, target):
        HEAD = Head(type='commit', value=target)
    else:
        raise InvalidCheckoutTarget(target)
    return state._replace(head=HEAD)


def iter_first_parents(objects: types.ObjectStore, oid: types.OID) -> Iterable[types.Commit]:
    visited = set()
    while oid and oid not in visited:
        visited.add(oid)
        commit_ = data.get_commit(objects, oid)
        yield commit_
        oid = commit_.parents[0] if commit_.parents else ''


def log(state: types.RepoState) -> list[types.Commit]:
    return list(iter_first_parents(state.objects, data.resolve_head(state)))


def reset(state: types.RepoState, oid: types.OID, mode: str) -> types.RepoState:
    """Point the current branch, or a detached HEAD, at commit ``oid``."""
    if not data.is_commit(state.objects, oid):
        raise InvalidCommitError(oid)

    branch = data.get_branch_name(state)
    if branch is not None:
        state = state._replace(refs=data.update_ref(state.refs, branch, oid))
    else:
        state = state._replace(head=Head(type='commit', value=oid))

    if mode == '--hard':
        state = state._replace(index=freeze({}), working_dir=freeze({}))
    elif mode == '--mixed':
        state = state._replace(index=freeze({}))
    # --soft, and any mode we do not know, only move the ref
    return state
