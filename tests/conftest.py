"""Shared fixtures for gitsim tests."""

import pytest

from gitsim.interpreter import apply
from gitsim.types import EMPTY_STATE


def run(state, *lines):
    """Apply lines in order and return the final state and the last output."""
    output = None
    for line in lines:
        state, output = apply(state, line)
    return state, output


@pytest.fixture
def empty():
    return EMPTY_STATE


@pytest.fixture
def repo():
    """An initialized repository with no commits."""
    state, _ = run(EMPTY_STATE, 'git init')
    return state


@pytest.fixture
def two_commits(repo):
    """Repo with root commit C1 and child C2 on main, plus a dirty index."""
    state, _ = run(repo, 'touch a.txt', 'git add a.txt', 'git commit -m "first"')
    c1 = state.refs['main']
    state, _ = run(state, 'touch b.txt', 'git add b.txt', 'git commit -m "second"')
    c2 = state.refs['main']
    state, _ = run(state, 'touch c.txt', 'git add c.txt')
    return state, c1, c2
