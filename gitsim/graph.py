"""Read-only commit graph for the graph panel and ``gitsim graph``."""
from typing import Iterable, NamedTuple

from . import base
from . import data
from . import types


class GraphNode(NamedTuple):
    oid: types.OID
    message: str
    parents: tuple[types.OID, ...]
    branch: str | None  # branch whose ref is exactly this commit
    is_head: bool
    lane: int


def lanes(state: types.RepoState) -> dict[str, int]:
    return {name: lane for lane, name in enumerate(state.refs)}


def iter_reachable(state: types.RepoState) -> Iterable[types.Commit]:
    """First-parent walk from every ref, then from HEAD, each commit once."""
    starts = [oid for _, oid in data.iter_refs(state)]
    HEAD = data.resolve_head(state)
    if HEAD:
        starts.append(HEAD)

    visited = set()
    for start in starts:
        for commit_ in base.iter_first_parents(state.objects, start):
            if commit_.oid in visited:
                # The rest of this line of history is already listed
                break
            visited.add(commit_.oid)
            yield commit_


def materialize(state: types.RepoState) -> list[GraphNode]:
    lane_of = lanes(state)
    branch_at = {}
    for name, oid in data.iter_refs(state):
        branch_at.setdefault(oid, name)
    HEAD = data.resolve_head(state)

    return [
        GraphNode(
            oid=commit_.oid,
            message=commit_.message,
            parents=commit_.parents,
            branch=branch_at.get(commit_.oid),
            is_head=commit_.oid == HEAD,
            lane=lane_of.get(branch_at.get(commit_.oid), 0),
        )
        for commit_ in iter_reachable(state)
    ]


def to_dot(state: types.RepoState) -> str:
    dot = 'digraph commits {\n'

    for name, oid in data.iter_refs(state):
        dot += f'"{name}" [shape=note]\n'
        dot += f'"{name}" -> "{oid}"\n'

    if data.resolve_head(state):
        dot += '"HEAD" [shape=note]\n'
        dot += f'"HEAD" -> "{state.head.value}"\n'

    for node in materialize(state):
        style = 'filled' if node.is_head else 'solid'
        dot += f'"{node.oid}" [shape=box style={style} label="{node.oid}"]\n'
        for parent in node.parents[:1]:
            dot += f'"{node.oid}" -> "{parent}"\n'

    dot += '}'
    return dot
