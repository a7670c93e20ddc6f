from types import MappingProxyType
from typing import Mapping, TypeAlias, NamedTuple, Literal

Path: TypeAlias = str  # a path in the working directory
OID: TypeAlias = str  # object id, '' when a branch has no commit yet
ObjectType: TypeAlias = Literal['blob', 'tree', 'commit']
HeadType: TypeAlias = Literal['branch', 'commit']


class Blob(NamedTuple):
    oid: OID
    content: str
    type: ObjectType = 'blob'


class TreeEntry(NamedTuple):
    name: Path
    oid: OID


class Tree(NamedTuple):
    oid: OID
    entries: tuple[TreeEntry, ...]
    type: ObjectType = 'tree'


class Commit(NamedTuple):
    oid: OID
    tree: OID
    parents: tuple[OID, ...]
    message: str
    type: ObjectType = 'commit'


GitObject: TypeAlias = Blob | Tree | Commit
ObjectStore: TypeAlias = Mapping[OID, GitObject]
TreeMap: TypeAlias = Mapping[Path, OID]


class Head(NamedTuple):
    type: HeadType
    value: str  # branch name or commit oid


class RepoState(NamedTuple):
    objects: ObjectStore
    refs: Mapping[str, OID]
    head: Head | None
    index: TreeMap
    working_dir: Mapping[Path, str]
    initialized: bool


def freeze(mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


EMPTY_STATE = RepoState(
    objects=freeze({}),
    refs=freeze({}),
    head=None,
    index=freeze({}),
    working_dir=freeze({}),
    initialized=False,
)
