import hashlib
from typing import Iterable, Mapping

from gitsim import types
from gitsim.exceptions import ObjectNotFoundError
from gitsim.types import Blob, Commit, Tree, TreeEntry, freeze

OID_LENGTH = 8
DEFAULT_BRANCH = 'main'


def hash_object(objects: types.ObjectStore, data: str, type_: types.ObjectType = 'blob') -> types.OID:
    # Ids are not content addresses: the store size is hashed in, and the salt
    # grows until the short id is unused.
    salt = len(objects)
    while True:
        obj = f'{type_}\x00{salt}\x00{data}'.encode()
        oid = hashlib.sha1(obj).hexdigest()[:OID_LENGTH]
        if oid not in objects:
            return oid
        salt += 1


def _store(objects: types.ObjectStore, obj: types.GitObject) -> types.ObjectStore:
    assert obj.oid not in objects, f'Object {obj.oid} already exists'
    return freeze({**objects, obj.oid: obj})


def get_object(objects: types.ObjectStore, oid: types.OID, expected: types.ObjectType | None = 'blob') -> types.GitObject:
    obj = objects.get(oid)
    if obj is None or (expected is not None and obj.type != expected):
        raise ObjectNotFoundError(oid, expected)
    return obj


def get_commit(objects: types.ObjectStore, oid: types.OID) -> Commit:
    return get_object(objects, oid, 'commit')


def is_commit(objects: types.ObjectStore, oid: types.OID) -> bool:
    return _has(objects, oid, 'commit')


def create_blob(objects: types.ObjectStore, content: str) -> tuple[types.ObjectStore, types.OID]:
    oid = hash_object(objects, content, 'blob')
    return _store(objects, Blob(oid=oid, content=content)), oid


def create_tree(objects: types.ObjectStore, entries: types.TreeMap) -> tuple[types.ObjectStore, types.OID]:
    tree_entries = []
    for name, oid in sorted(entries.items()):
        get_object(objects, oid, 'blob')
        tree_entries.append(TreeEntry(name=name, oid=oid))

    payload = ''.join(f'blob {oid} {name}\n' for name, oid in tree_entries)
    oid = hash_object(objects, payload, 'tree')
    return _store(objects, Tree(oid=oid, entries=tuple(tree_entries))), oid


def create_commit(objects: types.ObjectStore, tree: types.OID, parents: Iterable[types.OID],
                  message: str) -> tuple[types.ObjectStore, types.OID]:
    parents = tuple(parents)
    get_object(objects, tree, 'tree')
    for parent in parents:
        get_commit(objects, parent)

    payload = f'tree {tree}\n'
    payload += ''.join(f'parent {parent}\n' for parent in parents)
    payload += f'\n{message}\n'

    oid = hash_object(objects, payload, 'commit')
    return _store(objects, Commit(oid=oid, tree=tree, parents=parents, message=message)), oid


def get_tree(objects: types.ObjectStore, oid: types.OID) -> dict[types.Path, types.OID]:
    tree = get_object(objects, oid, 'tree')
    return {entry.name: entry.oid for entry in tree.entries}


def update_ref(refs: Mapping[str, types.OID], name: str, oid: types.OID) -> Mapping[str, types.OID]:
    return freeze({**refs, name: oid})


def get_branch_name(state: types.RepoState) -> str | None:
    if state.head is None or state.head.type != 'branch':
        return None
    return state.head.value


def resolve_head(state: types.RepoState) -> types.OID:
    """Commit id HEAD currently points at, '' if there is none yet."""
    head = state.head
    if head is None:
        return ''
    if head.type == 'branch':
        return state.refs.get(head.value, '')
    return head.value


def iter_refs(state: types.RepoState) -> Iterable[tuple[str, types.OID]]:
    for name, oid in state.refs.items():
        if oid:
            yield name, oid


def iter_dangling(state: types.RepoState) -> Iterable[tuple[str, types.OID]]:
    """Yield (holder, oid) for every reference that does not resolve."""
    objects = state.objects
    for oid, obj in objects.items():
        if obj.type == 'tree':
            for entry in obj.entries:
                if not _has(objects, entry.oid, 'blob'):
                    yield oid, entry.oid
        elif obj.type == 'commit':
            if not _has(objects, obj.tree, 'tree'):
                yield oid, obj.tree
            for parent in obj.parents:
                if not is_commit(objects, parent):
                    yield oid, parent

    for name, oid in iter_refs(state):
        if not is_commit(objects, oid):
            yield f'refs/heads/{name}', oid

    head = state.head
    if head is not None:
        if head.type == 'branch' and head.value not in state.refs:
            yield 'HEAD', head.value
        elif head.type == 'commit' and not is_commit(objects, head.value):
            yield 'HEAD', head.value

    for path, oid in state.index.items():
        if not _has(objects, oid, 'blob'):
            yield f'index:{path}', oid


def _has(objects: types.ObjectStore, oid: types.OID, type_: types.ObjectType) -> bool:
    obj = objects.get(oid)
    return obj is not None and obj.type == type_
