"""Plain text versions of the repository panels. They only read the state."""
from . import data
from . import types


def working_dir_panel(state: types.RepoState) -> str:
    files = '\n'.join(f'  {path}' for path in state.working_dir) or '  No files'
    return f'Working Directory\n{files}'


def staging_panel(state: types.RepoState) -> str:
    staged = '\n'.join(f'  {path}' for path in state.index) or '  Nothing staged'
    return f'Staging Area (Index)\n{staged}'


def branch_panel(state: types.RepoState) -> str:
    current = data.get_branch_name(state)
    lines = [f'  {name} (HEAD)' if name == current else f'  {name}' for name in state.refs]
    text = 'Branches\n' + ('\n'.join(lines) or '  No branches')
    if state.head is not None and state.head.type == 'commit':
        text += f'\n  Detached HEAD at {state.head.value}'
    return text


def state_panel(state: types.RepoState) -> str:
    return '\n\n'.join([working_dir_panel(state), staging_panel(state), branch_panel(state)])
