from gitsim import panels

from conftest import run


def test_empty_panels(empty):
    assert panels.working_dir_panel(empty) == 'Working Directory\n  No files'
    assert panels.staging_panel(empty) == 'Staging Area (Index)\n  Nothing staged'
    assert panels.branch_panel(empty) == 'Branches\n  No branches'


def test_panels_follow_state(repo):
    state, _ = run(repo, 'touch a.txt', 'touch b.txt', 'git add a.txt', 'git branch dev')

    assert panels.working_dir_panel(state) == 'Working Directory\n  a.txt\n  b.txt'
    assert panels.staging_panel(state) == 'Staging Area (Index)\n  a.txt'
    assert panels.branch_panel(state) == 'Branches\n  main (HEAD)\n  dev'


def test_branch_panel_detached(two_commits):
    state, c1, _ = two_commits
    state, _ = run(state, f'git checkout {c1}')

    assert panels.branch_panel(state) == f'Branches\n  main\n  Detached HEAD at {c1}'


def test_state_panel_joins_all_panels(repo):
    text = panels.state_panel(repo)

    assert text.split('\n\n') == [
        panels.working_dir_panel(repo),
        panels.staging_panel(repo),
        panels.branch_panel(repo),
    ]
