from gitsim.session import Entry, Session


def test_run_records_history():
    session = Session()

    assert session.run('git init') == 'Initialized empty Git repository.'
    assert session.run('bogus') == 'Unknown command.'
    assert session.history == [
        Entry('git init', 'Initialized empty Git repository.'),
        Entry('bogus', 'Unknown command.'),
    ]
    assert session.commands() == ['git init', 'bogus']


def test_blank_lines_are_ignored():
    session = Session()

    assert session.run('   ') == ''
    assert session.history == []


def test_undo_restores_previous_state():
    session = Session()
    session.run('git init')
    session.run('touch a.txt')
    before = session.state

    session.run('git add a.txt')
    session.run('git status')
    assert session.undo()

    assert session.state is before
    assert not session.state.index


def test_undo_skips_failed_and_read_only_commands():
    session = Session()
    session.run('git init')
    initialized = session.state

    session.run('git init')
    session.run('git log')
    session.run('git commit -m "nothing"')

    assert session.undo()
    assert not session.state.initialized
    assert session.state is not initialized
    assert not session.undo()
