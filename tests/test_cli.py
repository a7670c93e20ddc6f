import pytest

from gitsim import cli

SCRIPT = '''git init
touch a.txt
git add a.txt

git commit -m "hello world"
git status
'''


@pytest.fixture
def script(tmp_path):
    path = tmp_path / 'script.txt'
    path.write_text(SCRIPT)
    return str(path)


def test_run(script, capsys):
    cli.main(['run', script])
    out = capsys.readouterr().out

    assert out.startswith('$ git init\nInitialized empty Git repository.\n$ touch a.txt\nCreated a.txt\n')
    assert '] hello world\n' in out
    assert 'Staged files:\nNone' in out


def test_run_with_panels(script, capsys):
    cli.main(['run', script, '--panels'])
    out = capsys.readouterr().out

    assert out.endswith('Branches\n  main (HEAD)\n')


def test_graph(script, capsys):
    cli.main(['graph', script])
    out = capsys.readouterr().out

    assert out.startswith('digraph commits {')
    assert '"main" -> ' in out
    assert '$ ' not in out


def test_repl(monkeypatch, capsys):
    lines = iter(['git init', 'touch a.txt', 'undo', 'history', 'panels', 'quit'])
    monkeypatch.setattr('builtins.input', lambda prompt: next(lines))

    cli.main(['repl'])
    out = capsys.readouterr().out

    assert 'Initialized empty Git repository.' in out
    assert 'Undone.' in out
    assert 'git init\ntouch a.txt' in out
    assert 'Working Directory\n  No files' in out


def test_repl_stops_at_eof(monkeypatch, capsys):
    def eof(prompt):
        raise EOFError

    monkeypatch.setattr('builtins.input', eof)
    cli.main(['repl'])

    assert capsys.readouterr().out == '\n'


def test_requires_a_command():
    with pytest.raises(SystemExit):
        cli.main([])
