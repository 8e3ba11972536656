import sys

import app


def test_read_lines_from_file(tmp_path):
    path = tmp_path / 'objects.txt'
    path.write_text('first\nsecond\n')
    assert app.read_lines(str(path)) == ['first', 'second']


def test_missing_file(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(sys, 'argv', ['termlist', str(tmp_path / 'missing.txt')])
    assert app.main() == 1
    assert 'termlist:' in capsys.readouterr().err


class Terminal:
    @staticmethod
    def isatty():
        return True


def test_usage_when_stdin_is_a_terminal(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['termlist'])
    monkeypatch.setattr(sys, 'stdin', Terminal())
    assert app.main() == 2
    assert 'usage: termlist' in capsys.readouterr().err
