"""Tests for xyzlab.shared.logger: level tags, output streams and NO_COLOR."""

import pytest
from xyzlab.shared.logger import XyzlabArgumentParser, format_message, log


@pytest.fixture(autouse=True)
def _color_on(monkeypatch):
    monkeypatch.delenv('NO_COLOR', raising=False)


class TestFormatMessage:
    def test_colored(self):
        assert format_message('error', 'boom') == '\x1b[1;31m[error]\x1b[0m \x1b[0;31mboom\x1b[0m'

    def test_plain(self):
        assert format_message('error', 'boom', color=False) == '[error] boom'

    def test_unknown_level_uses_reset(self):
        assert format_message('debug', 'x') == '\x1b[0m[debug]\x1b[0m \x1b[0mx\x1b[0m'


class TestLog:
    def test_info_goes_to_stdout(self, capsys):
        log('info', 'hello')
        captured = capsys.readouterr()
        assert '[info]' in captured.out
        assert captured.err == ''

    def test_error_goes_to_stderr(self, capsys):
        log('ERROR', 'bad')
        captured = capsys.readouterr()
        assert '[error]' in captured.err
        assert captured.out == ''

    def test_no_color(self, monkeypatch, capsys):
        monkeypatch.setenv('NO_COLOR', '1')
        log('warning', 'careful')
        assert capsys.readouterr().err == '[warning] careful\n'


class TestArgumentParser:
    def test_error_logs_and_exits_2(self, monkeypatch, capsys):
        monkeypatch.setenv('NO_COLOR', '1')
        parser = XyzlabArgumentParser(prog='xyzlab test')
        parser.add_argument('--steps', type=int)
        with pytest.raises(SystemExit) as exc:
            parser.parse_args(['--steps', 'many'])
        assert exc.value.code == 2
        assert capsys.readouterr().err.startswith('[error] argument --steps')
