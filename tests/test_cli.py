"""Tests for the xyzlab command line: root parser, convert and sweep."""

import pytest
from xyzlab import __version__
from xyzlab.main import main


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setenv('COLORTERM', 'truecolor')
    monkeypatch.setenv('NO_COLOR', '1')


def _run(monkeypatch, *argv) -> int:
    monkeypatch.setattr('sys.argv', ['xyzlab', *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


class TestRoot:
    def test_version(self, monkeypatch, capsys):
        assert _run(monkeypatch, '-v') == 0
        assert f'xyzlab {__version__}' in capsys.readouterr().out

    def test_unknown_command(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'paint') == 2
        assert "unrecognized command or argument: 'paint'" in capsys.readouterr().err

    def test_help_full_lists_subcommands(self, monkeypatch, capsys):
        assert _run(monkeypatch, '-hf') == 0
        out = capsys.readouterr().out
        assert 'xyzlab convert' in out
        assert 'xyzlab sweep' in out


class TestConvertCommand:
    def test_xyz_to_rgb(self, monkeypatch, capsys):
        code = _run(monkeypatch, 'convert', '-f', 'xyz', '-t', 'rgb', '-v', 'xyz(0.41874, 0.21967, 0.05649)')
        assert code == 0
        assert 'rgb(254, 23, 55)' in capsys.readouterr().out

    def test_rgb_to_hex(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'hex', '-v', '244,182,33') == 0
        assert '#F4B621' in capsys.readouterr().out

    def test_rgb_to_xyz(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'xyz', '-v', 'rgb(45, 28, 156)') == 0
        assert 'xyz(0.07' in capsys.readouterr().out

    def test_verbose(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'CONVERT', '-f', 'rgb', '-t', 'hex', '-v', '0 255 0', '-V') == 0
        out = capsys.readouterr().out
        assert 'rgb(0, 255, 0)' in out
        assert '->' in out
        assert '#00FF00' in out

    def test_swatch(self, monkeypatch, capsys):
        monkeypatch.delenv('NO_COLOR')
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'rgb', '-v', '1 2 3', '-s') == 0
        assert '\x1b[48;2;1;2;3m' in capsys.readouterr().out

    def test_no_color_swatch_is_plain(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'rgb', '-v', '1 2 3', '-s') == 0
        out = capsys.readouterr().out
        assert '\x1b' not in out
        assert 'rgb(1, 2, 3)' in out
        assert '#010203' in out

    def test_no_color_verbose_is_plain(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'hex', '-v', '0 255 0', '-V') == 0
        assert capsys.readouterr().out == 'rgb(0, 255, 0) -> #00FF00\n'

    def test_colored_output_is_bold(self, monkeypatch, capsys):
        monkeypatch.delenv('NO_COLOR')
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'hex', '-v', '0 255 0') == 0
        assert capsys.readouterr().out == '\x1b[1;37m#00FF00\x1b[0m\n'

    def test_no_color_error_is_plain(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'lab', '-v', '1 2 3') == 2
        err = capsys.readouterr().err
        assert err.startswith('[error] invalid format specified')
        assert '\x1b' not in err

    def test_unknown_target(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'rgb', '-t', 'lab', '-v', '1 2 3') == 2
        assert 'invalid format specified' in capsys.readouterr().err

    def test_hex_is_not_a_source(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'hex', '-t', 'rgb', '-v', 'F4B621') == 2
        assert 'cannot be used as a source format' in capsys.readouterr().err

    def test_bad_value(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'xyz', '-t', 'rgb', '-v', '0.1 0.2') == 2
        assert '[error]' in capsys.readouterr().err

    def test_missing_value(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', '-f', 'xyz', '-t', 'rgb') == 2
        assert '[error]' in capsys.readouterr().err


class TestSweepCommand:
    def test_xyz_sweep(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'sweep') == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ['■' * 21] * 21

    def test_rgb_sweep(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'sweep', '-cs', 'rgb', '-S', '3') == 0
        assert capsys.readouterr().out.splitlines() == ['■■■'] * 3

    def test_colored_output(self, monkeypatch, capsys):
        monkeypatch.delenv('NO_COLOR')
        assert _run(monkeypatch, 'sweep', '-cs', 'rgb', '-S', '2', '-b', '0') == 0
        first = capsys.readouterr().out.splitlines()[0]
        assert first == '\x1b[38;2;0;0;0m■\x1b[39m\x1b[38;2;0;16;0m■\x1b[39m'

    def test_unknown_colorspace(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'sweep', '-cs', 'lab') == 2
        assert "invalid colorspace 'lab'" in capsys.readouterr().err

    def test_help(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'sweep', '-h') == 0
        out = capsys.readouterr().out
        assert out.startswith('usage: xyzlab sweep')
        assert '-h, --help' in out
