"""End-to-end tests for the colour-fun command line."""

import json
import os
import sys
from pathlib import Path

import pytest
from colour_fun.__main__ import main


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env or COLOUR_FUN_* leaks in."""
    for key in list(os.environ):
        if key.startswith('COLOUR_FUN_'):
            monkeypatch.delenv(key)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['colour-fun', *argv])
    try:
        main()
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


class TestConvert:
    def test_hex(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', 'f43c8e', '--json') == 0
        obj = json.loads(capsys.readouterr().out)
        assert obj['results']['rgb'] == {'red': 244, 'green': 60, 'blue': 142}
        assert obj['results']['hex']['value'] == '#f43c8e'

    def test_name(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', 'rebeccapurple', '--json') == 0
        obj = json.loads(capsys.readouterr().out)
        assert obj['results']['hsl']['hue'] == 270

    def test_text_output(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', 'd15') == 0
        out = capsys.readouterr().out
        assert '── hsl' in out
        assert '── lab' in out

    def test_bad_input_exits_1(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'convert', 'F43C', '--json') == 1
        obj = json.loads(capsys.readouterr().out)
        assert obj['errors'][0]['code'] == 'invalid_hex_length'


class TestContrast:
    def test_dark(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'contrast', '054', '--json') == 0
        obj = json.loads(capsys.readouterr().out)
        assert obj['results']['contrast']['text'] == 'white'

    def test_light(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'contrast', 'f54', '--json') == 0
        obj = json.loads(capsys.readouterr().out)
        assert obj['results']['contrast']['text'] == 'black'
        assert obj['results']['contrast']['luma'] == 133


class TestCompare:
    def test_all_metrics(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'compare', '032bea', '2b36e7', '--json') == 0
        results = json.loads(capsys.readouterr().out)['results']
        assert results['rgb']['percent'] == 90
        assert results['hsl']['percent'] == 79
        assert results['lab']['percent'] == 97

    def test_bad_operand(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'compare', '032bea', 'blurple', '--json') == 1
        obj = json.loads(capsys.readouterr().out)
        assert obj['errors'][0]['input'] == 'blurple'
        assert obj['errors'][0]['code'] == 'invalid_colour_name'


class TestValid:
    def test_many(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'valid', 'fff', 'abcde', '#zz', 'tomato', '--json') == 0
        results = json.loads(capsys.readouterr().out)['results']
        assert results['fff'] == {'hex': True, 'colour': True}
        assert results['abcde'] == {'hex': True, 'colour': True}
        assert results['#zz'] == {'hex': False, 'colour': False}
        assert results['tomato'] == {'hex': False, 'colour': True}


class TestSettings:
    def test_json_from_dotenv(self, monkeypatch, capsys, _isolated):
        (_isolated / '.env').write_text('COLOUR_FUN_JSON=1\n')
        assert _run(monkeypatch, 'contrast', '054') == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)['command'] == 'contrast'
        assert 'colour-fun: loaded' in captured.err

    def test_precision(self, monkeypatch, capsys):
        monkeypatch.setenv('COLOUR_FUN_PRECISION', '4')
        assert _run(monkeypatch, 'compare', '032bea', '2b36e7') == 0
        assert '41.5933' in capsys.readouterr().out

    def test_bad_precision(self, monkeypatch, capsys):
        monkeypatch.setenv('COLOUR_FUN_PRECISION', 'many')
        assert _run(monkeypatch, 'contrast', '054') == 2
        assert 'COLOUR_FUN_PRECISION' in capsys.readouterr().err


class TestHelp:
    def test_list(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'help') == 0
        out = capsys.readouterr().out
        for name in ['compare', 'contrast', 'convert', 'valid']:
            assert name in out

    def test_module_doc(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'help', 'contrast') == 0
        assert 'YIQ' in capsys.readouterr().out

    def test_unknown(self, monkeypatch, capsys):
        assert _run(monkeypatch, 'help', 'palette') == 1
        assert 'unknown command' in capsys.readouterr().err

    def test_no_command(self, monkeypatch, capsys):
        assert _run(monkeypatch) == 1
