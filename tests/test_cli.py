import pytest

from urlargs.cli import cli, parse_pair
from urlargs.errors import UnsupportedCharsetError


def run(capsys, *argv):
    with pytest.raises(SystemExit) as info:
        cli(list(argv))
    return (info.value.code, capsys.readouterr())

def test_parse_pair():
    assert parse_pair('a=b=c') == ('a', 'b=c')
    assert parse_pair('flag') == ('flag', '')

def test_encode(capsys):
    (code, out) = run(capsys, 'encode', 'name.?', 'value_ here')
    assert code == 0
    assert out.out == 'name.%3F\nvalue_+here\n'

def test_decode_charset(capsys):
    (code, out) = run(capsys, '--charset', 'CP1252', 'decode', 'caf%E9')
    assert code == 0
    assert out.out == 'café\n'

def test_query(capsys):
    (code, out) = run(capsys, 'query', 'name.?=value_ here', 'b=1')
    assert code == 0
    assert out.out == 'name.%3F=value_+here&b=1\n'

def test_query_pre_encoded_raw(capsys):
    (code, out) = run(capsys, 'query', '--pre-encoded', '--raw', 'name.%3F=value_+here')
    assert code == 0
    assert out.out == 'name.?=value_ here\n'

def test_config(tmp_path, capsys):
    path = tmp_path / 'urlargs.ini'
    path.write_text('[arguments]\ncharset = CP1252\n')
    (code, out) = run(capsys, '--config', str(path), 'encode', 'é')
    assert code == 0
    assert out.out == '%E9\n'

def test_malformed(capsys, caplog):
    (code, out) = run(capsys, 'decode', 's=*&^%~@==y')
    assert code == 1
    assert out.out == ''
    assert '%~@' in caplog.text

def test_missing_config(tmp_path, capsys):
    (code, _) = run(capsys, '--config', str(tmp_path / 'missing.ini'), 'encode', 'x')
    assert code == 1

def test_unsupported_charset(capsys):
    with pytest.raises(UnsupportedCharsetError):
        cli(['--charset', 'UTF-9', 'encode', 'x'])

def test_codec_that_is_not_a_text_encoding(capsys):
    with pytest.raises(UnsupportedCharsetError):
        cli(['--charset', 'hex', 'encode', 'a?'])
