import io

import pytest

from ubootenv import Env, import_text
from ubootenv.errors import MalformedLineError


@pytest.fixture
def env(tmp_path):
    return Env.create(str(tmp_path / 'uboot.env'), 256)


def test_import_skips_comments_and_blank_lines(env):
    import_text(env, io.StringIO('# comment\n\nkey=value\nk2=v2'))
    assert dict(env.items()) == {'key': 'value', 'k2': 'v2'}


def test_import_splits_on_first_equals(env):
    import_text(env, io.StringIO('bootargs=console=ttyS0,115200 root=/dev/mmcblk0p2\r\n'))
    assert env.get('bootargs') == 'console=ttyS0,115200 root=/dev/mmcblk0p2'


def test_import_bad_line_keeps_earlier_lines(env):
    with pytest.raises(MalformedLineError) as excinfo:
        import_text(env, io.StringIO('a=1\nbadline\nb=2\n'))
    assert excinfo.value.lineno == 2
    assert excinfo.value.line == 'badline'
    assert dict(env.items()) == {'a': '1'}


def test_import_empty_key_is_malformed(env):
    with pytest.raises(MalformedLineError):
        import_text(env, io.StringIO('=value\n'))


def test_import_empty_value_removes_key(env):
    env.set('stale', 'yes')
    import_text(env, io.StringIO('stale=\nfresh=1\n'))
    assert dict(env.items()) == {'fresh': '1'}


def test_import_binary_stream(env):
    import_text(env, io.BytesIO('name=café\n'.encode('utf-8')))
    assert env.get('name') == 'café'


def test_import_nul_in_line_is_malformed(env):
    with pytest.raises(MalformedLineError) as excinfo:
        import_text(env, io.StringIO('ok=1\na=x\0y\n'))
    assert excinfo.value.lineno == 2
    assert dict(env.items()) == {'ok': '1'}


def test_import_invalid_utf8_is_malformed(env):
    with pytest.raises(MalformedLineError) as excinfo:
        import_text(env, io.BytesIO(b'ok=1\nk=\xff\xfe\n'))
    assert excinfo.value.lineno == 2
    assert excinfo.value.line == b'k=\xff\xfe'
    assert dict(env.items()) == {'ok': '1'}
