import json

import pytest

from ldapgen.errors import InputError
from ldapgen.template import load_template


@pytest.fixture
def write_json(tmp_path):
    def write(content, name='template.json'):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return str(path)
    return write


def test_load_full_template(write_json):
    path = write_json({'uid': 'jdoe', 'cn': 'John Doe', 'sn': 'Doe', 'mail': 'jdoe@example.com'})
    template = load_template(path)
    assert template.uid == 'jdoe'
    assert template.cn == 'John Doe'
    assert template.sn == 'Doe'
    assert template.mail == 'jdoe@example.com'


def test_missing_fields_are_none(write_json):
    template = load_template(write_json({'sn': 'Doe', 'mail': None}))
    assert template.uid is None
    assert template.cn is None
    assert template.sn == 'Doe'
    assert template.mail is None


def test_unknown_fields_are_ignored(write_json, caplog):
    template = load_template(write_json({'uid': 'jdoe', 'title': 'Engineer'}))
    assert template.uid == 'jdoe'
    assert not hasattr(template, 'title')
    assert 'title' in caplog.text


def test_missing_file(tmp_path):
    path = str(tmp_path / 'nope.json')
    with pytest.raises(InputError) as exc_info:
        load_template(path)
    assert exc_info.value.path == path
    assert exc_info.value.kind == 'input'


@pytest.mark.parametrize('content', [
    '{"uid": ',
    '["jdoe"]',
    '{"uid": 42}',
])
def test_malformed_template(write_json, content):
    path = write_json(content)
    with pytest.raises(InputError) as exc_info:
        load_template(path)
    assert path in str(exc_info.value)
