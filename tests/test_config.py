import json


from argcompose import Success
from argcompose import opt_integral
from argcompose import opt_text
from argcompose import parse
from argcompose import switch
from argcompose.config import environ_defaults
from argcompose.config import flatten
from argcompose.config import load_defaults
from argcompose.config import merge_defaults
from argcompose.config import resolve_paths


def test_flatten_keeps_scalars_as_text():
    data = {'age': 3, 'ratio': 0.5, 'debug': True, 'quiet': False, 'name': 'x',
            'nested': {'a': 1}, 'items': [1, 2], 'empty': None}
    assert flatten(data) == {
        'age': '3', 'ratio': '0.5', 'debug': 'true', 'quiet': 'false', 'name': 'x',
    }


def test_environ_defaults():
    environ = {'APP_LOG_LEVEL': 'debug', 'APP_NAME': 'x', 'APP_': 'y', 'OTHER': 'z'}
    assert environ_defaults('APP_', environ=environ) == {'log-level': 'debug', 'name': 'x'}


def test_environ_defaults_reads_process_environment(monkeypatch):
    monkeypatch.setenv('ARGCOMPOSE_TEST_AGE', '5')
    assert environ_defaults('ARGCOMPOSE_TEST_') == {'age': '5'}


def test_merge_defaults():
    assert merge_defaults() == {}
    assert merge_defaults({'a': '1', 'b': '2'}, None, {'b': '3'}) == {'a': '1', 'b': '3'}


def test_resolve_paths(tmp_path):
    (tmp_path / 'app.json').write_text('{}')
    absolute = str(tmp_path / 'abs.json')
    result = resolve_paths(['app.json', 'other.json', absolute], [str(tmp_path)])
    assert result == [str(tmp_path / 'app.json'), 'other.json', absolute]


def test_load_defaults_json(tmp_path):
    path = tmp_path / 'app.json'
    path.write_text(json.dumps({'name': 'Ann', 'age': 30, 'force': True}))

    defaults = load_defaults(str(path))
    assert defaults == {'name': 'Ann', 'age': '30', 'force': 'true'}

    parser = opt_text('name') & opt_integral('age') & switch('force')
    assert parse('test', parser, ['--age', '31'], defaults=defaults) == \
        Success((('Ann', 31), True))


def test_load_defaults_relative_and_node(tmp_path):
    (tmp_path / 'app.json').write_text(json.dumps({'app': {'name': 'Bob'}, 'name': 'x'}))

    assert load_defaults('app.json', search_paths=[str(tmp_path)], node='app') == \
        {'name': 'Bob'}


def test_load_defaults_later_files_win(tmp_path):
    (tmp_path / 'a.json').write_text(json.dumps({'name': 'a', 'age': 1}))
    (tmp_path / 'b.json').write_text(json.dumps({'name': 'b'}))

    defaults = load_defaults(str(tmp_path / 'a.json'), str(tmp_path / 'b.json'))
    assert defaults == {'name': 'b', 'age': '1'}


def test_load_defaults_yaml(tmp_path):
    path = tmp_path / 'app.yaml'
    path.write_text('name: Ann\nage: 30\nverbose: yes\n')

    assert load_defaults(str(path)) == {'name': 'Ann', 'age': '30', 'verbose': 'true'}


def test_load_defaults_node_through_non_mapping(tmp_path):
    (tmp_path / 'app.json').write_text(json.dumps({'app': [1, 2], 'name': 'x'}))
    path = str(tmp_path / 'app.json')

    assert load_defaults(path, node=['app', 'name']) == {}
    assert load_defaults(path, node=['name']) == {}
