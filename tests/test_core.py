import typing

import pytest

from argcompose import DefinitionError
from argcompose import Parser
from argcompose import Success
from argcompose import apply
from argcompose import opt_integral
from argcompose import opt_text
from argcompose import optional
from argcompose import pair
from argcompose import parse
from argcompose import pure
from argcompose import switch
from argcompose.core import MISSING
from argcompose.core import ArgumentParser
from argcompose.core import MissingArguments
from argcompose.options import OptionField


class Person(typing.NamedTuple):
    name: str
    age: int


def test_parsers_are_descriptions():
    parser = opt_text('name') & switch('verbose')
    assert isinstance(parser, Parser)
    assert [str(field.name) for field in parser.fields] == ['name', 'verbose']
    assert isinstance(parser.fields, tuple)
    assert repr(parser) == "Parser(OptionField('name'), SwitchField('verbose'))"


def test_map_transforms_result():
    parser = opt_text('name').map(str.upper)
    assert parse('test', parser, ['--name', 'john']) == Success('JOHN')


def test_pure_reads_nothing():
    parser = pure(42)
    assert parser.fields == ()
    assert parse('test', parser, []) == Success(42)


def test_pair_and_operator_agree():
    argv = ['--age', '3', '--name', 'x']
    assert parse('test', pair(opt_text('name'), opt_integral('age')), argv) == Success(('x', 3))
    assert parse('test', opt_text('name') & opt_integral('age'), argv) == Success(('x', 3))


def test_apply_builds_records():
    parser = apply(Person, opt_text('name'), opt_integral('age'))
    result = parse('test', parser, ['--name', 'John', '--age', '42'])
    assert result == Success(Person('John', 42))


def test_apply_flattens_nested_parsers():
    parser = apply(lambda a, b, c: [a, b, c], switch('all'), opt_text('name') & pure(1),
                   opt_integral('count'))
    result = parse('test', parser, ['-c', '2', '-n', 'x'])
    assert result == Success([False, ('x', 1), 2])


def test_optional_returns_default_when_absent():
    parser = optional(opt_integral('age'), default=18)
    assert parse('test', parser, []) == Success(18)
    assert parse('test', parser, ['--age', '30']) == Success(30)


def test_optional_group_requires_all_or_nothing():
    parser = optional(opt_text('host') & opt_integral('port'))
    assert parse('test', parser, []) == Success(None)
    assert parse('test', parser, ['--host', 'a', '--port', '1']) == Success(('a', 1))

    result = parse('test', parser, ['--host', 'a'])
    assert 'required' in result.message
    assert '--port' in result.message


def test_optional_ignores_switches():
    parser = optional(switch('force') & opt_text('name'), default='none')
    assert parse('test', parser, ['--force']) == Success('none')
    assert parse('test', parser, ['--force', '--name', 'x']) == Success((True, 'x'))


def test_optional_fields_are_copies():
    parser = opt_text('name')
    optional(parser)
    assert parser.fields[0].required is True


def test_missing_arguments_message():
    ex = MissingArguments([OptionField(str, 'port')])
    assert ex.message == 'the following arguments are required: --port'
    assert not MISSING


def test_argument_parser_shares_short_flags_first_come():
    argparser = ArgumentParser(prog='test')
    assert argparser.flags_for(opt_text('verbose').fields[0].name) == ['-v', '--verbose']
    assert argparser.flags_for(opt_text('value').fields[0].name) == ['--value']


def test_argument_parser_rejects_duplicate_long_flags():
    argparser = ArgumentParser(prog='test')
    argparser.add_parser(opt_text('name'))
    with pytest.raises(DefinitionError):
        argparser.add_parser(switch('name'))


def test_argument_parser_reserves_help():
    with pytest.raises(DefinitionError):
        ArgumentParser(prog='test').add_parser(switch('help'))
