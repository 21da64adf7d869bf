from argcompose import ArgName
from argcompose import Description
from argcompose import HelpMessage
from argcompose.types import help_message


def test_arg_name_derives_flags_and_metavar():
    name = ArgName('name')
    assert name.long_flag == '--name'
    assert name.short_flag == '-n'
    assert name.metavar == 'NAME'


def test_arg_name_with_dashes():
    name = ArgName('log-level')
    assert name.long_flag == '--log-level'
    assert name.short_flag == '-l'
    assert name.metavar == 'LOG-LEVEL'


def test_empty_arg_name_has_no_short_flag():
    name = ArgName('')
    assert name.short_flag is None
    assert name.long_flag == '--'
    assert name.metavar == ''


def test_wrappers_compare_as_text():
    assert ArgName('x') == 'x'
    assert Description('Greeting script') == 'Greeting script'
    assert HelpMessage('') == ''


def test_help_message_keeps_absent_and_empty_apart():
    assert help_message(None) is None
    empty = help_message('')
    assert isinstance(empty, HelpMessage)
    assert empty == ''
