from emucharts.labels import LabelParser, split_label
from emucharts.tokens import (Identifier, Number, String, Operator, Modop, Builtin,
                              Function, Expression, Assignment)

import pytest

@pytest.fixture(scope='module')
def parser():
    return LabelParser()

###############################################################################
### Splitting labels without parsing guards and actions.
###############################################################################
def test_split_full_label():
    assert split_label('start [ x > 0 ] { y := y + 1 }') == ('start', 'x > 0', ['y := y + 1'])

def test_split_name_only():
    assert split_label('  click  ') == ('click', None, None)

def test_split_discards_blank_actions():
    assert split_label('click { a := 1; ; b := 2; }') == ('click', None, ['a := 1', 'b := 2'])

def test_split_block_before_guard():
    assert split_label('go { x := 1 } [ y ]') == ('go', 'y', ['x := 1'])

def test_split_without_name():
    name, guard, actions = split_label('{ y := 0 }')
    assert guard is None
    assert actions == ['y := 0']

def test_split_empty_label():
    assert split_label('') == ('', None, None)

###############################################################################
### Tokenizer.
###############################################################################
def test_tokenize_full_label(parser):
    result = parser.parse_transition('start [ x > 0 ] { y := y + 1 }')
    assert result.err is None
    label = result.res
    assert label.identifier == Identifier('start')
    assert label.cond == Expression([Identifier('x'), Operator('>'), Number('0')])
    assert label.actions == [
        Assignment(Identifier('y'), Operator(':='),
                   Expression([Identifier('y'), Operator('+'), Number('1')]))
    ]

def test_tokenize_name_only(parser):
    label = parser.parse_transition('tick').res
    assert label.identifier == Identifier('tick')
    assert label.cond is None
    assert label.actions is None

def test_tokenize_without_name(parser):
    label = parser.parse_transition('[ ready = true ]').res
    assert label.identifier is None
    assert label.cond == Expression([Identifier('ready'), Operator('='), Builtin('true')])

def test_tokenize_several_actions(parser):
    label = parser.parse_transition('click { a := 1; b := "on"; }').res
    assert len(label.actions) == 2
    assert label.actions[1].expression == Expression([String('"on"')])

def test_tokenize_parenthesis_and_modulo(parser):
    label = parser.parse_transition('tick [ (x + 1) MOD 2 = 0 ]').res
    assert label.cond.val == [Builtin('('), Identifier('x'), Operator('+'), Number('1'),
                              Builtin(')'), Modop('MOD'), Number('2'), Operator('='),
                              Number('0')]

def test_tokenize_logical_operators(parser):
    label = parser.parse_transition('go [ NOT a AND b OR c ]').res
    assert [t.val for t in label.cond.val] == ['NOT', 'a', 'AND', 'b', 'OR', 'c']
    assert isinstance(label.cond.val[0], Operator)

def test_keywords_inside_identifiers(parser):
    label = parser.parse_transition('go [ android > modulo ]').res
    assert label.cond == Expression([Identifier('android'), Operator('>'), Identifier('modulo')])

def test_tokenize_function_call(parser):
    label = parser.parse_transition('click { x := f(a, 2.5) }').res
    call = label.actions[0].expression.val[0]
    assert call == Function('f', [Expression([Identifier('a')]), Expression([Number('2.5')])])

def test_tokenize_unary_minus(parser):
    label = parser.parse_transition('dec { x := x - -1 }').res
    assert [t.val for t in label.actions[0].expression.val] == ['x', '-', '-', '1']

def test_syntax_error(parser):
    result = parser.parse_transition('start [ x > ')
    assert result.res is None
    assert result.err
    assert not result

def test_empty_label(parser):
    for text in ['', '   ', None]:
        result = parser.parse_transition(text)
        assert result.err is None
        assert result.res.identifier is None
        assert result.res.cond is None
        assert result.res.actions is None
