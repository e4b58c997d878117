from emucharts.tables import (Declarations, c_type, c_operator, mal_operator,
                              suffix_literal, is_number, MATH_DECLARATIONS)

###############################################################################
### Numeric literal suffixes.
###############################################################################
def test_integer_suffix():
    assert suffix_literal('3', 'int') == '3u'
    assert suffix_literal('3', 'UI_32') == '3u'

def test_float_suffix():
    assert suffix_literal('2', 'float') == '2.0f'
    assert suffix_literal('2.5', 'float') == '2.5f'
    assert suffix_literal('2', 'real') == '2.0f'
    assert suffix_literal('1e3', 'double') == '1e3f'

def test_no_suffix():
    assert suffix_literal('abc', 'int') == 'abc'
    assert suffix_literal('1', 'bool') == '1'
    assert suffix_literal('1', 'Time') == '1'
    assert suffix_literal(None, 'int') is None

def test_is_number():
    assert is_number('42')
    assert is_number('-4.5')
    assert not is_number('x')
    assert not is_number('inf')
    assert not is_number(None)

###############################################################################
### Types and their typedefs.
###############################################################################
def test_types_register_typedef_once():
    declarations = Declarations()
    assert c_type('int', declarations) == 'UI_32'
    assert c_type('Int', declarations) == 'UI_32'
    assert c_type('double', declarations) == 'D_64'
    assert list(declarations) == ['typedef unsigned int UI_32;', 'typedef double D_64;']

def test_bool_type_has_no_typedef():
    declarations = Declarations()
    assert c_type('boolean', declarations) == 'UC_8'
    assert len(declarations) == 0

def test_unknown_type_passes_through():
    declarations = Declarations()
    assert c_type('Time', declarations) == 'Time'
    assert len(declarations) == 0

def test_char_and_bool_share_typedef():
    declarations = Declarations()
    c_type('char', declarations)
    declarations.add_booleans()
    assert declarations.lines.count('typedef unsigned char UC_8;') == 1

###############################################################################
### Operators.
###############################################################################
def test_c_operators():
    assert c_operator(':=') == '='
    assert c_operator('AND') == '&&'
    assert c_operator('or') == '||'
    assert c_operator('NOT') == '!'
    assert c_operator('MOD') == 'fmod'
    assert c_operator('=') == '=='
    assert c_operator('<=') == '<='
    assert c_operator('xor') == 'xor'

def test_mal_operators():
    assert mal_operator(':=') == "'="
    assert mal_operator('==') == '='
    assert mal_operator('AND') == '&'
    assert mal_operator('>') == '>'

def test_math_block_added_once():
    declarations = Declarations()
    declarations.add_math()
    declarations.add_math()
    assert declarations.lines == MATH_DECLARATIONS
