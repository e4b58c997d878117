#!/usr/bin/env python3
###############################################################################
## Emucharts Code Generators (MAL and MISRA C printers).
## Copyright (c) 2026 The Emucharts Code Generators contributors
##
## This file is part of Emucharts Code Generators.
##
## This tool is free software: you can redistribute it and/or modify it
## under the terms of the GNU General Public License as published by
## the Free Software Foundation, either version 3 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful, but
## WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
## General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program.  If not, see http://www.gnu.org/licenses/.
###############################################################################

import math

###############################################################################
### Emucharts operators => MISRA C operators. Unknown operators are kept.
###############################################################################
C_OPERATORS = {
    ':=': '=',
    'AND': '&&',
    'OR': '||',
    'NOT': '!',
    'MOD': 'fmod',
    'and': '&&',
    'or': '||',
    'mod': 'fmod',
    'not': '!',
    '=': '==',
    '/=': '!=',
}

###############################################################################
### Emucharts operators => MAL operators. Unknown operators are kept.
###############################################################################
MAL_OPERATORS = {
    ':=': "'=",
    '==': '=',
    'AND': '&',
    'and': '&',
    '&&': '&',
    'OR': '|',
    'or': '|',
    '||': '|',
    'NOT': '!',
    'not': '!',
    'mod': 'MOD',
    '%': 'MOD',
}

###############################################################################
### Emucharts types => MISRA C fixed-length types (MISRA 1998 rule 13) and
### the typedef to declare the first time the type is used. The type char
### shall always be declared as unsigned char or signed char (rule 14).
###############################################################################
BOOL_TYPE = 'UC_8'
INT_TYPE = 'UI_32'
FLOAT_TYPE = 'F_32'
DOUBLE_TYPE = 'D_64'

C_TYPES = {
    'bool': (BOOL_TYPE, None),
    'boolean': (BOOL_TYPE, None),
    'char': (BOOL_TYPE, 'typedef unsigned char ' + BOOL_TYPE + ';'),
    'int': (INT_TYPE, 'typedef unsigned int ' + INT_TYPE + ';'),
    'float': (FLOAT_TYPE, 'typedef float ' + FLOAT_TYPE + ';'),
    'real': (DOUBLE_TYPE, 'typedef double ' + DOUBLE_TYPE + ';'),
    'double': (DOUBLE_TYPE, 'typedef double ' + DOUBLE_TYPE + ';'),
}

# Always declared: booleans are used by guards even without bool variables.
BOOL_DECLARATIONS = [
    'typedef unsigned char ' + BOOL_TYPE + ';',
    '#define true 1',
    '#define false 0',
    '#define TRUE 1',
    '#define FALSE 0',
]

# Needed by fmod().
MATH_DECLARATIONS = [
    '#ifndef MATH_H',
    '#define MATH_H',
    '#include <math.h>',
    '#endif',
]

###############################################################################
### Accumulator of the declarations (typedefs, defines, includes) needed by
### the generated C code. Created fresh for each print invocation. Adding
### the same declaration twice has no effect.
###############################################################################
class Declarations(object):
    def __init__(self):
        self.lines = []

    def __contains__(self, line):
        return line in self.lines

    def __iter__(self):
        return iter(self.lines)

    def __len__(self):
        return len(self.lines)

    def add(self, line):
        if line not in self.lines:
            self.lines.append(line)

    ###########################################################################
    ### Add a block of lines (i.e. an include guard) once. The key line
    ### identifies the block.
    ###########################################################################
    def add_block(self, lines, key):
        if key not in self.lines:
            self.lines.extend(lines)

    def add_math(self):
        self.add_block(MATH_DECLARATIONS, '#include <math.h>')

    def add_booleans(self):
        for line in BOOL_DECLARATIONS:
            self.add(line)

###############################################################################
### Convert an emucharts type into a MISRA C type, registering its typedef.
### Unknown types (i.e. Time) are returned unchanged.
### param[in] type the emucharts type.
### param[in] declarations the Declarations accumulator (or None).
###############################################################################
def c_type(type, declarations=None):
    entry = C_TYPES.get(type.lower())
    if entry is None:
        return type
    ctype, typedef = entry
    if typedef is not None and declarations is not None:
        declarations.add(typedef)
    return ctype

###############################################################################
### Convert an operator. Unknown operators are returned unchanged.
###############################################################################
def c_operator(op):
    return C_OPERATORS.get(op, op)

def mal_operator(op):
    return MAL_OPERATORS.get(op, op)

###############################################################################
### Is the string a finite number ?
###############################################################################
def is_number(value):
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False

###############################################################################
### Append the MISRA C suffix to a numeric literal (MISRA 1998 rule 18):
###    int   3   => 3u
###    float 2   => 2.0f
###    float 2.5 => 2.5f
### Non numeric literals and other types are returned unchanged. The type
### can be given as an emucharts type or as a MISRA C type.
###############################################################################
def suffix_literal(value, type):
    if not is_number(value) or type is None:
        return value
    ctype = c_type(type).upper()
    if ctype == INT_TYPE:
        return value + 'u'
    if ctype in [FLOAT_TYPE, DOUBLE_TYPE]:
        if '.' not in value and 'e' not in value.lower():
            return value + '.0f'
        return value + 'f'
    return value
