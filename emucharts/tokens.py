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

###############################################################################
### Tokens produced by the label tokenizer. Every token has a 'type' tag and
### a 'val' payload. Expressions are flat lists of tokens: parenthesis and
### commas are Builtin tokens so printers can track the depth of parenthesis.
### Example: the guard of "click [ (x + 1) MOD 2 = 0 ]" is:
###    Expression([Builtin('('), Identifier('x'), Operator('+'), Number('1'),
###                Builtin(')'), Modop('MOD'), Number('2'), Operator('='),
###                Number('0')])
###############################################################################
class Token(object):
    type = ''

    def __init__(self, val):
        self.val = val

    def __eq__(self, other):
        return type(self) is type(other) and self.val == other.val

    def __repr__(self):
        return type(self).__name__ + '(' + repr(self.val) + ')'

    def __str__(self):
        return str(self.val)

class Identifier(Token):
    type = 'identifier'

class Number(Token):
    type = 'number'

class String(Token):
    type = 'string'

###############################################################################
### Arithmetic, relational and logical operators (binary or unary).
###############################################################################
class Operator(Token):
    type = 'operator'

###############################################################################
### The modulo operator. Kept apart from other operators since the MISRA C
### printer rewrites 'a MOD b' into 'fmod(a, b)'.
###############################################################################
class Modop(Token):
    type = 'modop'

###############################################################################
### Parenthesis, argument separators and the true/false literals.
###############################################################################
class Builtin(Token):
    type = 'builtin'

###############################################################################
### Function call: val is the callee name, args the list of Expression.
###############################################################################
class Function(Token):
    type = 'function'

    def __init__(self, val, args=None):
        super().__init__(val)
        self.args = args or []

    def __eq__(self, other):
        return Token.__eq__(self, other) and self.args == other.args

    def __repr__(self):
        return 'Function(' + repr(self.val) + ', ' + repr(self.args) + ')'

###############################################################################
### Expression: val is the flat list of tokens.
###############################################################################
class Expression(Token):
    type = 'expression'

    def __init__(self, val=None):
        super().__init__(val if val is not None else [])

###############################################################################
### State update 'identifier := expression'.
###############################################################################
class Assignment(Token):
    type = 'assignment'

    def __init__(self, identifier, binop, expression):
        super().__init__(None)
        # Identifier token of the updated variable.
        self.identifier = identifier
        # Operator token (':=').
        self.binop = binop
        # Expression token of the new value.
        self.expression = expression

    def __eq__(self, other):
        return isinstance(other, Assignment) and \
               (self.identifier, self.binop, self.expression) == \
               (other.identifier, other.binop, other.expression)

    def __repr__(self):
        return 'Assignment(' + repr(self.identifier) + ', ' + repr(self.binop) + \
               ', ' + repr(self.expression) + ')'

###############################################################################
### Root of the token tree of a transition label:
###    name [ cond ] { actions }
### identifier is None when the label has no name, cond is None when the
### label has no guard and actions is None when the label has no block.
###############################################################################
class Label(object):
    def __init__(self, identifier=None, cond=None, actions=None):
        # Identifier token of the action name.
        self.identifier = identifier
        # Expression token of the guard.
        self.cond = cond
        # List of Assignment tokens.
        self.actions = actions

    def __repr__(self):
        return 'Label(' + repr(self.identifier) + ', ' + repr(self.cond) + ', ' + \
               repr(self.actions) + ')'
