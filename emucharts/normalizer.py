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

from emucharts.console import TokenError
from emucharts.tables import c_operator, suffix_literal
from emucharts.tokens import (Identifier, Number, String, Operator, Modop, Builtin,
                              Function, Expression, Assignment)

# Pointer on the state structure given to the generated C functions.
STATE_PREFIX = 'st->'
# C function replacing the modulo operator.
FMOD = 'fmod'
# Operators that do not end the left operand of a modulo.
MULTIPLICATIVE = ['*', '/']

###############################################################################
### Translate the token trees of guards and actions into MISRA C:
###   - variables are accessed through the state structure (st->x) while
###     constants are kept as they are;
###   - operators are translated (AND => &&, = => ==, := => = ...);
###   - 'a MOD b' becomes 'fmod(a, b)' and math.h is declared;
###   - numeric literals assigned to a local variable get their suffix.
### The normalizer does not modify the given tokens: new ones are returned.
###############################################################################
class ExpressionNormalizer(object):
    def __init__(self, chart, declarations):
        # The emuchart (to know constants and variables).
        self.chart = chart
        # Declarations accumulator of the current print invocation.
        self.declarations = declarations

    ###########################################################################
    ### Return the name of an identifier as seen from the generated code.
    ###########################################################################
    def qualify(self, name):
        if self.chart.is_constant(name):
            return name
        return STATE_PREFIX + name

    ###########################################################################
    ### Entry point: normalize a token (any kind).
    ###########################################################################
    def normalize(self, token):
        if isinstance(token, Assignment):
            return self.normalize_assignment(token)
        if isinstance(token, Expression):
            return Expression([self.normalize(t) for t in self.rewrite_modulo(token.val)])
        if isinstance(token, Identifier):
            return Identifier(self.qualify(token.val))
        if isinstance(token, Function):
            return Function(token.val, [self.normalize(a) for a in token.args])
        if isinstance(token, (Operator, Modop)):
            return type(token)(c_operator(token.val))
        if isinstance(token, (Number, String, Builtin)):
            return type(token)(token.val)
        raise TokenError('Unknown token ' + repr(token))

    ###########################################################################
    ### Normalize a state update. Numeric literals are suffixed according to
    ### the type of the updated local variable.
    ###########################################################################
    def normalize_assignment(self, assignment):
        expression = assignment.expression
        variable = self.local_variable(assignment.identifier.val)
        if variable is not None:
            expression = suffix_numbers(expression, variable.type)
        return Assignment(Identifier(self.qualify(assignment.identifier.val)),
                          Operator(c_operator(assignment.binop.val)),
                          self.normalize(expression))

    def local_variable(self, name):
        variable = self.chart.find_variable(name)
        if variable is None or variable.scope != 'local':
            return None
        return variable

    ###########################################################################
    ### Rewrite each 'lhs MOD rhs' found in the flat list of tokens into the
    ### function call 'fmod(lhs, rhs)'. Operands are delimited by walking the
    ### tokens with a counter of parenthesis depth: backward from the modulo
    ### until the enclosing '(' (or a separator or a weaker operator), then
    ### forward until the matching ')' (or a separator or any operator).
    ### param[in] tokens the flat list of tokens of an expression.
    ### return a new list of tokens.
    ###########################################################################
    def rewrite_modulo(self, tokens):
        tokens = list(tokens)
        i = 0
        while i < len(tokens):
            if not isinstance(tokens[i], Modop):
                i += 1
                continue
            self.declarations.add_math()
            # Left operand
            depth = 0
            j = i - 1
            while j >= 0:
                t = tokens[j]
                if is_builtin(t, ')'):
                    depth += 1
                elif is_builtin(t, '('):
                    if depth == 0:
                        break
                    depth -= 1
                elif depth == 0 and (is_builtin(t, ',') or
                                     (is_binary(tokens, j) and t.val not in MULTIPLICATIVE)):
                    break
                j -= 1
            # Right operand
            depth = 0
            k = i + 1
            while k < len(tokens):
                t = tokens[k]
                if is_builtin(t, '('):
                    depth += 1
                elif is_builtin(t, ')'):
                    if depth == 0:
                        break
                    depth -= 1
                elif depth == 0 and is_builtin(t, ','):
                    break
                elif depth == 0 and isinstance(t, (Operator, Modop)) and k > i + 1 \
                     and not isinstance(tokens[k - 1], Operator):
                    break
                k += 1
            lhs = Expression(tokens[j + 1:i])
            rhs = Expression(tokens[i + 1:k])
            tokens[j + 1:k] = [Function(FMOD, [lhs, rhs])]
            i = j + 2
        return tokens

###############################################################################
### Is the token the given parenthesis or separator ?
###############################################################################
def is_builtin(token, val):
    return isinstance(token, Builtin) and token.val == val

###############################################################################
### Is the operator at the given index a binary operator ? A binary operator
### follows an operand: an operator at the first position, or following
### '(', ',' or another operator, is unary.
###############################################################################
def is_binary(tokens, index):
    if not isinstance(tokens[index], Operator) or index == 0:
        return False
    previous = tokens[index - 1]
    if isinstance(previous, (Operator, Modop)):
        return False
    return not (is_builtin(previous, '(') or is_builtin(previous, ','))

###############################################################################
### Return a copy of the expression where numeric literals get the MISRA C
### suffix of the given type.
###############################################################################
def suffix_numbers(expression, type):
    tokens = []
    for t in expression.val:
        if isinstance(t, Number):
            tokens.append(Number(suffix_literal(t.val, type)))
        elif isinstance(t, Function):
            tokens.append(Function(t.val, [suffix_numbers(a, type) for a in t.args]))
        else:
            tokens.append(t)
    return Expression(tokens)

###############################################################################
### Convert a normalized token into C code. Tokens are separated by a space.
###############################################################################
def c_text(token):
    if token is None:
        return ''
    if isinstance(token, Assignment):
        return c_text(token.identifier) + ' ' + token.binop.val + ' ' + c_text(token.expression)
    if isinstance(token, Expression):
        return ' '.join(c_text(t) for t in token.val)
    if isinstance(token, Function):
        return token.val + '(' + ', '.join(c_text(a) for a in token.args) + ')'
    if isinstance(token, (Identifier, Number, String, Operator, Modop, Builtin)):
        return str(token.val)
    raise TokenError('Unknown token ' + repr(token))
