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

from pathlib import Path
from lark import Lark, Transformer
from lark.exceptions import LarkError
from emucharts.tokens import (Identifier, Number, String, Operator, Modop, Builtin,
                              Function, Expression, Assignment, Label)

# Literals spelled as identifiers in labels.
BOOLEANS = ['true', 'false', 'TRUE', 'FALSE']

###############################################################################
### Split a transition label "name [ guard ] { action; action }" without
### parsing the content of the guard and of the actions. The name ends at
### the first delimiter found after the first character.
### param[in] label the raw transition label.
### return the tuple (name, guard text or None, list of action texts or None).
###############################################################################
def split_label(label):
    label = label or ''
    sq_open, sq_close = label.find('['), label.find(']')
    cur_open, cur_close = label.find('{'), label.find('}')

    guard = None
    if sq_open >= 0 and sq_close > sq_open:
        guard = label[sq_open + 1:sq_close].strip()
    else:
        sq_open = -1

    actions = None
    if cur_open >= 0 and cur_close > cur_open:
        actions = [a.strip() for a in label[cur_open + 1:cur_close].split(';')]
        actions = [a for a in actions if a != '']
    else:
        cur_open = -1

    if sq_open > 0 and (cur_open <= 0 or sq_open < cur_open):
        name = label[:sq_open]
    elif cur_open > 0:
        name = label[:cur_open]
    else:
        name = label
    return name.strip(), guard, actions

###############################################################################
### Result of the tokenizer: either res (a Label) or err (the message).
###############################################################################
class LabelResult(object):
    def __init__(self, res=None, err=None):
        self.res = res
        self.err = err

    def __bool__(self):
        return self.res is not None

###############################################################################
### Convert the Lark AST of a label into tokens.
###############################################################################
class LabelTransformer(Transformer):
    def start(self, children):
        name, guard, block = children
        identifier = None if name is None else Identifier(str(name))
        return Label(identifier, guard, block)

    def guard(self, children):
        return children[0] if len(children) > 0 else Expression()

    def block(self, children):
        return children

    def assignment(self, children):
        name, binop, expression = children
        return Assignment(Identifier(str(name)), Operator(str(binop)), expression)

    def expr(self, children):
        return Expression(self._flatten(children))

    def operand(self, children):
        return self._flatten(children)

    def _flatten(self, children):
        tokens = []
        for c in children:
            if isinstance(c, list):
                tokens.extend(c)
            else:
                tokens.append(c)
        return tokens

    def binop(self, children):
        return Operator(str(children[0]))

    def unop(self, children):
        return Operator(str(children[0]))

    def modop(self, children):
        return Modop(str(children[0]))

    def number(self, children):
        return Number(str(children[0]))

    def string(self, children):
        return String(str(children[0]))

    def identifier(self, children):
        name = str(children[0])
        if name in BOOLEANS:
            return Builtin(name)
        return Identifier(name)

    def call(self, children):
        return Function(str(children[0]), children[1:])

    def parenthesis(self, children):
        return [Builtin('(')] + children[0].val + [Builtin(')')]

###############################################################################
### Context-free parser of transition labels (Lark lib). The grammar file
### is loaded once per instance.
###############################################################################
class LabelParser(object):
    def __init__(self, grammar_file=None):
        if grammar_file is None:
            grammar_file = Path(__file__).parent / 'labels.ebnf'
        with open(grammar_file) as fd:
            self.parser = Lark(fd.read(), parser='lalr', maybe_placeholders=True)
        self.transformer = LabelTransformer()

    ###########################################################################
    ### Tokenize a transition label. Never raise on syntax errors. A blank
    ### label has no name, no guard and no action.
    ### param[in] label the raw transition label.
    ### return LabelResult holding a Label or the error message.
    ###########################################################################
    def parse_transition(self, label):
        if label is None or label.strip() == '':
            return LabelResult(res=Label())
        try:
            ast = self.parser.parse(label)
        except LarkError as e:
            return LabelResult(err=str(e).strip())
        return LabelResult(res=self.transformer.transform(ast))
