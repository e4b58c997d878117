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

from emucharts.console import Diagnostics, TokenError
from emucharts.labels import LabelParser, split_label
from emucharts.tables import mal_operator
from emucharts.tokens import (Identifier, Number, String, Operator, Modop, Builtin,
                              Function, Expression, Assignment)
from emucharts.transitions import action_id

SEPARATOR = '# ---------------------------------------------------------------'

###############################################################################
### Convert a token into MAL. Tokens are concatenated without spaces except
### around the MOD keyword.
###############################################################################
def mal_text(token):
    if token is None:
        return ''
    if isinstance(token, Assignment):
        return token.identifier.val + mal_operator(token.binop.val) + mal_text(token.expression)
    if isinstance(token, Expression):
        return ''.join(mal_text(t) for t in token.val)
    if isinstance(token, Function):
        return token.val + '(' + ','.join(mal_text(a) for a in token.args) + ')'
    if isinstance(token, Modop):
        return ' ' + mal_operator(token.val) + ' '
    if isinstance(token, Operator):
        return mal_operator(token.val)
    if isinstance(token, (Identifier, Number, String, Builtin)):
        return str(token.val)
    raise TokenError('Unknown token ' + repr(token))

###############################################################################
### Generate MAL interactors (a language for modelling interactive systems
### as probabilistic transition systems) from emucharts. Each transition is
### printed as a guarded formula:
###    (current_state=idle) & (x>0) -> [start] (current_state'=running) & (y'=y+1)
###############################################################################
class MALPrinter(object):
    def __init__(self, name='', verbose=True):
        # Name of the generated model.
        self.model_name = name
        # Echo diagnostics on the console.
        self.verbose = verbose
        # Tokenizer of transition labels.
        self.parser = LabelParser()
        # Diagnostics of the last print invocation.
        self.diagnostics = Diagnostics(name, verbose)

    ###########################################################################
    ### Comment block on the top of the generated file.
    ###########################################################################
    def print_descriptor(self, chart):
        ans = SEPARATOR + '\n#  MAL Model: ' + chart.name
        if chart.author is not None:
            ans += '\n#  Author: ' + chart.author.name + \
                   '\n#          ' + chart.author.affiliation + \
                   '\n#          ' + chart.author.contact
        if chart.description != '':
            ans += '\n' + SEPARATOR + '\n#  ' + chart.description
        ans += '\n' + SEPARATOR + '\n'
        return ans

    def print_disclaimer(self):
        return '\n' + SEPARATOR + '\n' + \
               '#  MAL model generated using PVSio-web MALPrinter2 ver 0.1\n' + \
               '#  Tool freely available at http://www.pvsioweb.org' + \
               '\n' + SEPARATOR + '\n'

    ###########################################################################
    ### "defines" section. Constants without value are commented.
    ###########################################################################
    def print_constants(self, chart):
        ans = 'defines\n'
        ans += ' INT_MIN = -4\n'
        ans += ' INT_MAX = 4\n'
        for c in chart.constants:
            if c.value is not None:
                ans += c.name + ' ' + c.value + '\n'
            else:
                ans += '# ' + c.name + '\n'
        return ans + '\n'

    ###########################################################################
    ### "types" section: the enumerate of the states.
    ###########################################################################
    def print_types(self, chart):
        ans = 'types\n'
        ans += ' int = INT_MIN..INT_MAX\n'
        ans += ' nat = 0..INT_MAX\n'
        if len(chart.states) > 0:
            ans += ' MachineState = { ' + ', '.join(s.name for s in chart.states) + ' }\n'
        return ans + '\n'

    def print_attributes(self, chart):
        ans = ' attributes\n'
        ans += '  current_state: MachineState\n'
        ans += '  previous_state: MachineState\n'
        for v in chart.variables:
            ans += '  ' + v.name + ': ' + v.type + '\n'
        return ans + '\n'

    def print_actions(self, table):
        ans = ' actions\n'
        for action in table:
            ans += '  ' + action + '\n'
        return ans + '\n'

    ###########################################################################
    ### Initial transitions: set the initial state and apply the actions.
    ###########################################################################
    def print_initial_transitions(self, chart):
        ans = ''
        for tr in chart.initial_transitions:
            name, guard, actions = split_label(tr.name)
            ans += ' [] previous_state = ' + tr.target + ' & current_state = ' + tr.target
            for a in actions or []:
                ans += ' & ' + a
            ans += '\n'
        return ans + '\n'

    ###########################################################################
    ### Build the table "action => source state => [(target, guard, effect)]"
    ### in the order transitions are given. Transitions with bad labels are
    ### skipped.
    ###########################################################################
    def build_table(self, chart):
        table = dict()
        for tr in chart.transitions:
            result = self.parser.parse_transition(tr.name)
            if result.err is not None:
                self.diagnostics.error('Bad label "' + str(tr.name) + '" on the transition ' +
                                       str(tr.id) + ': ' + result.err)
                continue
            label = result.res
            cond = mal_text(label.cond)
            effect = ' & '.join(mal_text(a) for a in label.actions or [])
            sources = table.setdefault(action_id(label), dict())
            sources.setdefault(tr.source, []).append((tr.target, cond, effect))
        return table

    ###########################################################################
    ### One guarded formula for each (source, action, target).
    ###########################################################################
    def print_transitions(self, table):
        ans = ''
        for action, sources in table.items():
            for source, arcs in sources.items():
                for target, cond, effect in arcs:
                    ans += '(current_state=' + source + ')'
                    if cond != '':
                        ans += ' & (' + cond + ')'
                    ans += ' -> [' + action + "] (current_state'=" + target + ')'
                    if effect != '':
                        ans += ' & (' + effect + ')'
                    ans += '\n'
        return ans

    ###########################################################################
    ### Entry point: return the MAL model of the emuchart.
    ###########################################################################
    def print(self, chart):
        self.diagnostics = Diagnostics(chart.name, self.verbose)
        for msg in chart.warnings:
            self.diagnostics.warning(msg)
        table = self.build_table(chart)
        ans = self.print_descriptor(chart) + '\n'
        ans += self.print_constants(chart)
        ans += self.print_types(chart)
        ans += 'interactor main #' + chart.name + '\n'
        ans += self.print_attributes(chart)
        ans += self.print_actions(table)
        ans += self.print_initial_transitions(chart)
        ans += self.print_transitions(table)
        ans += '\n'
        ans += self.print_disclaimer()
        return ans
