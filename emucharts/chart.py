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
from emucharts.console import ChartError

import json
import networkx as nx

# Scopes of variables. Unknown scopes (i.e. 'global') are local variables.
SCOPES = ['input', 'output', 'local']

###############################################################################
### Author of the emuchart (displayed in the descriptor of generated files).
###############################################################################
class Author(object):
    def __init__(self, name='', affiliation='', contact=''):
        self.name = name
        self.affiliation = affiliation
        self.contact = contact

###############################################################################
### Structure holding a state of the emuchart.
###############################################################################
class State(object):
    def __init__(self, name, id=''):
        # Label of the state (may be duplicated among states).
        self.name = name
        # Unique identifier.
        self.id = id if id != '' else name

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'State(' + self.name + ')'

###############################################################################
### Structure holding a transition of the emuchart. Example of label:
###    click [ x > 0 ] { y := y + 1; z := 0 }
### For initial transitions the source is None.
###############################################################################
class Transition(object):
    def __init__(self, name, id='', source=None, target=''):
        # Raw label: name [ guard ] { actions }.
        self.name = name
        # Unique identifier.
        self.id = id
        # Name of the source state (None for initial transitions).
        self.source = source
        # Name of the target state.
        self.target = target

    def __str__(self):
        return str(self.source) + ' ==> ' + self.target + ' : ' + self.name

###############################################################################
### Typed variable of the emuchart.
###############################################################################
class Variable(object):
    def __init__(self, name, type, value=None, scope='local'):
        self.name = name
        self.type = type
        # Initial value (string or None when not set).
        self.value = value
        # One of SCOPES.
        self.scope = scope if scope in SCOPES else 'local'

    def __repr__(self):
        return 'Variable(' + self.name + ': ' + self.type + ')'

###############################################################################
### Typed constant of the emuchart. The value may be unset.
###############################################################################
class Constant(object):
    def __init__(self, name, type, value=None):
        self.name = name
        self.type = type
        self.value = value

    def __repr__(self):
        return 'Constant(' + self.name + ': ' + self.type + ')'

###############################################################################
### Return the state name referenced by a transition end: the emuchart
### format stores {name, id} objects but bare names are accepted too.
###############################################################################
def _state_name(ref):
    if ref is None:
        return None
    if isinstance(ref, dict):
        return ref.get('name')
    return str(ref)

###############################################################################
### Convert a JSON value into a string value (numbers are kept as typed).
###############################################################################
def _value(v):
    if v is None or v == '':
        return None
    if isinstance(v, bool):
        return 'true' if v else 'false'
    return str(v)

###############################################################################
### Context of an emuchart: the finite-state-chart model given to printers.
### States and transitions are also stored inside a networkx multi-graph
### (several transitions may link the same pair of states).
###############################################################################
class Chart(object):
    def __init__(self, name):
        # Name of the emuchart.
        self.name = name
        # Optional Author.
        self.author = None
        # Optional description text.
        self.description = ''
        # List of Constant.
        self.constants = []
        # List of Variable (all scopes).
        self.variables = []
        # List of State in the order of declaration.
        self.states = []
        # List of Transition in the order of declaration.
        self.transitions = []
        # List of initial Transition (without source).
        self.initial_transitions = []
        # Graph: node = state name with attribute 'data' of type State, edge
        # keyed by transition id with attribute 'data' of type Transition.
        self.graph = nx.MultiDiGraph()
        # Warnings found while loading (undeclared states ...).
        self.warnings = []

    def __str__(self):
        return self.name

    ###########################################################################
    ### Add a state. The graph node is created if and only if it does not
    ### belong to the graph. Generated code refers to states by name, so a
    ### second state with the same name is merged into the first one.
    ###########################################################################
    def add_state(self, name, id=''):
        if self.graph.has_node(name):
            state = self.graph.nodes[name]['data']
            if id != '' and id != state.id:
                self.warnings.append('State ' + name + ' (' + id + ') has the same name as the state '
                                     + state.id + ' and is merged with it')
            return state
        state = State(name, id)
        self.states.append(state)
        self.graph.add_node(name, data=state)
        return state

    ###########################################################################
    ### Add a transition. Referenced states that have not been declared are
    ### created on the fly and a warning is memorized.
    ###########################################################################
    def add_transition(self, tr):
        if tr.id == '':
            tr.id = 'T' + str(len(self.transitions) + 1)
        for state in [tr.source, tr.target]:
            if not self.graph.has_node(state):
                self.warnings.append('Transition ' + tr.name + ' refers to the undeclared state ' + state)
                self.add_state(state)
        self.transitions.append(tr)
        self.graph.add_edge(tr.source, tr.target, key=tr.id, data=tr)

    ###########################################################################
    ### Add an initial transition (not stored in the graph: no source).
    ###########################################################################
    def add_initial_transition(self, tr):
        if not self.graph.has_node(tr.target):
            self.warnings.append('Initial transition ' + tr.name + ' refers to the undeclared state ' + tr.target)
            self.add_state(tr.target)
        self.initial_transitions.append(tr)

    ###########################################################################
    ### Return the list of transitions leaving the given state, keeping the
    ### order of declaration.
    ###########################################################################
    def outgoing(self, state):
        if not self.graph.has_node(state):
            return []
        ids = set(key for _, _, key in self.graph.out_edges(state, keys=True))
        return [tr for tr in self.transitions if tr.source == state and tr.id in ids]

    ###########################################################################
    ### Return variables of the given scope.
    ###########################################################################
    def variables_of(self, scope):
        return [v for v in self.variables if v.scope == scope]

    def is_constant(self, name):
        return any(c.name == name for c in self.constants)

    def find_variable(self, name):
        for v in self.variables:
            if v.name == name:
                return v
        return None

    ###########################################################################
    ### Create a chart from the emuchart dictionary format (see README).
    ###########################################################################
    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ChartError('The emuchart shall be a dictionary')
        if not data.get('name'):
            raise ChartError('The emuchart has no name')

        chart = Chart(str(data['name']))
        author = data.get('author')
        if isinstance(author, dict):
            chart.author = Author(author.get('name', ''), author.get('affiliation', ''),
                                  author.get('contact', ''))
        chart.description = data.get('description') or ''

        for c in Chart._section(data, 'constants'):
            chart.constants.append(Constant(c['name'], c.get('type', ''), _value(c.get('value'))))

        variables = data.get('variables') or []
        if isinstance(variables, dict):
            # Format used by the MISRA C printer: {input: [], output: [], local: []}
            for scope in SCOPES:
                for v in variables.get(scope) or []:
                    chart.variables.append(Variable(v['name'], v.get('type', ''),
                                                    _value(v.get('value')), scope))
        elif isinstance(variables, list):
            for v in variables:
                chart.variables.append(Variable(v['name'], v.get('type', ''),
                                                _value(v.get('value')), v.get('scope', 'local')))
        else:
            raise ChartError('Bad variables section in the emuchart ' + chart.name)

        for s in Chart._section(data, 'states'):
            chart.add_state(s['name'], s.get('id', ''))

        for t in Chart._section(data, 'transitions'):
            target = _state_name(t.get('target'))
            source = _state_name(t.get('source'))
            if not target or not source:
                raise ChartError('Transition ' + str(t.get('name')) + ' has no source or target state')
            chart.add_transition(Transition(t.get('name') or '', t.get('id', ''), source, target))

        initials = data.get('initial_transitions') or data.get('initialTransitions')
        for t in initials or []:
            target = _state_name(t.get('target'))
            if not target:
                raise ChartError('Initial transition ' + str(t.get('name')) + ' has no target state')
            chart.add_initial_transition(Transition(t.get('name') or '', t.get('id', ''), None, target))
        return chart

    ###########################################################################
    ### Return the list stored in the given section. Missing sections are
    ### empty lists.
    ###########################################################################
    @staticmethod
    def _section(data, key):
        section = data.get(key)
        if section is None:
            return []
        if not isinstance(section, list):
            raise ChartError('The section ' + key + ' of the emuchart shall be a list')
        return section

    @staticmethod
    def from_json(text):
        return Chart.from_dict(json.loads(text))

    @staticmethod
    def load(path):
        return Chart.from_json(Path(path).read_text())
