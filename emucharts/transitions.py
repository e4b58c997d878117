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

from emucharts.normalizer import c_text

# Action fired by transitions whose label does not name any action.
DEFAULT_ACTION = 'tick'

###############################################################################
### Return the action name of a tokenized label.
###############################################################################
def action_id(label):
    if label.identifier is None or label.identifier.val == '':
        return DEFAULT_ACTION
    return label.identifier.val

###############################################################################
### Intermediate representation of a single transition once its label has
### been translated. Example: the transition from state idle to state
### running labelled "start [ x > 0 ] { y := y + 1 }" gives:
###    action_id: 'start', condition: 'st->x > 0',
###    actions: ['st->y = st->y + 1u'], source: 'idle', target: 'running'
###############################################################################
class ParsedTransition(object):
    def __init__(self, action_id, condition='', actions=None, source='', target='', id=''):
        # Name of the action (DEFAULT_ACTION when the label has none).
        self.action_id = action_id
        # Guard as C code (empty when there is no guard).
        self.condition = condition
        # List of state updates as C code.
        self.actions = actions if actions is not None else []
        # Source state name (empty for initial transitions).
        self.source = source
        # Target state name.
        self.target = target
        # Identifier of the emuchart transition.
        self.id = id

    def __eq__(self, other):
        return isinstance(other, ParsedTransition) and self.key() == other.key()

    def key(self):
        return (self.action_id, self.condition, self.actions, self.source, self.target)

    def __repr__(self):
        return 'ParsedTransition(' + self.action_id + ': ' + self.source + ' -> ' + \
               self.target + ' [' + self.condition + '] {' + '; '.join(self.actions) + '})'

###############################################################################
### All transitions sharing the same action: the generated C function of the
### action handles every source and target states. Each instance keeps its
### own guard and actions.
###############################################################################
class GroupedTransition(object):
    def __init__(self, action_id):
        self.action_id = action_id
        # Ordered sets: dictionary keys keep the order of insertion.
        self._sources = dict()
        self._targets = dict()
        # List of ParsedTransition in the order of the emuchart.
        self.instances = []

    @property
    def sources(self):
        return list(self._sources)

    @property
    def targets(self):
        return list(self._targets)

    def has_source(self, name):
        return name in self._sources

    def has_target(self, name):
        return name in self._targets

    ###########################################################################
    ### Add a transition instance. Source and target states are memorized
    ### only if not already present.
    ###########################################################################
    def add(self, tr):
        if tr.source not in self._sources:
            self._sources[tr.source] = None
        if tr.target not in self._targets:
            self._targets[tr.target] = None
        self.instances.append(tr)

    def __repr__(self):
        return 'GroupedTransition(' + self.action_id + ', sources=' + str(self.sources) + \
               ', targets=' + str(self.targets) + ', ' + str(len(self.instances)) + ' instances)'

###############################################################################
### Build the intermediate representation of the transitions of an emuchart.
### Labels are tokenized with the LabelParser then guards and actions are
### translated into C code by the ExpressionNormalizer.
###############################################################################
class TransitionBuilder(object):
    def __init__(self, parser, normalizer, diagnostics):
        # LabelParser.
        self.parser = parser
        # ExpressionNormalizer of the current print invocation.
        self.normalizer = normalizer
        # Diagnostics of the current print invocation.
        self.diagnostics = diagnostics

    ###########################################################################
    ### Translate a single transition.
    ### return ParsedTransition or None if the label has syntax errors.
    ###########################################################################
    def parse(self, tr):
        result = self.parser.parse_transition(tr.name)
        if result.err is not None:
            self.diagnostics.error('Bad label "' + str(tr.name) + '" on the transition ' +
                                   str(tr.id) + ': ' + result.err)
            return None
        label = result.res
        condition = ''
        if label.cond is not None:
            condition = c_text(self.normalizer.normalize(label.cond))
        actions = []
        for a in label.actions or []:
            actions.append(c_text(self.normalizer.normalize(a)))
        return ParsedTransition(action_id(label), condition, actions,
                                tr.source or '', tr.target, tr.id)

    ###########################################################################
    ### Translate transitions. Transitions with bad labels are skipped.
    ###########################################################################
    def build(self, transitions):
        parsed = []
        for tr in transitions:
            p = self.parse(tr)
            if p is not None:
                parsed.append(p)
        return parsed

###############################################################################
### Merge the parsed transitions sharing the same action. The order of the
### groups is the order in which actions are first seen.
### param[in] parsed list of ParsedTransition.
### return list of GroupedTransition.
###############################################################################
def group_transitions(parsed):
    groups = dict()
    for tr in parsed:
        if tr.action_id not in groups:
            groups[tr.action_id] = GroupedTransition(tr.action_id)
        groups[tr.action_id].add(tr)
    return list(groups.values())
