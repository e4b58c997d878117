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

from emucharts.console import Diagnostics
from emucharts.labels import LabelParser
from emucharts.normalizer import ExpressionNormalizer
from emucharts.render import Renderer
from emucharts.tables import Declarations, c_type, suffix_literal
from emucharts.transitions import TransitionBuilder, group_transitions

import re

# Type of the enumerate of states.
MACHINE_STATE_TYPE = 'MachineState'
# Predefined fields of the state structure.
PREDEFINED_VARIABLES = ['current_state', 'previous_state']

###############################################################################
### Everything the templates need to generate the C files. Built fresh by
### each MisraCPrinter.print() call.
###############################################################################
class EmissionModel(object):
    def __init__(self, name):
        self.model_name = name
        # Lists of {name, type, value} with MISRA C types and suffixed values.
        self.input_variables = []
        self.output_variables = []
        self.local_variables = []
        self.constants = []
        # Typedefs, defines and includes.
        self.importings = []
        # Fields of the state structure ("TYPE name;").
        self.structure_var = []
        # List of GroupedTransition.
        self.transitions = []
        # List of ParsedTransition.
        self.initial_transitions = []
        # List of {name, id, actions} (actions leaving the state).
        self.states = []
        self.descriptor = ''
        self.disclaimer = ''
        self.makefile_descriptor = ''
        self.makefile_disclaimer = ''

    ###########################################################################
    ### Context given to the templates.
    ###########################################################################
    def to_dict(self):
        return {
            'modelName': self.model_name,
            'input_variables': self.input_variables,
            'output_variables': self.output_variables,
            'local_variables': self.local_variables,
            'constants': self.constants,
            'importings': self.importings,
            'structureVar': self.structure_var,
            'transitions': self.transitions,
            'initial_transitions': self.initial_transitions,
            'states': self.states,
            'descriptor': self.descriptor,
            'disclaimer': self.disclaimer,
            'makefile_descriptor': self.makefile_descriptor,
            'makefile_disclaimer': self.makefile_disclaimer,
        }

###############################################################################
### Replace C comment characters by makefile comment characters.
###############################################################################
def makefile_comment(text):
    return re.sub(r'[*/]', '#', text)

###############################################################################
### Generate MISRA C code (MISRA 1998) from emucharts. The emission model is
### assembled here, the text is generated by the jinja2 templates.
###############################################################################
class MisraCPrinter(object):
    def __init__(self, name='', verbose=True, template_dir=None):
        # Name of the generated model.
        self.model_name = name
        # Echo diagnostics on the console.
        self.verbose = verbose
        # Tokenizer of transition labels.
        self.parser = LabelParser()
        # Template renderer.
        self.renderer = Renderer(template_dir)
        # Declarations and diagnostics of the last print invocation.
        self.declarations = Declarations()
        self.diagnostics = Diagnostics(name, verbose)

    ###########################################################################
    ### Translate a variable or a constant into {name, type, value}. Char
    ### values are quoted, numbers are suffixed.
    ###########################################################################
    def translate_variable(self, v):
        ctype = c_type(v.type, self.declarations)
        if v.type.lower() == 'char':
            value = None if v.value is None else '"' + v.value + '"'
        else:
            value = suffix_literal(v.value, ctype)
        return {'name': v.name, 'type': ctype, 'value': value}

    def print_variables(self, chart, model):
        model.input_variables = [self.translate_variable(v) for v in chart.variables_of('input')]
        model.output_variables = [self.translate_variable(v) for v in chart.variables_of('output')]
        model.local_variables = [self.translate_variable(v) for v in chart.variables_of('local')]

    ###########################################################################
    ### Boolean declarations (always needed) and fields of the state
    ### structure: local variables then the predefined ones.
    ###########################################################################
    def print_declarations(self, chart, model):
        self.declarations.add_booleans()
        model.structure_var = [v['type'] + ' ' + v['name'] + ';' for v in model.local_variables]
        for name in PREDEFINED_VARIABLES:
            model.structure_var.append(MACHINE_STATE_TYPE + ' ' + name + ';  ///<  Predefined variable for ' +
                                       name.replace('_state', '') + ' state.')

    def print_constants(self, chart, model):
        model.constants = [self.translate_variable(c) for c in chart.constants]

    def print_transitions(self, chart, model, builder):
        model.transitions = group_transitions(builder.build(chart.transitions))

    def print_initial_transitions(self, chart, model, builder):
        model.initial_transitions = builder.build(chart.initial_transitions)

    ###########################################################################
    ### States and the actions leaving them (for the documentation).
    ###########################################################################
    def print_states(self, chart, model):
        lookup = dict()
        for group in model.transitions:
            for tr in group.instances:
                lookup[tr.id] = group.action_id
        model.states = []
        for s in chart.states:
            actions = []
            for tr in chart.outgoing(s.name):
                action = lookup.get(tr.id)
                if action is not None and action not in actions:
                    actions.append(action)
            model.states.append({'name': s.name, 'id': s.id, 'actions': actions})

    def print_descriptor(self, chart, model):
        model.descriptor = '/**---------------------------------------------------------------' + \
                           '\n*   Model: ' + chart.name
        if chart.author is not None:
            model.descriptor += '\n*   Author: ' + chart.author.name + \
                                '\n*           ' + chart.author.affiliation + \
                                '\n*           ' + chart.author.contact
        if chart.description != '':
            model.descriptor += '\n*  ---------------------------------------------------------------' + \
                                '\n*   ' + chart.description
        model.descriptor += '\n*  ---------------------------------------------------------------*/\n'
        model.makefile_descriptor = makefile_comment(model.descriptor)

    def print_disclaimer(self, chart, model):
        model.disclaimer = '\n/** ---------------------------------------------------------------\n' + \
                           '*   C code generated using PVSio-web MisraCPrinter ver 0.1\n' + \
                           '*   Tool freely available at http://www.pvsioweb.org' + \
                           '\n*  --------------------------------------------------------------*/\n'
        model.makefile_disclaimer = makefile_comment(model.disclaimer).replace('C code', 'Makefile')

    ###########################################################################
    ### Entry point: return the EmissionModel of the emuchart. Declarations
    ### and diagnostics are reset so that successive calls do not share them.
    ###########################################################################
    def print(self, chart):
        self.declarations = Declarations()
        self.diagnostics = Diagnostics(chart.name, self.verbose)
        for msg in chart.warnings:
            self.diagnostics.warning(msg)
        normalizer = ExpressionNormalizer(chart, self.declarations)
        builder = TransitionBuilder(self.parser, normalizer, self.diagnostics)

        model = EmissionModel(self.model_name or chart.name)
        self.print_variables(chart, model)
        self.print_declarations(chart, model)
        self.print_constants(chart, model)
        self.print_transitions(chart, model, builder)
        self.print_initial_transitions(chart, model, builder)
        self.print_states(chart, model)
        self.print_disclaimer(chart, model)
        self.print_descriptor(chart, model)
        model.importings = list(self.declarations)
        return model

    ###########################################################################
    ### Return the generated files: {header, main, thread, makefile, doxygen}.
    ###########################################################################
    def print_files(self, chart):
        return self.renderer.render(self.print(chart))
