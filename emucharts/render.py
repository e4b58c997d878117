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
from jinja2 import Environment, FileSystemLoader, select_autoescape

import re

# Kind of generated file => template.
TEMPLATES = {
    'header': 'header.h.jinja2',
    'main': 'main.c.jinja2',
    'thread': 'thread.c.jinja2',
    'makefile': 'makefile.jinja2',
    'doxygen': 'doxygen.jinja2',
}

###############################################################################
### Name of the generated file for each kind of file.
###############################################################################
def file_names(model_name):
    return {
        'header': model_name + '.h',
        'main': 'main.c',
        'thread': model_name + '.c',
        'makefile': 'Makefile',
        'doxygen': 'doxygen.conf',
    }

###############################################################################
### Convert a name into a C macro name (i.e. for include guards).
###############################################################################
def macro_name(name):
    return re.sub(r'[^A-Za-z0-9_]', '_', name).upper()

###############################################################################
### Escape a C string literal.
###############################################################################
def escape_c(text):
    if not text:
        return ''
    text = text.replace('\\', '\\\\')
    text = text.replace('"', '\\"')
    text = text.replace('\n', '\\n')
    return text

###############################################################################
### Generate the text of the C files from an EmissionModel using jinja2
### templates. Rendering has no side effect on the model.
###############################################################################
class Renderer(object):
    def __init__(self, template_dir=None):
        if template_dir is None:
            template_dir = Path(__file__).parent / 'templates'
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml']),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )
        self.env.filters['macro'] = macro_name
        self.env.filters['escape_c'] = escape_c
        # Makefile recipes need tabulations.
        self.env.globals['TAB'] = '\t'

    ###########################################################################
    ### Render a single kind of file.
    ###########################################################################
    def render_one(self, kind, model):
        template = self.env.get_template(TEMPLATES[kind])
        return template.render(**model.to_dict())

    ###########################################################################
    ### Render all files: {header, main, thread, makefile, doxygen}.
    ###########################################################################
    def render(self, model):
        return {kind: self.render_one(kind, model) for kind in TEMPLATES}

###############################################################################
### Write the generated files inside the given folder.
### return the list of written paths.
###############################################################################
def write_files(files, model_name, output_dir):
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for kind, name in file_names(model_name).items():
        if kind not in files:
            continue
        path = output_dir / name
        with open(path, 'w') as f:
            f.write(files[kind])
        paths.append(path)
    return paths
