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

from emucharts.chart import Chart, State, Transition, Variable, Constant
from emucharts.console import Diagnostics, EmuchartsError, ChartError, TokenError
from emucharts.labels import LabelParser, split_label
from emucharts.mal import MALPrinter
from emucharts.misrac import MisraCPrinter, EmissionModel
from emucharts.transitions import (DEFAULT_ACTION, ParsedTransition, GroupedTransition,
                                   group_transitions)

__version__ = '0.1.0'
