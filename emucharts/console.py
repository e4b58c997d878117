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

import sys

###############################################################################
### Console color for print
###############################################################################
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

###############################################################################
### Base class of errors raised by the generators.
###############################################################################
class EmuchartsError(Exception):
    pass

###############################################################################
### The emuchart given as input is malformed (missing name, missing target
### state, sections of the wrong kind ...).
###############################################################################
class ChartError(EmuchartsError):
    pass

###############################################################################
### A token of unknown kind reached a printer.
###############################################################################
class TokenError(EmuchartsError):
    pass

###############################################################################
### Messages collected during a single print invocation. A label that cannot
### be parsed does not abort the generation: the transition is skipped and
### the message is stored here so the caller can display it.
###############################################################################
class Diagnostics(object):
    def __init__(self, name='', verbose=True):
        # Name of the emuchart (displayed in console messages).
        self.name = name
        # Echo messages on the console.
        self.verbose = verbose
        # List of warning messages (plain text).
        self.warnings = []
        # List of error messages (plain text).
        self.errors = []

    ###########################################################################
    ### Print a warning message on the console and memorize it.
    ### param[in] msg the message to print.
    ###########################################################################
    def warning(self, msg):
        self.warnings.append(msg)
        if self.verbose:
            print(f"{bcolors.WARNING}   WARNING in the emuchart " + self.name \
                  + ": " + msg + f"{bcolors.ENDC}")

    ###########################################################################
    ### Print an error message on the console and memorize it. The caller
    ### continues with the next element.
    ### param[in] msg the message to print.
    ###########################################################################
    def error(self, msg):
        self.errors.append(msg)
        if self.verbose:
            print(f"{bcolors.FAIL}   ERROR in the emuchart " + self.name \
                  + ": " + msg + f"{bcolors.ENDC}", file=sys.stderr)

    def __len__(self):
        return len(self.warnings) + len(self.errors)

    def __iter__(self):
        return iter(self.warnings + self.errors)

###############################################################################
### Print a general error message on the console and exit the application.
### Only used by the command line.
### param[in] msg the message to print.
###############################################################################
def fatal(msg):
    print(f"{bcolors.FAIL}   FATAL: " + msg + f"{bcolors.ENDC}", file=sys.stderr)
    sys.exit(-1)
