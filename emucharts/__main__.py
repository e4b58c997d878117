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
from emucharts.chart import Chart
from emucharts.console import EmuchartsError, bcolors, fatal
from emucharts.mal import MALPrinter
from emucharts.misrac import MisraCPrinter
from emucharts.render import write_files

import json, sys

###############################################################################
### Display command line usage
###############################################################################
def usage():
    print('Command line: ' + sys.argv[0] + ' <emuchart file> mal|misrac [output dir]')
    print('Where:')
    print('   <emuchart file>: the path of an emuchart saved as JSON')
    print('   "mal" or "misrac": to choose between generating a MAL model or MISRA C files')
    print('   [output dir]: folder of the generated files (default: current folder)')
    print('Example:')
    print('   ' + sys.argv[0] + ' pump.emdl misrac gen')
    print('Will create gen/pump.h gen/pump.c gen/main.c gen/Makefile gen/doxygen.conf')
    sys.exit(-1)

###############################################################################
### Entry point.
### argv[1] Mandatory: path of the emuchart (JSON).
### argv[2] Mandatory: target language.
### argv[3] Optional: output folder.
###############################################################################
def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        usage()
    if argv[1] not in ['mal', 'misrac']:
        print('Invalid ' + argv[1] + '. Please set instead "mal" (for generating a MAL '
              'model) or "misrac" (for generating MISRA C files)')
        usage()
    output_dir = Path(argv[2] if len(argv) > 2 else '.')

    if not Path(argv[0]).is_file():
        fatal('File path ' + argv[0] + ' does not exist')
    try:
        chart = Chart.load(argv[0])
    except (EmuchartsError, json.JSONDecodeError, KeyError) as e:
        fatal('Failed loading the emuchart ' + argv[0] + ': ' + str(e))

    if argv[1] == 'mal':
        printer = MALPrinter(chart.name)
        text = printer.print(chart)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / (chart.name + '.i')
        with open(path, 'w') as f:
            f.write(text)
        paths = [path]
    else:
        printer = MisraCPrinter(chart.name)
        paths = write_files(printer.print_files(chart), chart.name, output_dir)

    for path in paths:
        print(f"{bcolors.OKGREEN}Generated: " + str(path) + f"{bcolors.ENDC}")
    return 1 if len(printer.diagnostics.errors) > 0 else 0

if __name__ == '__main__':
    sys.exit(main())
