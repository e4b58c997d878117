from emucharts.mal import MALPrinter, SEPARATOR, mal_text
from emucharts.labels import LabelParser
from charts import make_chart

import pytest

@pytest.fixture
def printer():
    return MALPrinter('pump', verbose=False)

###############################################################################
### Whole generated model.
###############################################################################
def test_print_pump(printer, pump):
    expected = SEPARATOR + '\n' + \
        '#  MAL Model: pump\n' + \
        SEPARATOR + '\n' + \
        '\n' + \
        'defines\n' + \
        ' INT_MIN = -4\n' + \
        ' INT_MAX = 4\n' + \
        'MAX 10\n' + \
        '# K\n' + \
        '\n' + \
        'types\n' + \
        ' int = INT_MIN..INT_MAX\n' + \
        ' nat = 0..INT_MAX\n' + \
        ' MachineState = { idle, running }\n' + \
        '\n' + \
        'interactor main #pump\n' + \
        ' attributes\n' + \
        '  current_state: MachineState\n' + \
        '  previous_state: MachineState\n' + \
        '  display: float\n' + \
        '  x: int\n' + \
        '  y: int\n' + \
        '\n' + \
        ' actions\n' + \
        '  start\n' + \
        '  stop\n' + \
        '\n' + \
        ' [] previous_state = idle & current_state = idle & y := 0\n' + \
        '\n' + \
        "(current_state=idle) & (x>0) -> [start] (current_state'=running) & (y'=y+1)\n" + \
        "(current_state=running) -> [stop] (current_state'=idle)\n" + \
        '\n' + \
        '\n' + SEPARATOR + '\n' + \
        '#  MAL model generated using PVSio-web MALPrinter2 ver 0.1\n' + \
        '#  Tool freely available at http://www.pvsioweb.org\n' + \
        SEPARATOR + '\n'
    assert printer.print(pump) == expected
    assert len(printer.diagnostics) == 0

###############################################################################
### Sections.
###############################################################################
def test_author_and_description(printer):
    chart = make_chart(author={'name': 'Jane', 'affiliation': 'Lab', 'contact': 'jane@lab'},
                       description='A pump')
    descriptor = printer.print_descriptor(chart)
    assert '#  Author: Jane\n#          Lab\n#          jane@lab\n' in descriptor
    assert SEPARATOR + '\n#  A pump\n' in descriptor

def test_several_arcs_per_action(printer):
    chart = make_chart(transitions=[
        {'name': 'tick [ x > 0 ]', 'source': 'idle', 'target': 'running'},
        {'name': 'tick [ x <= 0 ]', 'source': 'idle', 'target': 'idle'},
        {'name': 'tick', 'source': 'running', 'target': 'idle'},
    ])
    text = printer.print_transitions(printer.build_table(chart))
    assert text.splitlines() == [
        "(current_state=idle) & (x>0) -> [tick] (current_state'=running)",
        "(current_state=idle) & (x<=0) -> [tick] (current_state'=idle)",
        "(current_state=running) -> [tick] (current_state'=idle)",
    ]
    assert printer.print_actions(printer.build_table(chart)) == ' actions\n  tick\n\n'

def test_several_effects(printer):
    chart = make_chart(transitions=[
        {'name': 'go { x := 1; y := x AND y }', 'source': 'idle', 'target': 'running'},
    ])
    text = printer.print_transitions(printer.build_table(chart))
    assert text == "(current_state=idle) -> [go] (current_state'=running) & (x'=1 & y'=x&y)\n"

def test_unnamed_transition_is_tick(printer):
    chart = make_chart(transitions=[{'name': '', 'source': 'idle', 'target': 'running'},
                                    {'name': '[ x == 1 ]', 'source': 'running', 'target': 'idle'}])
    table = printer.build_table(chart)
    assert list(table) == ['tick']
    assert len(printer.diagnostics.errors) == 0
    assert printer.print_transitions(table).splitlines() == [
        "(current_state=idle) -> [tick] (current_state'=running)",
        "(current_state=running) & (x=1) -> [tick] (current_state'=idle)",
    ]

def test_no_transitions(printer):
    text = printer.print(make_chart(transitions=[], initial_transitions=[]))
    assert ' actions\n\n\n\n' in text
    assert '->' not in text

def test_bad_label_is_skipped(printer):
    chart = make_chart(transitions=[
        {'name': 'go [ x > ', 'id': 'T1', 'source': 'idle', 'target': 'running'},
        {'name': 'stop', 'id': 'T2', 'source': 'running', 'target': 'idle'},
    ])
    text = printer.print(chart)
    assert '[go]' not in text
    assert '[stop]' in text
    assert len(printer.diagnostics.errors) == 1

def test_chart_warnings_are_reported(printer):
    chart = make_chart(states=[])
    printer.print(chart)
    assert len(printer.diagnostics.warnings) == 2

def test_mal_text():
    label = LabelParser().parse_transition('tick [ NOT a OR b mod 2 == 0 ]').res
    assert mal_text(label.cond) == '!a|b MOD 2=0'
    assert mal_text(None) == ''

def test_modulo_keeps_spaces(printer):
    chart = make_chart(transitions=[
        {'name': 'tick [ x MOD 2 = 0 ] { y := y mod 3 }', 'source': 'idle', 'target': 'running'},
    ])
    text = printer.print_transitions(printer.build_table(chart))
    assert text == "(current_state=idle) & (x MOD 2=0) -> [tick] (current_state'=running) & (y'=y MOD 3)\n"
