from emucharts.chart import Chart
from emucharts.console import ChartError
from charts import PUMP, make_chart

import json
import pytest

def test_load_pump(pump):
    assert pump.name == 'pump'
    assert [s.name for s in pump.states] == ['idle', 'running']
    assert [s.id for s in pump.states] == ['X1', 'X2']
    assert [c.name for c in pump.constants] == ['MAX', 'K']
    assert pump.constants[1].value is None
    assert [(v.name, v.scope) for v in pump.variables] == \
        [('display', 'output'), ('x', 'local'), ('y', 'local')]
    assert [str(t) for t in pump.transitions] == \
        ['idle ==> running : start [ x > 0 ] { y := y + 1 }', 'running ==> idle : stop']
    assert pump.initial_transitions[0].source is None
    assert pump.initial_transitions[0].target == 'idle'
    assert pump.warnings == []

def test_graph(pump):
    assert pump.graph.number_of_nodes() == 2
    assert pump.graph.number_of_edges() == 2
    assert pump.graph.has_edge('idle', 'running', key='T1')
    assert [t.id for t in pump.outgoing('idle')] == ['T1']
    assert pump.outgoing('unknown') == []

def test_parallel_transitions():
    chart = make_chart(transitions=[
        {'name': 'a', 'source': 'idle', 'target': 'running'},
        {'name': 'b', 'source': 'idle', 'target': 'running'},
    ])
    assert [t.id for t in chart.transitions] == ['T1', 'T2']
    assert chart.graph.number_of_edges('idle', 'running') == 2
    assert [t.name for t in chart.outgoing('idle')] == ['a', 'b']

def test_flat_variables():
    chart = make_chart(variables=[
        {'name': 'a', 'type': 'int', 'value': 3, 'scope': 'input'},
        {'name': 'b', 'type': 'bool', 'value': True},
        {'name': 'c', 'type': 'int', 'scope': 'global'},
    ])
    assert [(v.name, v.value, v.scope) for v in chart.variables] == \
        [('a', '3', 'input'), ('b', 'true', 'local'), ('c', None, 'local')]
    assert chart.find_variable('b').type == 'bool'
    assert chart.find_variable('z') is None

def test_undeclared_states():
    chart = make_chart(states=[], initialTransitions=[{'name': '', 'target': 'off'}],
                       initial_transitions=None)
    assert [s.name for s in chart.states] == ['idle', 'running', 'off']
    assert len(chart.warnings) == 3

def test_constant_lookup(pump):
    assert pump.is_constant('MAX')
    assert not pump.is_constant('x')

def test_from_json():
    chart = Chart.from_json(json.dumps(PUMP))
    assert chart.name == 'pump'

def test_load_file(tmp_path):
    path = tmp_path / 'pump.json'
    path.write_text(json.dumps(PUMP))
    assert len(Chart.load(path).transitions) == 2

def test_bad_charts():
    with pytest.raises(ChartError):
        Chart.from_dict([])
    with pytest.raises(ChartError):
        Chart.from_dict({'states': []})
    with pytest.raises(ChartError):
        make_chart(states={'name': 'idle'})
    with pytest.raises(ChartError):
        make_chart(variables='x')
    with pytest.raises(ChartError):
        make_chart(transitions=[{'name': 'a', 'source': 'idle'}])

def test_states_with_same_name():
    chart = make_chart(states=[{'name': 'idle', 'id': 'X1'}, {'name': 'running', 'id': 'X2'},
                               {'name': 'idle', 'id': 'X3'}])
    assert [s.id for s in chart.states] == ['X1', 'X2']
    assert len(chart.warnings) == 1
    assert 'X3' in chart.warnings[0]
