from emucharts.__main__ import main
from charts import PUMP

import json
import pytest

@pytest.fixture
def chart_file(tmp_path):
    path = tmp_path / 'pump.json'
    path.write_text(json.dumps(PUMP))
    return path

def test_generate_mal(chart_file, tmp_path):
    assert main([str(chart_file), 'mal', str(tmp_path / 'out')]) == 0
    assert 'interactor main #pump' in (tmp_path / 'out' / 'pump.i').read_text()

def test_generate_misrac(chart_file, tmp_path):
    assert main([str(chart_file), 'misrac', str(tmp_path / 'out')]) == 0
    for name in ['pump.h', 'pump.c', 'main.c', 'Makefile', 'doxygen.conf']:
        assert (tmp_path / 'out' / name).is_file()

def test_bad_target(chart_file):
    with pytest.raises(SystemExit):
        main([str(chart_file), 'java'])

def test_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / 'nope.json'), 'mal'])

def test_malformed_chart(tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text('{"states": []}')
    with pytest.raises(SystemExit):
        main([str(path), 'mal'])
