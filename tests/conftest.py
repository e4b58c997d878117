import pytest

from charts import make_chart

@pytest.fixture
def pump():
    return make_chart()
