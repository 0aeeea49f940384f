import pytest

from .models import Nested, Record


@pytest.fixture(params=['json', 'msgpack'])
def codec(request):
    return request.param


@pytest.fixture
def nested():
    return Nested('snek', ['a', 'b'], {'x': 1.5, 'y': -2.0}, Record(1))
