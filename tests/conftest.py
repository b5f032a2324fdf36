import pytest

from helpers import declare


@pytest.fixture
def left():
    return declare([{"id": "a", "value": 1}, {"id": "b", "value": 2}])


@pytest.fixture
def right():
    return declare([{"id": "a", "value": 5}, {"id": "c", "value": 9}])
