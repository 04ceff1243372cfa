import pytest

from sudokusolver.io.parser import default_puzzle


@pytest.fixture
def puzzle():
    return default_puzzle()
