# type: ignore
import pytest

import intvm.runtime.cpu as cpu

import unit_utils


@pytest.fixture
def quine_engine():
    yield cpu.Engine(unit_utils.load_program('quine'))


@pytest.fixture
def compare8_engine():
    yield cpu.Engine(unit_utils.load_program('compare8'))


@pytest.fixture
def echo_engine():
    # Reads one value, prints it back, exits
    yield cpu.Engine('3,0,4,0,99')
