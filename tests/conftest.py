import pytest

from menagerie.config import set_config
from menagerie.core import animal_counter


@pytest.fixture(autouse=True)
def fresh_counter():
    """Every test starts with zero animals constructed."""
    animal_counter.reset()
    yield animal_counter
    animal_counter.reset()


@pytest.fixture(autouse=True)
def fresh_config():
    set_config(None)
    yield
    set_config(None)
