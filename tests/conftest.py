import pytest

from cargo_loader.carrier import Carrier
from cargo_loader.models import Good, Worker


@pytest.fixture
def worker():
    return Worker("Budi", 5000)


@pytest.fixture
def carrier():
    return Carrier("Truk Ekspedisi", 500)


@pytest.fixture
def scripted_input():
    """Returns a factory building an input() stand-in from a list of answers."""
    def make(answers):
        remaining = list(answers)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        fake_input.prompts = prompts
        return fake_input
    return make

