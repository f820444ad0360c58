import random

import pytest

from snake.controls import Key


class FakeInput:
    """Scripted keyboard: `held` keys answer is_down, `pressed` keys answer is_pressed."""

    def __init__(self, held=(), pressed=()):
        self.held = set(held)
        self.pressed = set(pressed)

    def is_down(self, key: Key) -> bool:
        return key in self.held

    def is_pressed(self, key: Key) -> bool:
        return key in self.pressed


class FixedRng:
    """Returns the scripted values in order from randrange(), cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        value = self.values[len(self.calls) % len(self.values)]
        self.calls.append(stop)
        return value


@pytest.fixture
def keys():
    """Factory for a FakeInput: keys(held=[Key.UP], pressed=[Key.CONFIRM])."""
    return FakeInput


@pytest.fixture
def no_keys():
    return FakeInput()


@pytest.fixture
def confirm():
    return FakeInput(pressed=[Key.CONFIRM])


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def rng():
    return random.Random(1234)
