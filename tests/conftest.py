import random

import pytest


class FakeCanvas:
    def __init__(self):
        self.fill_style = ""
        self.calls = []

    def fill_rect(self, x, y, width, height):
        self.calls.append(("fill", self.fill_style, x, y, width, height))

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear", x, y, width, height))


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def fixed_random():
    return FixedRandom
