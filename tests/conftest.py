import pytest


class RecordingRenderer:
    """Cell renderer that remembers every draw instead of writing files."""

    def __init__(self):
        self.draws = []

    def draw(self, cell, occupied):
        self.draws.append((cell, occupied))


@pytest.fixture
def renderer():
    return RecordingRenderer()
