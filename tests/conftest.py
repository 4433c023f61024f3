import pytest

from appearance import AppearanceModel, argb_from_rgb


class FakeAppearance:
    """Appearance model with fixed coordinates per color that records every build call."""

    def __init__(self, coordinates=None):
        self.coordinates = dict(coordinates or {})
        self.calls = []

    def to_appearance(self, argb):
        return self.coordinates.get(argb, (0.0, 0.0, 50.0))

    def from_appearance(self, hue, chroma, tone):
        self.calls.append((hue, chroma, tone))
        # Distinct, deterministic output per triple
        return argb_from_rgb(int(hue) % 256, int(chroma) % 256, int(round(tone * 2)) % 256)

    @property
    def model(self):
        return AppearanceModel(self.to_appearance, self.from_appearance)


@pytest.fixture
def fake():
    return FakeAppearance()


@pytest.fixture
def make_fake():
    return FakeAppearance
